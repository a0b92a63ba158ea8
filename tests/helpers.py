#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from pathlib import Path
import os
import pytest


def resolved_cwd() -> Path:
    return Path(os.getcwd()).resolve()


skip_if_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="root ignores directory permissions",
)
