#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from pathlib import Path
import os
import pytest


@pytest.fixture(autouse=True)
def restore_cwd():
    # tests leave the process in deleted or unreadable directories on purpose
    cwd = os.getcwd()
    yield
    os.chdir(cwd)


@pytest.fixture()
def work_dir(tmp_path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    os.chdir(work)
    return work.resolve()

