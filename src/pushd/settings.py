#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from decouple import config


def panic_on_failure() -> bool:
    return config("PUSHD_PANIC_ON_FAILURE", default=True, cast=bool)


def log_verbosity() -> int:
    return config("PUSHD_LOG_VERBOSITY", default=2, cast=int)
