#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from .exceptions import PushdError, PushdPanic, QueryCurrentDirectoryError, SetCurrentDirectoryError
from .pushd import Pushd, panic
from .utils import change_directory

__all__ = [
    "Pushd",
    "PushdError",
    "PushdPanic",
    "QueryCurrentDirectoryError",
    "SetCurrentDirectoryError",
    "change_directory",
    "panic",
]
