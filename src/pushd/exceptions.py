#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

import errno
from pathlib import Path
from typing import Union


class PushdError(Exception):
    pass


class QueryCurrentDirectoryError(PushdError):
    def __init__(self, source: OSError):
        super().__init__(f"Could not get current directory: {source}")
        self.source = source


class SetCurrentDirectoryError(PushdError):
    def __init__(self, path: Union[str, Path], source: OSError):
        super().__init__(f"Could not set current directory to {path}: {source}")
        self.path = path
        self.source = source

    @property
    def not_found(self) -> bool:
        return isinstance(self.source, FileNotFoundError) or self.source.errno == errno.ENOENT


class PushdPanic(RuntimeError):
    """Raised when a strict guard cannot get back to where it started"""
