#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from typing import Iterator, Optional
import contextlib

from .pushd import Pushd, PathLike


@contextlib.contextmanager
def change_directory(new_dir: PathLike, panic_on_failure: Optional[bool] = None) -> Iterator[Pushd]:
    # Failing to get into new_dir propagates to the caller before the block runs
    guard = Pushd(new_dir, panic_on_failure=panic_on_failure)

    try:
        yield guard

    finally:
        guard.close()
