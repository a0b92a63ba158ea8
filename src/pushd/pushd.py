#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""
A `Pushd` changes the current directory when it is created and changes back
to the original directory when its scope ends.

```py
with Pushd.new("/tmp/build"):
    ...  # relative paths resolve against /tmp/build
# back where we started
```

If the original directory no longer exists when the guard exits, that is
ignored, since the original was most likely a temporary directory that got
cleaned up. Any other failure to change back is fatal by default: `panic` is
called and raises `PushdPanic`. Guards built with `Pushd.new_no_panic` only
log a warning instead.

A guard that is never closed (no `with`, no `close()`) changes back when it
is garbage collected. The same rules apply there, except that a fatal failure
can only be logged as an error, since nothing can be raised from a finalizer.

The current directory is process-wide state. Nothing here serializes access
to it, so callers running threads must do that themselves.
"""

from pathlib import Path
from typing import Callable, Optional, TypeAlias, Union
import logging
import os

from . import settings
from .exceptions import PushdPanic, QueryCurrentDirectoryError, SetCurrentDirectoryError

log = logging.getLogger(__name__)

PathLike: TypeAlias = Union[str, os.PathLike]
FailureHandler: TypeAlias = Callable[[SetCurrentDirectoryError], None]


def panic(error: SetCurrentDirectoryError) -> None:
    raise PushdPanic(f"Could not return to original dir: {error}") from error


class Pushd:
    def __init__(
        self,
        path: PathLike,
        panic_on_failure: Optional[bool] = None,
        on_failure: Optional[FailureHandler] = None,
    ):
        try:
            cwd = Path(os.getcwd())
        except OSError as e:
            raise QueryCurrentDirectoryError(e) from e

        try:
            os.chdir(path)
        except OSError as e:
            raise SetCurrentDirectoryError(path, e) from e

        log.debug(f"set current dir to {os.fsdecode(path)} from {cwd}")

        self._original_directory = cwd
        self.panic_on_failure = settings.panic_on_failure() if panic_on_failure is None else panic_on_failure
        self.on_failure = on_failure or panic
        self.released = False
        self._closed = False

    @classmethod
    def new(cls, path: PathLike, on_failure: Optional[FailureHandler] = None) -> "Pushd":
        """Guard that treats a failed return to the original directory as fatal"""
        return cls(path, panic_on_failure=True, on_failure=on_failure)

    @classmethod
    def new_no_panic(cls, path: PathLike) -> "Pushd":
        """Guard that only logs a warning when it cannot return"""
        return cls(path, panic_on_failure=False)

    @property
    def original_directory(self) -> Path:
        return self._original_directory

    def pop(self) -> None:
        """
        Change back to the original directory the first time it is called.
        Later calls do nothing. If the change fails, `released` stays False
        so the caller (or the scope exit) can try again.
        """
        if self.released:
            return

        log.debug(f"setting current dir back to {self._original_directory}")
        try:
            os.chdir(self._original_directory)
        except OSError as e:
            raise SetCurrentDirectoryError(self._original_directory, e) from e
        self.released = True

    def close(self) -> None:
        self._closed = True
        self._restore(self.on_failure)

    def _restore(self, fatal: FailureHandler) -> None:
        try:
            self.pop()
        except SetCurrentDirectoryError as e:
            if not self.panic_on_failure:
                log.warning(f"Could not return to original dir: {e}")
                return

            if e.not_found:
                return

            fatal(e)

    def __enter__(self) -> "Pushd":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        # a guard that never reached close(); exceptions cannot leave a finalizer
        if getattr(self, "_closed", True) or self.released:
            return
        self._restore(lambda e: log.error(f"Could not return to original dir: {e}"))

    def __repr__(self) -> str:
        policy = "panic" if self.panic_on_failure else "no_panic"
        return f"<Pushd original={str(self._original_directory)!r} {policy} released={self.released}>"
