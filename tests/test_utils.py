#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """

from pathlib import Path
from unittest import mock
import errno
import os
import pytest
import tempfile

from pushd import Pushd, PushdPanic, SetCurrentDirectoryError, change_directory

from helpers import resolved_cwd


class TestChangeDirectory:
    def test_round_trip(self, work_dir) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with change_directory(tmpdir) as pd:
                assert isinstance(pd, Pushd)
                assert resolved_cwd() == Path(tmpdir).resolve()
            assert pd.released is True
            assert resolved_cwd() == work_dir

    def test_restores_after_exception(self, work_dir) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(KeyError):
                with change_directory(tmpdir):
                    raise KeyError("missing")
            assert resolved_cwd() == work_dir

    def test_missing_directory(self, work_dir) -> None:
        with pytest.raises(SetCurrentDirectoryError):
            with change_directory(work_dir / "nope"):
                pytest.fail("block should not run")
        assert resolved_cwd() == work_dir

    def test_policy_is_passed_through(self, work_dir) -> None:
        denied = PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(work_dir))
        with tempfile.TemporaryDirectory() as tmpdir:
            with change_directory(tmpdir, panic_on_failure=False) as pd:
                assert pd.panic_on_failure is False
                with mock.patch("os.chdir", side_effect=denied):
                    pd.close()
            assert resolved_cwd() == work_dir

        real_chdir = os.chdir
        calls = []

        def chdir_once(path):
            calls.append(path)
            if len(calls) > 1:
                raise denied
            real_chdir(path)

        with tempfile.TemporaryDirectory() as tmpdir:
            with mock.patch("os.chdir", side_effect=chdir_once):
                with pytest.raises(PushdPanic, match="Permission denied"):
                    with change_directory(tmpdir, panic_on_failure=True):
                        assert resolved_cwd() == Path(tmpdir).resolve()
            assert len(calls) == 2
            assert resolved_cwd() == Path(tmpdir).resolve()
