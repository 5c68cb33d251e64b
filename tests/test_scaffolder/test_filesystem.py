"""Tests for the filesystem collaborator."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from expressgen.errors import FilesystemWriteFailure
from expressgen.scaffolder.filesystem import FileSystem

pytestmark = pytest.mark.unit


class TestFileSystem:
    def test_make_dir_creates_parents(self, tmp_path, quiet_fs):
        target = quiet_fs.make_dir(tmp_path / "a" / "b" / "c")
        assert target.is_dir()

    def test_make_dir_existing_is_fine(self, tmp_path, quiet_fs):
        quiet_fs.make_dir(tmp_path / "a")
        quiet_fs.make_dir(tmp_path / "a")
        assert (tmp_path / "a").is_dir()

    def test_make_dir_over_file_fails(self, tmp_path, quiet_fs):
        (tmp_path / "taken").write_text("x", encoding="utf-8")
        with pytest.raises(FilesystemWriteFailure):
            quiet_fs.make_dir(tmp_path / "taken" / "sub")

    def test_write_and_mode(self, tmp_path, quiet_fs):
        target = quiet_fs.write(tmp_path / "run.js", "#!/usr/bin/env node\n", mode=0o755)
        assert target.read_text(encoding="utf-8") == "#!/usr/bin/env node\n"
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o755

    def test_write_overwrites(self, tmp_path, quiet_fs):
        target = tmp_path / "file.txt"
        target.write_text("old", encoding="utf-8")
        quiet_fs.write(target, "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_write_missing_parent_fails(self, tmp_path, quiet_fs):
        with pytest.raises(FilesystemWriteFailure) as exc_info:
            quiet_fs.write(tmp_path / "missing" / "file.txt", "x")
        assert exc_info.value.path == tmp_path / "missing" / "file.txt"

    def test_list_dir(self, tmp_path, quiet_fs):
        (tmp_path / "b").write_text("", encoding="utf-8")
        (tmp_path / "a").mkdir()
        assert quiet_fs.list_dir(tmp_path) == ["a", "b"]

    def test_list_dir_missing(self, tmp_path, quiet_fs):
        with pytest.raises(FileNotFoundError):
            quiet_fs.list_dir(tmp_path / "nope")

    def test_verbose_reports_created_paths(self, tmp_path, capsys):
        fs = FileSystem()
        fs.make_dir(tmp_path / "public")
        fs.write(tmp_path / "public" / "index.html", "<html></html>")
        out = capsys.readouterr().out
        assert f"create : {tmp_path / 'public'}{os.sep}" in out
        assert f"create : {tmp_path / 'public' / 'index.html'}" in out

    def test_list_dir_on_file_fails(self, tmp_path, quiet_fs):
        target = tmp_path / "file.txt"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(FilesystemWriteFailure) as exc_info:
            quiet_fs.list_dir(target)
        assert exc_info.value.path == target

    def test_list_dir_unreadable_fails(self, tmp_path, quiet_fs):
        denied = PermissionError(13, "Permission denied")
        with patch.object(Path, "iterdir", side_effect=denied):
            with pytest.raises(FilesystemWriteFailure, match="Permission denied"):
                quiet_fs.list_dir(tmp_path)
