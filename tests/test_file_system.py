import os

import pytest

from miniftp.entities.file_system_manager import SecurityError


class TestLocalFileSystem:
    def test_paths_are_relative_to_root(self, tmp_path, file_system):
        (tmp_path / "a.txt").write_bytes(b"x")
        assert file_system.exists("a.txt")
        assert file_system.exists("/a.txt")
        assert file_system.resolve("/a.txt") == str(tmp_path / "a.txt")

    def test_parent_references_stay_inside_root(self, tmp_path, file_system):
        assert file_system.resolve("../../etc/passwd") == os.path.join(str(tmp_path), "etc", "passwd")
        assert file_system.resolve("/..") == str(tmp_path)

    def test_list_names(self, tmp_path, file_system):
        (tmp_path / "one").write_bytes(b"")
        (tmp_path / "two").mkdir()
        assert file_system.is_dir(".")
        assert sorted(file_system.list_names(".")) == ["one", "two"]

    def test_create_truncates(self, tmp_path, file_system):
        (tmp_path / "f").write_bytes(b"old content")
        with file_system.create("f") as f:
            f.write(b"new")
        with file_system.open_read("f") as f:
            assert f.read() == b"new"

    def test_missing_path(self, file_system):
        assert not file_system.exists("missing")

    def test_null_byte_rejected(self, file_system):
        with pytest.raises(SecurityError):
            file_system.resolve("a\x00b")
        assert not file_system.exists("a\x00b")
