#!/usr/bin/env python3
"""
Test suite for file copy helpers
"""

import pytest
import os
import sys

# Add the parent directory to the path to import our module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.system_install.file_ops import copy_file
from src.system_install.exceptions import CopyError


class TestCopyFile:
    """Test copy_file"""

    def test_copies_bytes(self, tmp_path):
        source = tmp_path / "firecracker-v1.0.0-x86_64"
        payload = os.urandom(200 * 1024)
        source.write_bytes(payload)
        target = tmp_path / "firecracker"

        copied = copy_file(source, target)

        assert copied == len(payload)
        assert target.read_bytes() == payload

    def test_sets_executable_permissions(self, tmp_path):
        source = tmp_path / "src"
        source.write_bytes(b"binary")
        source.chmod(0o600)
        target = tmp_path / "dst"

        copy_file(source, target)

        assert target.stat().st_mode & 0o777 == 0o755

    def test_overwrites_existing_target(self, tmp_path):
        source = tmp_path / "src"
        source.write_bytes(b"new")
        target = tmp_path / "dst"
        target.write_bytes(b"old and longer")

        copy_file(str(source), str(target))

        assert target.read_bytes() == b"new"

    def test_leaves_no_temporary_files(self, tmp_path):
        source = tmp_path / "src"
        source.write_bytes(b"binary")
        out_dir = tmp_path / "bin"
        out_dir.mkdir()

        copy_file(source, out_dir / "jailer")

        assert [p.name for p in out_dir.iterdir()] == ["jailer"]

    def test_missing_source(self, tmp_path):
        with pytest.raises(CopyError, match="not a regular file"):
            copy_file(tmp_path / "missing", tmp_path / "dst")

    def test_directory_source(self, tmp_path):
        with pytest.raises(CopyError, match="not a regular file"):
            copy_file(tmp_path, tmp_path / "dst")

    def test_missing_target_directory(self, tmp_path):
        source = tmp_path / "src"
        source.write_bytes(b"binary")

        with pytest.raises(FileNotFoundError):
            copy_file(source, tmp_path / "nowhere" / "dst")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
