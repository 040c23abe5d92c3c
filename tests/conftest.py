"""
Shared fixtures for system-install tests
"""

import io
import os
import sys
import tarfile
import tempfile

import pytest

# Add the parent directory to the path to import our module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def add_bytes(tar, name, data, mode=0o755):
    """Add an in-memory regular file to an open tarfile"""
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mode = mode
    tar.addfile(info, io.BytesIO(data))


def add_dir(tar, name):
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = 0o755
    tar.addfile(info)


@pytest.fixture
def private_tempdir(tmp_path, monkeypatch):
    """Point tempfile at a per-test directory so nothing leaks into /tmp"""
    temp_root = tmp_path / "tmp"
    temp_root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_root))
    return temp_root


@pytest.fixture
def release_archive(tmp_path):
    """Build a Firecracker-style release .tgz and return (path, contents)"""
    def _build(version="v1.0.0", arch="x86_64"):
        top = f"release-{version}-{arch}"
        contents = {
            f"firecracker-{version}-{arch}": b"\x7fELF firecracker " + version.encode(),
            f"jailer-{version}-{arch}": b"\x7fELF jailer " + version.encode(),
            "SHA256SUMS": b"deadbeef  firecracker\n",
        }
        path = tmp_path / f"firecracker-{version}-{arch}.tgz"
        with tarfile.open(path, "w:gz") as tar:
            add_dir(tar, top)
            for name, data in contents.items():
                add_bytes(tar, f"{top}/{name}", data)
        return path, contents

    return _build
