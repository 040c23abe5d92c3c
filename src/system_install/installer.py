"""
Firecracker installation for system-install tool
"""

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .archive import untar
from .constants import (
    DEFAULT_INSTALL_DIR,
    FIRECRACKER_OWNER,
    FIRECRACKER_REPO,
    GITHUB_DOWNLOAD_TEMPLATE,
    GITHUB_LATEST,
    SUPPORTED_ARCHS,
    SUPPORTED_OS,
    TEMP_DIR_PREFIX,
)
from .download import download_file, find_github_release
from .env import get_client_arch
from .exceptions import UnsupportedPlatformError
from .file_ops import copy_file


@dataclass
class FirecrackerOptions:
    """Per-invocation settings for the firecracker command"""
    version: str = GITHUB_LATEST
    install_path: str = DEFAULT_INSTALL_DIR
    show_progress: bool = True


def validate_platform(arch: str, os_name: str) -> None:
    """Fail unless the host is Linux on x86_64 or aarch64"""
    if os_name.lower() != SUPPORTED_OS:
        raise UnsupportedPlatformError(f"this app only supports Linux, not {os_name}")

    if arch not in SUPPORTED_ARCHS:
        raise UnsupportedPlatformError(
            f"this app only supports {' and '.join(SUPPORTED_ARCHS)} and not {arch}"
        )


def resolve_version(requested: str, owner: str = FIRECRACKER_OWNER,
                    repo: str = FIRECRACKER_REPO) -> str:
    """Turn the requested version into a release tag.

    ``latest`` is looked up on GitHub and the tag it returns is trusted as-is.
    Anything else gets a leading ``v`` if it lacks one.
    """
    if requested == GITHUB_LATEST:
        return find_github_release(owner, repo)
    if not requested.startswith("v"):
        return "v" + requested
    return requested


def artifact_filename(repo: str, version: str, arch: str) -> str:
    """Name of the release archive for version and arch"""
    return f"{repo}-{version}-{arch}.tgz"


def artifact_url(owner: str, repo: str, version: str, arch: str) -> str:
    """GitHub release download URL of the archive for version and arch"""
    return GITHUB_DOWNLOAD_TEMPLATE.format(
        owner=owner,
        repo=repo,
        version=version,
        filename=artifact_filename(repo, version, arch),
    )


class FirecrackerInstaller:
    """Download a Firecracker release and install firecracker and jailer"""

    owner = FIRECRACKER_OWNER
    repo = FIRECRACKER_REPO
    binaries = ("firecracker", "jailer")

    def __init__(self, options: Optional[FirecrackerOptions] = None) -> None:
        self.options = options or FirecrackerOptions()
        self.install_dir = Path(self.options.install_path)

    def create_install_dir(self) -> None:
        """Create the install directory, reporting but tolerating failures.

        Failures are printed, not raised; an unusable directory surfaces
        as an error from the copy step.
        """
        try:
            self.install_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Error creating directory {self.install_dir}, error: {e}")

    def files_to_copy(self, unpack_dir: Path, version: str, arch: str) -> Dict[Path, Path]:
        """Map extracted release binaries to their installed names"""
        return {
            unpack_dir / f"{name}-{version}-{arch}": self.install_dir / name
            for name in self.binaries
        }

    def install(self) -> Dict[Path, Path]:
        """Run the full install and return the source -> destination mapping"""
        print(f"Installing Firecracker to {self.install_dir}")

        arch, os_name = get_client_arch()
        validate_platform(arch, os_name)

        self.create_install_dir()

        version = resolve_version(self.options.version, self.owner, self.repo)
        print(f"Installing version: {version} for: {arch}")

        download_url = artifact_url(self.owner, self.repo, version, arch)
        print(f"Downloading from: {download_url}")
        out_path = download_file(download_url, self.options.show_progress)
        print(f"Downloaded to: {out_path}")

        with open(out_path, "rb") as f:
            unpack_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
            print(f"Unpacking Firecracker to: {unpack_dir}")
            # Release archives wrap everything in release-<version>-<arch>/
            untar(f, unpack_dir, gzip=True, strip_components=1)

        print(f"Copying Firecracker binaries to: {self.install_dir}")
        installed = self.files_to_copy(unpack_dir, version, arch)
        for src, dst in installed.items():
            copy_file(src, dst)
            print(f"✓ Installed {dst}")

        return installed
