"""
Constants used throughout the system-install tool
"""

from . import __version__

# GitHub release constants
GITHUB_DOWNLOAD_TEMPLATE = "https://github.com/{owner}/{repo}/releases/download/{version}/{filename}"
GITHUB_LATEST_TEMPLATE = "https://github.com/{owner}/{repo}/releases/latest"
GITHUB_LATEST = "latest"

FIRECRACKER_OWNER = "firecracker-microvm"
FIRECRACKER_REPO = "firecracker"

# Directory constants
DEFAULT_INSTALL_DIR = "/usr/local/bin"
TEMP_DIR_PREFIX = "firecracker"
DOWNLOAD_DIR_PREFIX = "system-install-"

# File operation constants
DEFAULT_PERMISSIONS = 0o755
CHUNK_SIZE = 64 * 1024

# Platform constants
SUPPORTED_OS = "linux"
SUPPORTED_ARCHS = ("x86_64", "aarch64")

# Network constants
USER_AGENT = f"system-install/{__version__}"
GITHUB_TIMEOUT = 10
DOWNLOAD_TIMEOUT = 300
