"""
system-install: install system components from their upstream releases
"""

__version__ = "1.0.0"

from .installer import (
    FirecrackerInstaller,
    FirecrackerOptions,
    artifact_filename,
    artifact_url,
    resolve_version,
    validate_platform,
)
from .exceptions import (
    InstallationError,
    ValidationError,
    UnsupportedPlatformError,
    VersionLookupError,
    DownloadError,
    ExtractionError,
    CopyError,
)

__all__ = [
    "FirecrackerInstaller",
    "FirecrackerOptions",
    "artifact_filename",
    "artifact_url",
    "resolve_version",
    "validate_platform",
    "InstallationError",
    "ValidationError",
    "UnsupportedPlatformError",
    "VersionLookupError",
    "DownloadError",
    "ExtractionError",
    "CopyError",
]
