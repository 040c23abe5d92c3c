"""
Custom exceptions for system-install tool
"""


class InstallationError(Exception):
    """Base exception for installation errors"""
    pass


class ValidationError(InstallationError):
    """Raised when validation fails"""
    pass


class UnsupportedPlatformError(ValidationError):
    """Raised when the host OS or CPU architecture is not supported"""
    pass


class VersionLookupError(InstallationError):
    """Raised when the latest release cannot be determined"""
    pass


class DownloadError(InstallationError):
    """Raised when the server refuses a download"""
    pass


class ExtractionError(InstallationError):
    """Raised when an archive is malformed or unsafe to extract"""
    pass


class CopyError(InstallationError):
    """Raised when a file cannot be copied into place"""
    pass
