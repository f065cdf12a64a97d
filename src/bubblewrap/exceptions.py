"""Bubblewrap exception hierarchy.

All public exceptions inherit from BubblewrapError, giving callers a single
base class to catch when they want to handle any Bubblewrap-specific failure
without swallowing unrelated errors. Filesystem failures are deliberately not
part of this hierarchy: they surface as the ``OSError`` raised by the call.
"""

from __future__ import annotations

from enum import Enum


class BubblewrapError(Exception):
    """Base exception for all Bubblewrap errors."""


class ConfigError(BubblewrapError):
    """Raised when a config file exists but cannot be decoded.

    Covers invalid JSON, a non-object top level, and missing or
    non-string ``jdkPath`` / ``androidSdkPath`` members.
    """


class PathErrorCode(Enum):
    """Why a toolchain path was rejected."""

    PATH_IS_NOT_CORRECT = "PathIsNotCorrect"
    PATH_IS_NOT_SUPPORTED = "PathIsNotSupported"


class ValidatePathError(BubblewrapError):
    """Raised when a user-supplied JDK or Android SDK path is rejected.

    Attributes:
        error_code: ``PATH_IS_NOT_CORRECT`` when the path is missing or does
            not look like the expected toolchain, ``PATH_IS_NOT_SUPPORTED``
            when the toolchain is found but cannot be used.
    """

    def __init__(self, message: str, error_code: PathErrorCode) -> None:
        super().__init__(message)
        self.error_code = error_code


class JdkInstallError(BubblewrapError):
    """Raised when the JDK cannot be downloaded or unpacked.

    Covers unsupported platforms, HTTP failures during the download,
    and corrupt or unsafe archives.
    """


class PsiError(BubblewrapError):
    """Raised when a PageSpeed Insights request fails.

    Covers HTTP errors, timeouts, non-JSON bodies, and responses that
    lack a lighthouse result.
    """
