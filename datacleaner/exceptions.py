"""
Custom Exception Classes for the data cleaner

Every error raised by the cleaner subsystem derives from CleanerError so the
HTTP layer can render a consistent error body.  Absent configuration rows and
missing settings builders are not errors: they degrade to "disabled" and
"no settings section" respectively.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in error responses."""

    CLEANER_NOT_FOUND = "CLEANER_NOT_FOUND"
    CLEANER_NOT_INSTALLED = "CLEANER_NOT_INSTALLED"
    CLEANER_EXECUTION_FAILED = "CLEANER_EXECUTION_FAILED"
    ADMIN_NODE_NOT_FOUND = "ADMIN_NODE_NOT_FOUND"
    ADMIN_NODE_DUPLICATE = "ADMIN_NODE_DUPLICATE"
    SETTING_INVALID = "SETTING_INVALID"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CleanerError(Exception):
    """Base exception class for all cleaner-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Registry Exceptions
# ============================================================================


class CleanerNotFoundError(CleanerError):
    """Raised when a cleaner is not registered"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Cleaner '{name}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.CLEANER_NOT_FOUND,
            details={"cleaner": name},
        )


class CleanerNotInstalledError(CleanerError):
    """Raised when enabling a cleaner that is not installed at its current version"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Cleaner '{name}' is not installed or needs an upgrade",
            status_code=status.HTTP_409_CONFLICT,
            error_code=ErrorCode.CLEANER_NOT_INSTALLED,
            details={"cleaner": name},
        )


class CleanerExecutionError(CleanerError):
    """Raised when a cleaner fails while running"""

    def __init__(self, name: str, reason: str):
        super().__init__(
            message=f"Cleaner '{name}' failed: {reason}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=ErrorCode.CLEANER_EXECUTION_FAILED,
            details={"cleaner": name},
        )


# ============================================================================
# Admin Tree Exceptions
# ============================================================================


class AdminNodeNotFoundError(CleanerError):
    """Raised when an admin tree node cannot be located"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Admin node '{name}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.ADMIN_NODE_NOT_FOUND,
            details={"node": name},
        )


class DuplicateAdminNodeError(CleanerError):
    """Raised when a node name is already used in the admin tree"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Admin node '{name}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            error_code=ErrorCode.ADMIN_NODE_DUPLICATE,
            details={"node": name},
        )


class InvalidSettingError(CleanerError):
    """Raised when a settings update names an unknown setting"""

    def __init__(self, section: str, setting: str):
        super().__init__(
            message=f"Setting '{setting}' does not exist in section '{section}'",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ErrorCode.SETTING_INVALID,
            details={"section": section, "setting": setting},
        )
