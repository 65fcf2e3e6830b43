"""
Tests for cleaner exception classes
"""

from fastapi import status

from datacleaner.exceptions import (
    AdminNodeNotFoundError,
    CleanerError,
    CleanerExecutionError,
    CleanerNotFoundError,
    CleanerNotInstalledError,
    DuplicateAdminNodeError,
    ErrorCode,
    InvalidSettingError,
)


class TestCleanerError:
    def test_defaults(self):
        exc = CleanerError("oops")
        assert exc.message == "oops"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.error_code == ErrorCode.INTERNAL_ERROR
        assert exc.details == {}
        assert str(exc) == "oops"

    def test_subclasses(self):
        for exc in [
            CleanerNotFoundError("x"),
            CleanerNotInstalledError("x"),
            CleanerExecutionError("x", "boom"),
            AdminNodeNotFoundError("x"),
            DuplicateAdminNodeError("x"),
            InvalidSettingError("s", "x"),
        ]:
            assert isinstance(exc, CleanerError)


class TestSpecificErrors:
    def test_not_found(self):
        exc = CleanerNotFoundError("users")
        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert "users" in exc.message

    def test_execution(self):
        exc = CleanerExecutionError("users", "boom")
        assert exc.message == "Cleaner 'users' failed: boom"
        assert exc.error_code == ErrorCode.CLEANER_EXECUTION_FAILED

    def test_duplicate_node(self):
        assert DuplicateAdminNodeError("p").status_code == status.HTTP_409_CONFLICT

    def test_invalid_setting(self):
        exc = InvalidSettingError("cleaner_users", "x")
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.details == {"section": "cleaner_users", "setting": "x"}
