"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserListException,
)


def test_base_exception_default_error_code() -> None:
    """Base UserListException uses class name as error_code when not provided."""
    exc = UserListException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "UserListException"
    assert exc.details == {}
    assert exc.to_dict() == {"error": "UserListException", "message": "Something failed"}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = UserListException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("User", 7)
    assert exc.message == "User not found: 7"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "User", "resource_id": 7}
    assert isinstance(exc, UserListException)


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SQL_NOT_CONFIGURED"
    assert "not configured" in exc.message
