"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AuthenticationException,
    FlowTaskException,
    PersistenceReadException,
    PersistenceWriteException,
    ResourceNotFoundException,
    ValidationException,
)
from app.infrastructure.exceptions import (
    StorageException,
    StorageNotConnectedError,
    StorageReadError,
    StorageWriteError,
)


def test_base_exception_default_error_code() -> None:
    """Base FlowTaskException uses class name as error_code when not provided."""
    exc = FlowTaskException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FlowTaskException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_base_exception_to_dict() -> None:
    exc = FlowTaskException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Title is required", field="title")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "title"}
    assert ValidationException("Invalid").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", "task_123")
    assert exc.message == "task not found: task_123"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "task", "resource_id": "task_123"}


def test_authentication_exception() -> None:
    assert AuthenticationException().message == "Authentication failed"
    exc = AuthenticationException("Failed to sign in with Google")
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_persistence_exceptions() -> None:
    write = PersistenceWriteException("task-collection", "quota exceeded")
    assert write.message == "Failed to persist task-collection"
    assert write.error_code == "PERSISTENCE_WRITE_ERROR"
    assert write.details == {"storage_key": "task-collection", "reason": "quota exceeded"}
    read = PersistenceReadException("current-session", "bad json")
    assert read.error_code == "PERSISTENCE_READ_ERROR"


def test_storage_exceptions_are_flowtask_exceptions() -> None:
    for exc in (
        StorageReadError("k", "r"),
        StorageWriteError("k", "r"),
        StorageNotConnectedError("redis"),
    ):
        assert isinstance(exc, StorageException)
        assert isinstance(exc, FlowTaskException)
    assert StorageNotConnectedError("redis").details == {"backend": "redis"}
