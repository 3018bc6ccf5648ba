"""Domain exceptions for the FlowTask application.

Defines domain-level exceptions that represent business rule violations
and persistence outcomes callers must react to. Presentation code maps
them to user-facing messages through message, error_code, and details.
"""

from typing import Any


class FlowTaskException(Exception):
    """Base exception for all FlowTask application errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable payload for presentation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FlowTaskException):
    """Raised when input validation fails (e.g. blank title, text too long)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(FlowTaskException):
    """Raised when an operation targets a resource id that does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AuthenticationException(FlowTaskException):
    """Raised when sign-in fails. The session stays unauthenticated."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class PersistenceWriteException(FlowTaskException):
    """Raised when the underlying store rejected a write.

    Callers must not assume the mutation took effect.
    """

    def __init__(self, storage_key: str, reason: str) -> None:
        super().__init__(
            f"Failed to persist {storage_key}",
            "PERSISTENCE_WRITE_ERROR",
            {"storage_key": storage_key, "reason": reason},
        )


class PersistenceReadException(FlowTaskException):
    """Stored data could not be read or decoded.

    Never propagated out of repositories: reads degrade to an empty or
    absent result and this exception is only logged.
    """

    def __init__(self, storage_key: str, reason: str) -> None:
        super().__init__(
            f"Failed to read {storage_key}",
            "PERSISTENCE_READ_ERROR",
            {"storage_key": storage_key, "reason": reason},
        )
