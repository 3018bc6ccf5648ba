"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity, UserEntity
from app.domain.enums import AuthProviderType, TaskPriority, TaskStatus
from app.domain.exceptions import (
    AuthenticationException,
    FlowTaskException,
    PersistenceReadException,
    PersistenceWriteException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "TaskEntity",
    "UserEntity",
    # Enums
    "AuthProviderType",
    "TaskPriority",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "FlowTaskException",
    "PersistenceReadException",
    "PersistenceWriteException",
    "ResourceNotFoundException",
    "ValidationException",
]
