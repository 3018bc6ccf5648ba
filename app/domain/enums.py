"""Domain enumerations for the FlowTask application.

Enums represent fixed sets of domain values (task status, priority,
sign-in provider). Values are the lowercase strings used in storage.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for validation or serialization)."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Task completion status. Tasks only move between OPEN and COMPLETED."""

    OPEN = "open"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        """Return the opposite status."""
        return TaskStatus.COMPLETED if self is TaskStatus.OPEN else TaskStatus.OPEN


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority level.

    Ordering by severity goes through rank, never through the string value
    ("high" < "low" alphabetically).
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Severity rank: LOW=1, MEDIUM=2, HIGH=3."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
}


class AuthProviderType(_ValuesMixin, str, Enum):
    """Identity provider a user signed in with."""

    GOOGLE = "google"
    EMAIL = "email"
