"""Domain entities.

Pure domain models; no persistence concerns.
"""

from app.domain.entities.task import TaskEntity
from app.domain.entities.user import UserEntity

__all__ = [
    "TaskEntity",
    "UserEntity",
]
