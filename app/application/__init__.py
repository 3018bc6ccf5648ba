"""Application layer: interfaces, DTOs, and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, storage).
"""

from app.application.interfaces import (
    IAuthProvider,
    ISessionRepository,
    ITaskRepository,
)
from app.application.services.auth_service import MockGoogleAuthProvider
from app.application.services.task_service import TaskService

__all__ = [
    "IAuthProvider",
    "ISessionRepository",
    "ITaskRepository",
    "MockGoogleAuthProvider",
    "TaskService",
]
