"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    ISessionRepository,
    ITaskRepository,
)
from app.application.interfaces.services import IAuthProvider

__all__ = [
    "IAuthProvider",
    "ISessionRepository",
    "ITaskRepository",
]
