"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.entities import TaskEntity, UserEntity


class ITaskRepository(Protocol):
    """Protocol for the task collection repository (DIP).

    Implementations keep whole-collection read-modify-write semantics:
    reads never raise (they degrade to empty/None), writes raise
    PersistenceWriteException.
    """

    async def get_all(self) -> list[TaskEntity]:
        """Return every stored task in storage order; [] when unreadable."""

    async def get_by_id(self, task_id: str) -> TaskEntity | None:
        """Return task by ID or None."""

    async def create(self, task: TaskEntity) -> TaskEntity:
        """Append task to the collection and persist; return it."""

    async def update(self, task_id: str, task: TaskEntity) -> TaskEntity | None:
        """Replace task with matching ID; return None (no insert) when absent."""

    async def modify(
        self, task_id: str, mutate: Callable[[TaskEntity], TaskEntity]
    ) -> TaskEntity | None:
        """Atomically replace the task with mutate(latest stored version).

        Returns None (no insert) when absent.
        """

    async def delete(self, task_id: str) -> bool:
        """Remove task by ID. Returns True if something was removed."""

    async def clear(self) -> None:
        """Wipe the stored collection."""


class ISessionRepository(Protocol):
    """Protocol for the single current-session record."""

    async def get_current(self) -> UserEntity | None:
        """Return the persisted user or None; never raises."""

    async def save(self, user: UserEntity) -> None:
        """Persist user as the current session (replaces any previous one)."""

    async def clear(self) -> None:
        """Remove the current session."""
