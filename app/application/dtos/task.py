"""DTOs for task queries (no dependency on storage)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskStats:
    """Counts derived from the full task list."""

    total: int
    completed: int
    open: int
    overdue: int

    @property
    def completion_rate(self) -> float:
        """Percentage of completed tasks (0.0 when there are none)."""
        if self.total == 0:
            return 0.0
        return self.completed / self.total * 100
