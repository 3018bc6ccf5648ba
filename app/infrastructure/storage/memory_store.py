"""In-process key-value store (tests and ephemeral runs)."""

from __future__ import annotations


class MemoryStore:
    """Dict-backed store. Data lives as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        """Return stored keys (inspection helper)."""
        return list(self._data)
