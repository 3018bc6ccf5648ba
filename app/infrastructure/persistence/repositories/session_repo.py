"""Session repository: the single current-user record under one key."""

from __future__ import annotations

import logging
from typing import Any

from app.core.constants import DEFAULT_SESSION_KEY
from app.domain.entities import UserEntity
from app.domain.enums import AuthProviderType
from app.infrastructure.persistence.repositories.base import (
    DECODE_ERRORS,
    KeyValueRepository,
)
from app.infrastructure.storage.protocol import KeyValueStoreProtocol
from app.shared.utils.datetime import parse_iso_utc

logger = logging.getLogger(__name__)


def user_to_dict(user: UserEntity) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "photo_url": user.photo_url,
        "provider": user.provider.value,
        "created_at": user.created_at.isoformat(),
    }


def user_from_dict(data: dict[str, Any]) -> UserEntity:
    created_at = parse_iso_utc(data["created_at"])
    if created_at is None:
        raise ValueError("created_at is required")
    return UserEntity(
        id=str(data["id"]),
        email=data["email"],
        name=data["name"],
        photo_url=data.get("photo_url"),
        provider=AuthProviderType(data["provider"]),
        created_at=created_at,
    )


class SessionRepository(KeyValueRepository):
    """Current session stored in a key-value backend (implements ISessionRepository).

    Saving always replaces the previous record, so at most one user is
    ever signed in.
    """

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        key: str = DEFAULT_SESSION_KEY,
    ) -> None:
        super().__init__(store, key)

    async def get_current(self) -> UserEntity | None:
        """Return the persisted user, or None when absent or unreadable."""
        document = await self._read_document()
        if document is None:
            return None
        try:
            if not isinstance(document, dict):
                raise TypeError(f"expected a JSON object, got {type(document).__name__}")
            return user_from_dict(document)
        except DECODE_ERRORS as e:
            self._report_read_failure(str(e))
            return None

    async def save(self, user: UserEntity) -> None:
        await self._write_document(user_to_dict(user))
        logger.debug("Session saved user_id=%s", user.id)

    async def clear(self) -> None:
        if await self._delete_document():
            logger.debug("Session cleared")
