"""User domain entity (the signed-in session owner)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import AuthProviderType


@dataclass
class UserEntity:
    """Authenticated user. Absence of a UserEntity means unauthenticated."""

    id: str
    email: str
    name: str
    provider: AuthProviderType
    created_at: datetime
    photo_url: str | None = None
