"""Mock Google sign-in provider backed by the persisted current session.

Stands in for a real OAuth exchange: it waits a simulated network delay
and signs in a fixed demo identity. The contract (returns a UserEntity or
raises AuthenticationException) is what a real provider must keep.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
import random
from collections.abc import Awaitable, Callable

from app.application.interfaces.repositories import ISessionRepository
from app.core.config import Settings, get_settings
from app.core.constants import USER_ID_PREFIX
from app.domain.entities import UserEntity
from app.domain.enums import AuthProviderType
from app.domain.exceptions import AuthenticationException, FlowTaskException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


def demo_user_id(email: str) -> str:
    """Stable user id derived from the email address."""
    digest = hashlib.sha256(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{USER_ID_PREFIX}_{digest[:16]}"


class MockGoogleAuthProvider:
    """Single-session auth provider (implements IAuthProvider).

    Signing in replaces any stored session; signing out removes it.
    """

    def __init__(
        self,
        session_repository: ISessionRepository,
        settings: Settings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._sessions = session_repository
        self._settings = settings or get_settings()
        self._sleep = sleep

    async def _simulate_network_delay(self) -> None:
        delay = random.uniform(
            self._settings.auth_delay_min_seconds,
            self._settings.auth_delay_max_seconds,
        )
        if delay > 0:
            await self._sleep(delay)

    def _build_demo_user(self) -> UserEntity:
        email = self._settings.demo_user_email
        return UserEntity(
            id=demo_user_id(email),
            email=email,
            name=self._settings.demo_user_name,
            photo_url=self._settings.demo_user_photo_url,
            provider=AuthProviderType.GOOGLE,
            created_at=utc_now(),
        )

    async def sign_in_with_google(self) -> UserEntity:
        """Simulate the OAuth round trip, then persist and return the demo user.

        Raises:
            AuthenticationException: The session could not be stored; the
                caller stays signed out.
        """
        await self._simulate_network_delay()
        user = self._build_demo_user()
        try:
            await self._sessions.save(user)
        except FlowTaskException as e:
            logger.warning("Google sign-in failed: %s", e.message)
            raise AuthenticationException("Failed to sign in with Google") from e
        logger.info("Signed in user_id=%s provider=%s", user.id, user.provider.value)
        return user

    async def sign_out(self) -> None:
        await self._simulate_network_delay()
        await self._sessions.clear()
        logger.info("Signed out")

    async def get_current_user(self) -> UserEntity | None:
        return await self._sessions.get_current()

    async def is_authenticated(self) -> bool:
        return await self.get_current_user() is not None
