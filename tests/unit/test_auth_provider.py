"""Tests for MockGoogleAuthProvider and SessionRepository."""

import json
from unittest.mock import AsyncMock

import pytest

from app.application.services.auth_service import MockGoogleAuthProvider, demo_user_id
from app.core.config import Settings
from app.domain.enums import AuthProviderType
from app.domain.exceptions import AuthenticationException, PersistenceWriteException
from app.infrastructure.persistence.repositories import SessionRepository
from app.infrastructure.storage import MemoryStore


class TestSignIn:
    async def test_sign_in_returns_and_persists_demo_user(self, auth_provider, store) -> None:
        user = await auth_provider.sign_in_with_google()
        assert user.email == "demo@flowtask.app"
        assert user.name == "Demo User"
        assert user.provider == AuthProviderType.GOOGLE
        assert user.id == demo_user_id("demo@flowtask.app")
        assert json.loads(await store.get("current-session"))["id"] == user.id

    async def test_current_user_after_sign_in(self, auth_provider) -> None:
        assert await auth_provider.get_current_user() is None
        assert await auth_provider.is_authenticated() is False
        user = await auth_provider.sign_in_with_google()
        assert await auth_provider.get_current_user() == user
        assert await auth_provider.is_authenticated() is True

    async def test_session_survives_new_provider_on_same_store(self, store, settings) -> None:
        first = MockGoogleAuthProvider(SessionRepository(store), settings=settings)
        user = await first.sign_in_with_google()
        second = MockGoogleAuthProvider(SessionRepository(store), settings=settings)
        assert await second.get_current_user() == user

    async def test_save_failure_raises_authentication_exception(self, settings) -> None:
        sessions = AsyncMock()
        sessions.save.side_effect = PersistenceWriteException("current-session", "disk full")
        sessions.get_current.return_value = None
        provider = MockGoogleAuthProvider(sessions, settings=settings)
        with pytest.raises(AuthenticationException) as exc_info:
            await provider.sign_in_with_google()
        assert exc_info.value.message == "Failed to sign in with Google"
        assert await provider.is_authenticated() is False


class TestSignOut:
    async def test_sign_out_clears_session(self, auth_provider, store) -> None:
        await auth_provider.sign_in_with_google()
        await auth_provider.sign_out()
        assert await auth_provider.get_current_user() is None
        assert await store.get("current-session") is None

    async def test_sign_out_when_signed_out_is_noop(self, auth_provider) -> None:
        await auth_provider.sign_out()
        assert await auth_provider.is_authenticated() is False


class TestNetworkDelay:
    async def test_delay_within_configured_bounds(self, session_repo) -> None:
        sleep = AsyncMock()
        settings = Settings(
            storage_backend="memory", auth_delay_min_seconds=1.0, auth_delay_max_seconds=2.0
        )
        provider = MockGoogleAuthProvider(session_repo, settings=settings, sleep=sleep)
        await provider.sign_in_with_google()
        await provider.sign_out()
        assert sleep.await_count == 2
        for call in sleep.await_args_list:
            assert 1.0 <= call.args[0] <= 2.0

    async def test_zero_delay_skips_sleep(self, session_repo, settings) -> None:
        sleep = AsyncMock()
        provider = MockGoogleAuthProvider(session_repo, settings=settings, sleep=sleep)
        await provider.sign_in_with_google()
        sleep.assert_not_awaited()


class TestSessionRepository:
    @pytest.mark.parametrize(
        "raw",
        ["{broken", "[]", '{"id": "user_1"}', '{"id": "u", "email": "e", "name": "n",'
         ' "provider": "github", "created_at": "2025-01-01T00:00:00+00:00"}'],
    )
    async def test_corrupt_session_reads_as_signed_out(self, raw) -> None:
        repo = SessionRepository(MemoryStore({"current-session": raw}))
        assert await repo.get_current() is None


def test_demo_user_id_is_stable_and_case_insensitive() -> None:
    assert demo_user_id("Demo@FlowTask.app ") == demo_user_id("demo@flowtask.app")
    assert demo_user_id("a@b.c").startswith("user_")
    assert demo_user_id("a@b.c") != demo_user_id("x@y.z")
