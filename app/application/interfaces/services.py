"""Service interfaces (ports) consumed by the presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities import UserEntity


class IAuthProvider(Protocol):
    """Protocol for sign-in providers.

    State machine: Unauthenticated --sign in--> Authenticated(User)
    --sign out--> Unauthenticated. A failed sign-in leaves the state
    unauthenticated.
    """

    async def sign_in_with_google(self) -> UserEntity:
        """Sign in and return the user. Raises AuthenticationException."""

    async def sign_out(self) -> None:
        """Clear the current session."""

    async def get_current_user(self) -> UserEntity | None:
        """Return the signed-in user or None; never raises."""
