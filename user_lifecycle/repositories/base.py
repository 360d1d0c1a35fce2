"""Repository contract consumed by the user service."""
from __future__ import annotations

from typing import Optional, Protocol

from user_lifecycle.core.cancellation import CancellationToken
from user_lifecycle.domain.users import User


class RepositoryError(Exception):
    """Base class for adapter failures."""


class DuplicateUserError(RepositoryError):
    """Raised by add() when the id or email is already stored."""


class UserNotFoundError(RepositoryError):
    """Raised by update() when the id is not stored."""


class UserRepository(Protocol):
    """User storage contract.

    Emails are unique ignoring case: add() must reject "Alice@example.com" when
    "alice@example.com" is stored, while keeping the casing it was given.

    Calls against distinct ids must not interfere with each other. Concurrent
    updates of the same id are last-writer-wins in the bundled adapters.
    """

    def add(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        """Persist a new user."""

    def get_by_id(self, user_id: str, cancel: Optional[CancellationToken] = None) -> Optional[User]:
        """Return the user, or None when the id is unknown."""

    def update(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        """Replace the mutable fields of an existing user."""
