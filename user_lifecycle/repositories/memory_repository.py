"""Process-local repository, used by tests and single-process tooling."""
from __future__ import annotations

import threading
from typing import Dict, Optional

from user_lifecycle.core.cancellation import CancellationToken, ensure_token
from user_lifecycle.domain.users import User

from .base import DuplicateUserError, UserNotFoundError


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        ensure_token(cancel).raise_if_cancelled()
        email = user.email.lower()
        with self._lock:
            if user.id in self._users:
                raise DuplicateUserError(f"User {user.id} already exists")
            if any(u.email.lower() == email for u in self._users.values()):
                raise DuplicateUserError(f"Email {user.email} already registered")
            self._users[user.id] = user

    def get_by_id(self, user_id: str, cancel: Optional[CancellationToken] = None) -> Optional[User]:
        ensure_token(cancel).raise_if_cancelled()
        with self._lock:
            return self._users.get(user_id)

    def update(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        ensure_token(cancel).raise_if_cancelled()
        with self._lock:
            current = self._users.get(user.id)
            if current is None:
                raise UserNotFoundError(f"User {user.id} not found")
            # id and created_at stay as first stored
            self._users[user.id] = User(
                id=current.id,
                email=user.email,
                name=user.name,
                is_active=user.is_active,
                created_at=current.created_at,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
