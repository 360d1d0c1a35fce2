"""User repository backed by SQLAlchemy."""
from __future__ import annotations

from datetime import timezone
from typing import Optional

from sqlalchemy import update

from user_lifecycle.core.cancellation import CancellationToken, ensure_token
from user_lifecycle.db.models import UserRow
from user_lifecycle.db.session import get_session
from user_lifecycle.domain.users import User

from .base import UserNotFoundError


def _row_to_user(row: UserRow) -> User:
    created_at = row.created_at
    # SQLite drops tzinfo on the way back
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return User(
        id=row.id,
        email=row.email,
        name=row.name,
        is_active=bool(row.is_active),
        created_at=created_at,
    )


class SQLUserRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def add(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        token = ensure_token(cancel)
        token.raise_if_cancelled()
        with get_session() as session:
            session.add(
                UserRow(
                    id=user.id,
                    email=user.email,
                    name=user.name,
                    is_active=user.is_active,
                    created_at=user.created_at,
                )
            )
            session.flush()
            token.raise_if_cancelled()
            session.commit()

    def get_by_id(self, user_id: str, cancel: Optional[CancellationToken] = None) -> Optional[User]:
        ensure_token(cancel).raise_if_cancelled()
        with get_session() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            return _row_to_user(row)

    def update(self, user: User, cancel: Optional[CancellationToken] = None) -> None:
        token = ensure_token(cancel)
        token.raise_if_cancelled()
        with get_session() as session:
            stmt = (
                update(UserRow)
                .where(UserRow.id == user.id)
                .values(email=user.email, name=user.name, is_active=user.is_active)
            )
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise UserNotFoundError(f"User {user.id} not found")
            token.raise_if_cancelled()
            session.commit()
