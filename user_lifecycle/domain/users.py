"""Domain helpers for user records and the email-domain policy."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
import uuid


@dataclass(frozen=True)
class User:
    """Identity record. id and created_at are fixed at creation."""

    id: str
    email: str
    name: str
    is_active: bool
    created_at: datetime

    @classmethod
    def new(cls, email: str, name: str) -> "User":
        return cls(
            id=str(uuid.uuid4()),
            email=email,
            name=name,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

    def deactivated(self) -> "User":
        """Return a copy with is_active cleared; every other field is kept."""
        return replace(self, is_active=False)


@dataclass
class CreateUserRequest:
    email: str
    name: str


def normalize_domain_suffix(value: str | None) -> str:
    """Return '@domain' in lower case, or '' when nothing was given."""
    suffix = (value or "").strip().lower()
    if not suffix:
        return ""
    if not suffix.startswith("@"):
        suffix = "@" + suffix
    return suffix


def email_has_allowed_domain(email: str | None, suffix: str) -> bool:
    """True when the email ends with the (normalized) allowed suffix."""
    allowed = normalize_domain_suffix(suffix)
    if not allowed:
        return False
    return (email or "").strip().lower().endswith(allowed)
