"""SQLAlchemy table model for user records."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text, func

from .session import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), nullable=False)
    name = Column(Text, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # emails are unique regardless of case; the stored value keeps the caller's casing
    __table_args__ = (Index("uq_users_email_lower", func.lower(email), unique=True),)
