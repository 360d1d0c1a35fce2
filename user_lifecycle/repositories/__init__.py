"""
Persistence adapters.

Services depend on the UserRepository protocol; the adapters here decide how
records are stored (in process memory, or a SQL database via SQLAlchemy).
"""

from .base import DuplicateUserError, RepositoryError, UserNotFoundError, UserRepository
from .memory_repository import InMemoryUserRepository

__all__ = [
    "DuplicateUserError",
    "InMemoryUserRepository",
    "RepositoryError",
    "UserNotFoundError",
    "UserRepository",
]
