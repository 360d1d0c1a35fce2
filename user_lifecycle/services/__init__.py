"""
High-level use cases for user records.

Services apply business rules and delegate storage to a repository passed in
by the caller. They keep no state between calls.
"""

from .user_service import InvalidArgumentError, PolicyViolationError, UserService, UserServiceError

__all__ = ["InvalidArgumentError", "PolicyViolationError", "UserService", "UserServiceError"]
