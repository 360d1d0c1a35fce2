"""
User lifecycle use cases: create, fetch and deactivate.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger as default_logger

from user_lifecycle.core.cancellation import CancellationToken, ensure_token
from user_lifecycle.core.config import Settings, get_settings
from user_lifecycle.domain.users import CreateUserRequest, User, email_has_allowed_domain, normalize_domain_suffix
from user_lifecycle.repositories.base import UserRepository


class UserServiceError(Exception):
    """Base class for errors raised by the service itself."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(UserServiceError):
    """Required input missing or of the wrong shape."""


class PolicyViolationError(UserServiceError):
    """A business rule rejected the request."""


class UserService:
    """Validates lifecycle requests and hands them to the repository.

    Repository errors are not caught here; they reach the caller as raised.
    """

    def __init__(self, repository: UserRepository, settings: Settings | None = None, logger=None):
        self._repository = repository
        self._allowed_domain = normalize_domain_suffix((settings or get_settings()).allowed_email_domain)
        self._log = logger if logger is not None else default_logger.bind(component="user_service")

    @property
    def allowed_domain(self) -> str:
        return self._allowed_domain

    def create_user(self, request: Optional[CreateUserRequest], cancel: CancellationToken | None = None) -> User:
        if request is None:
            raise InvalidArgumentError("request is required")
        if not isinstance(request.email, str) or not isinstance(request.name, str):
            raise InvalidArgumentError("email and name must be strings")
        email = request.email.strip()
        if not email_has_allowed_domain(email, self._allowed_domain):
            raise PolicyViolationError("domain not allowed")

        token = ensure_token(cancel)
        token.raise_if_cancelled()
        user = User.new(email=email, name=request.name)
        self._log.bind(email=email).info("user.create")
        self._repository.add(user, token)
        return user

    def get_user(self, user_id: str, cancel: CancellationToken | None = None) -> Optional[User]:
        token = ensure_token(cancel)
        token.raise_if_cancelled()
        return self._repository.get_by_id(user_id, token)

    def deactivate_user(self, user_id: str, cancel: CancellationToken | None = None) -> None:
        token = ensure_token(cancel)
        token.raise_if_cancelled()
        user = self._repository.get_by_id(user_id, token)
        if user is None:
            self._log.bind(user_id=user_id).warning("user.deactivate.missing")
            return
        self._log.bind(user_id=user_id).info("user.deactivate")
        self._repository.update(user.deactivated(), token)
