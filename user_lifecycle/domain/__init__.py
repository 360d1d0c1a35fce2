"""Domain records and policy helpers."""

from .users import CreateUserRequest, User, email_has_allowed_domain, normalize_domain_suffix

__all__ = ["CreateUserRequest", "User", "email_has_allowed_domain", "normalize_domain_suffix"]
