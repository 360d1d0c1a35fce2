from __future__ import annotations

import sys
import threading

import pytest
from loguru import logger

from user_lifecycle.core import config as core_config
from user_lifecycle.core.cancellation import CancellationToken, OperationCancelledError, ensure_token
from user_lifecycle.core.logging import configure_logging
from user_lifecycle.domain.users import User, email_has_allowed_domain, normalize_domain_suffix


@pytest.fixture()
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield core_config.get_settings
    core_config.get_settings.cache_clear()


def test_settings_defaults(fresh_settings, monkeypatch):
    for name in ("APP_ENV", "ALLOWED_EMAIL_DOMAIN", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = fresh_settings()
    assert settings.app_env == "dev"
    assert settings.allowed_email_domain == "@example.com"
    assert settings.database_url == ""
    assert settings.log_level == "INFO"


def test_settings_from_env(fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("ALLOWED_EMAIL_DOMAIN", " Corp.Test ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = fresh_settings()
    assert settings.app_env == "prod"
    assert settings.allowed_email_domain == "@corp.test"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "raw, expected",
    [("example.com", "@example.com"), ("@Example.COM", "@example.com"), ("  ", ""), (None, "")],
)
def test_normalize_domain_suffix(raw, expected):
    assert normalize_domain_suffix(raw) == expected


def test_email_domain_check():
    assert email_has_allowed_domain("a@example.com", "@example.com")
    assert not email_has_allowed_domain("a@badexample.com", "example.com")
    assert not email_has_allowed_domain("a@example.com", "")
    assert not email_has_allowed_domain(None, "@example.com")


def test_deactivated_copy_is_new_object():
    user = User.new(email="a@example.com", name="A")
    inactive = user.deactivated()
    assert user.is_active is True
    assert inactive.is_active is False
    assert (inactive.id, inactive.email, inactive.name, inactive.created_at) == (
        user.id,
        user.email,
        user.name,
        user.created_at,
    )


def test_token_cancel_from_another_thread():
    token = CancellationToken()
    worker = threading.Thread(target=token.cancel, args=("shutdown",))
    worker.start()
    worker.join(timeout=5)
    assert token.cancelled
    assert token.reason == "shutdown"
    with pytest.raises(OperationCancelledError, match="shutdown"):
        token.raise_if_cancelled()


def test_first_cancel_reason_sticks():
    token = CancellationToken()
    token.cancel("first")
    token.cancel("second")
    assert token.reason == "first"


def test_ensure_token_defaults_to_uncancelled():
    token = ensure_token(None)
    assert token.cancelled is False
    token.raise_if_cancelled()
    existing = CancellationToken()
    assert ensure_token(existing) is existing


def test_configure_logging_sets_level(capsys):
    try:
        configure_logging("warning")
        logger.info("hidden event")
        logger.warning("shown event")
        err = capsys.readouterr().err
        assert "shown event" in err
        assert "hidden event" not in err
    finally:
        logger.remove()
        logger.add(sys.stderr)
