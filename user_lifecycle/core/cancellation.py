"""Cooperative cancellation shared by services and repositories."""
from __future__ import annotations

import threading
from typing import Optional


class OperationCancelledError(Exception):
    """Raised when an operation observes a cancelled token."""


class CancellationToken:
    """Caller-owned signal asking an in-flight operation to stop early.

    Cancellation is cooperative: code holding a token calls
    raise_if_cancelled() at its checkpoints and passes the token on to
    whatever it delegates to.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: Optional[str] = None

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a token nobody holds a reference to cancel."""
        return cls()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError(self._reason or "operation cancelled")


def ensure_token(cancel: CancellationToken | None) -> CancellationToken:
    return cancel if cancel is not None else CancellationToken.none()
