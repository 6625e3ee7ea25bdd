"""Cancellation error raised when a deployment is cancelled."""

from __future__ import annotations

DEFAULT_CANCEL_MESSAGE = "deployment cancelled"


class CancelError(Exception):
    """A deployment was cancelled, either by the provider or by the caller."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason or DEFAULT_CANCEL_MESSAGE)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason or DEFAULT_CANCEL_MESSAGE

    def is_cancel(self) -> bool:
        """Always true; marks the error as a cancellation."""
        return True