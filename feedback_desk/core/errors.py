"""Error types raised by the feedback core."""

from __future__ import annotations


class FeedbackError(Exception):
    """Base class for feedback desk errors."""


class InvalidFeedbackError(FeedbackError, ValueError):
    """Raised when a submission violates the record contract."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CorruptSnapshotError(FeedbackError):
    """Raised when the persisted feedback snapshot cannot be decoded."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Stored snapshot '{key}' is unreadable: {reason}")
        self.key = key
        self.reason = reason
