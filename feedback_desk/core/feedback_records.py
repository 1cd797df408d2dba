"""Feedback record structures.

Updates:
    v0.1.0 - 2026-10-19 - Added immutable feedback records and id generation.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

MIN_RATING = 1
MAX_RATING = 5


@dataclass(slots=True, frozen=True)
class FeedbackRecord:
    """Domain object representing a single submitted feedback entry."""

    id: int
    service_type: str
    rating: int
    comments: str
    date: str

    def to_dict(self) -> dict[str, Any]:
        """Return the storage representation of the record.

        Returns:
            dict[str, Any]: Record fields keyed by their persisted names.
        """

        return {
            "id": self.id,
            "serviceType": self.service_type,
            "rating": self.rating,
            "comments": self.comments,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FeedbackRecord":
        """Build a record from its storage representation.

        Args:
            payload (Mapping[str, Any]): Decoded record object.

        Returns:
            FeedbackRecord: Reconstructed record.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """

        try:
            record_id = payload["id"]
            service_type = payload["serviceType"]
            rating = payload["rating"]
            comments = payload.get("comments", "")
            date = payload["date"]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Missing record field: {exc}") from exc

        if not is_valid_rating(rating):
            raise ValueError(f"Rating out of range: {rating!r}")
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise ValueError(f"Invalid record id: {record_id!r}")
        if not isinstance(service_type, str) or not service_type:
            raise ValueError(f"Invalid service type: {service_type!r}")
        if not isinstance(comments, str) or not isinstance(date, str):
            raise ValueError("Comments and date must be strings")
        return cls(
            id=record_id,
            service_type=service_type,
            rating=rating,
            comments=comments,
            date=date,
        )


def is_valid_rating(value: Any) -> bool:
    """Return whether ``value`` is an integer star rating between 1 and 5."""

    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING


def utc_timestamp(now: datetime | None = None) -> str:
    """Return an ISO 8601 UTC timestamp with millisecond precision."""

    moment = now or datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """Issues strictly increasing record ids derived from a millisecond clock."""

    def __init__(
        self,
        clock: Callable[[], int] = _epoch_millis,
        *,
        last_issued: int = 0,
    ) -> None:
        self._clock = clock
        self._last = last_issued

    @property
    def last_issued(self) -> int:
        return self._last

    def observe(self, existing_id: int) -> None:
        """Ensure future ids are greater than an already persisted id."""

        if existing_id > self._last:
            self._last = existing_id

    def __call__(self) -> int:
        candidate = int(self._clock())
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
