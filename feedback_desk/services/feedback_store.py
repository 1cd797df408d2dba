"""Feedback store orchestration.

Updates:
    v0.1.0 - 2026-10-19 - Owned feedback collection with write-through persistence.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from ..core.errors import CorruptSnapshotError, InvalidFeedbackError
from ..core.feedback_records import (
    FeedbackRecord,
    MonotonicIdGenerator,
    is_valid_rating,
    utc_timestamp,
)
from ..db.feedback_repository import FeedbackRepository

logger = logging.getLogger(__name__)


class CorruptLoadPolicy(str, Enum):
    """What ``FeedbackStore.load`` does with an unreadable snapshot."""

    RESET_TO_EMPTY = "reset_to_empty"
    RAISE = "raise"


class FeedbackStore:
    """Owns the feedback collection and keeps its stored snapshot in sync."""

    def __init__(
        self,
        repository: FeedbackRepository,
        *,
        id_generator: Optional[Callable[[], int]] = None,
        clock: Callable[[], str] = utc_timestamp,
        on_corrupt_load: CorruptLoadPolicy = CorruptLoadPolicy.RESET_TO_EMPTY,
    ) -> None:
        """Initialize the store.

        Args:
            repository (FeedbackRepository): Snapshot persistence.
            id_generator (Callable[[], int] | None): Source of record ids.
                Defaults to a ``MonotonicIdGenerator``.
            clock (Callable[[], str]): Returns the ISO timestamp for new records.
            on_corrupt_load (CorruptLoadPolicy): Handling of unreadable snapshots.
        """

        self._repository = repository
        self._id_generator = id_generator or MonotonicIdGenerator()
        self._clock = clock
        self._policy = CorruptLoadPolicy(on_corrupt_load)
        self._records: list[FeedbackRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def corrupt_load_policy(self) -> CorruptLoadPolicy:
        return self._policy

    def load(self) -> tuple[FeedbackRecord, ...]:
        """Replace the in-memory collection with the stored snapshot.

        Returns:
            tuple[FeedbackRecord, ...]: The loaded collection.

        Raises:
            CorruptSnapshotError: If the snapshot is unreadable and the policy
                is ``CorruptLoadPolicy.RAISE``.
        """

        try:
            records = self._repository.read() or []
        except CorruptSnapshotError as exc:
            if self._policy is CorruptLoadPolicy.RAISE:
                raise
            logger.warning(
                "feedback_snapshot_corrupt",
                extra={"key": exc.key, "reason": exc.reason, "policy": self._policy.value},
            )
            records = []

        self._records = list(records)
        observe = getattr(self._id_generator, "observe", None)
        if observe is not None:
            for record in self._records:
                observe(record.id)
        logger.debug("feedback_loaded", extra={"count": len(self._records)})
        return self.all()

    def submit(
        self, service_type: str, rating: int, comments: str = ""
    ) -> FeedbackRecord:
        """Record a new feedback entry and persist the collection.

        Args:
            service_type (str): Service category the feedback is about.
            rating (int): Star rating between 1 and 5.
            comments (str): Free-form comment, may be empty.

        Returns:
            FeedbackRecord: The stored record.

        Raises:
            InvalidFeedbackError: If the arguments break the record contract.
        """

        if not isinstance(service_type, str) or not service_type.strip():
            raise InvalidFeedbackError(
                "Service type must be a non-empty string.", field="service_type"
            )
        if not is_valid_rating(rating):
            raise InvalidFeedbackError(
                f"Rating must be an integer between 1 and 5, got {rating!r}.",
                field="rating",
            )
        if not isinstance(comments, str):
            raise InvalidFeedbackError("Comments must be a string.", field="comments")

        record = FeedbackRecord(
            id=self._id_generator(),
            service_type=service_type,
            rating=rating,
            comments=comments,
            date=self._clock(),
        )
        self._records.append(record)
        try:
            self._repository.write(self._records)
        except Exception:
            self._records.pop()
            raise

        logger.info(
            "feedback_submitted",
            extra={
                "record_id": record.id,
                "service_type": record.service_type,
                "rating": record.rating,
            },
        )
        return record

    def clear(self) -> None:
        """Drop every record and remove the stored snapshot."""

        removed = self._repository.delete()
        count = len(self._records)
        self._records = []
        if count or removed:
            logger.info("feedback_cleared", extra={"count": count})

    def has_snapshot(self) -> bool:
        """Return whether a stored snapshot exists, readable or not."""

        return self._repository.exists()

    def all(self) -> tuple[FeedbackRecord, ...]:
        """Return the collection in insertion order."""

        return tuple(self._records)
