"""Persistence helpers for the feedback snapshot.

Updates:
    v0.1.0 - 2026-10-19 - Store the whole feedback collection as one JSON slot.
"""

from __future__ import annotations

import json
from typing import Iterable, Optional

from ..core.errors import CorruptSnapshotError
from ..core.feedback_records import FeedbackRecord
from .sqlite_client import SQLiteClient

DEFAULT_STORAGE_KEY = "feedbackData"


class FeedbackRepository:
    """Reads and writes the serialized feedback collection."""

    def __init__(
        self, sqlite_client: SQLiteClient, *, key: str = DEFAULT_STORAGE_KEY
    ) -> None:
        self._sqlite = sqlite_client
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> Optional[list[FeedbackRecord]]:
        """Decode the stored collection.

        Returns:
            list[FeedbackRecord] | None: Records in insertion order, or ``None``
            when nothing has been stored.

        Raises:
            CorruptSnapshotError: If the slot holds data that is not a valid collection.
        """

        raw = self._sqlite.get_item(self._key)
        if raw is None:
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptSnapshotError(self._key, f"invalid JSON ({exc.msg})") from exc
        if payload is None:
            return None
        if not isinstance(payload, list):
            raise CorruptSnapshotError(
                self._key, f"expected a list, found {type(payload).__name__}"
            )

        records: list[FeedbackRecord] = []
        seen: set[int] = set()
        for index, item in enumerate(payload):
            try:
                record = FeedbackRecord.from_dict(item)
            except ValueError as exc:
                raise CorruptSnapshotError(self._key, f"entry {index}: {exc}") from exc
            if record.id in seen:
                raise CorruptSnapshotError(
                    self._key, f"entry {index}: duplicate id {record.id}"
                )
            seen.add(record.id)
            records.append(record)
        return records

    def write(self, records: Iterable[FeedbackRecord]) -> None:
        """Replace the stored collection with ``records``."""

        payload = [record.to_dict() for record in records]
        self._sqlite.set_item(self._key, json.dumps(payload, ensure_ascii=False))

    def delete(self) -> bool:
        """Remove the slot entirely.

        Returns:
            bool: ``True`` when a stored snapshot was removed.
        """

        return self._sqlite.remove_item(self._key) > 0

    def exists(self) -> bool:
        return self._sqlite.has_item(self._key)
