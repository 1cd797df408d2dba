"""Aggregations over a feedback collection.

Every function here is a pure function of the records passed in. None of
them mutate their input or touch persistence.

Updates:
    v0.1.0 - 2026-10-19 - Added filtering, summary statistics and chart groupings.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional, Sequence

from .feedback_records import MAX_RATING, FeedbackRecord

TOP_SERVICE_PLACEHOLDER = "-"
EMPTY_AVERAGE = "0.0"
RATING_LABELS = ("1 Star", "2 Stars", "3 Stars", "4 Stars", "5 Stars")
FILLED_STAR = "★"
EMPTY_STAR = "☆"


@dataclass(slots=True, frozen=True)
class FeedbackSummary:
    """Headline statistics for the analytics view."""

    total: int
    average: str
    top_service: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "average": self.average,
            "topService": self.top_service,
        }


def filter_feedback(
    records: Iterable[FeedbackRecord],
    service_type: Optional[str] = None,
    rating: Optional[int] = None,
) -> tuple[FeedbackRecord, ...]:
    """Select matching records, most recent first.

    Args:
        records (Iterable[FeedbackRecord]): Collection to filter.
        service_type (str | None): Exact service type to keep, or ``None`` for all.
        rating (int | None): Exact rating to keep, or ``None`` for all.

    Returns:
        tuple[FeedbackRecord, ...]: Matching records ordered by id descending.
    """

    selected = [
        record
        for record in records
        if (service_type is None or record.service_type == service_type)
        and (rating is None or record.rating == rating)
    ]
    selected.sort(key=lambda record: record.id, reverse=True)
    return tuple(selected)


def group_by_service(records: Iterable[FeedbackRecord]) -> dict[str, int]:
    """Count records per service type in first-appearance order."""

    counts: dict[str, int] = {}
    for record in records:
        counts[record.service_type] = counts.get(record.service_type, 0) + 1
    return counts


def group_by_rating(records: Iterable[FeedbackRecord]) -> list[int]:
    """Return exactly five bucket counts for ratings 1 through 5."""

    buckets = [0] * MAX_RATING
    for record in records:
        buckets[record.rating - 1] += 1
    return buckets


def summarize(records: Sequence[FeedbackRecord]) -> FeedbackSummary:
    """Compute total, average rating and most reviewed service.

    Args:
        records (Sequence[FeedbackRecord]): Full, unfiltered collection.

    Returns:
        FeedbackSummary: Summary with ``"0.0"`` and ``"-"`` for an empty collection.
    """

    total = len(records)
    if total == 0:
        return FeedbackSummary(
            total=0, average=EMPTY_AVERAGE, top_service=TOP_SERVICE_PLACEHOLDER
        )

    mean = sum(record.rating for record in records) / total
    counts = group_by_service(records)
    # max() keeps the first key among equal counts.
    top_service = max(counts, key=counts.__getitem__)
    return FeedbackSummary(
        total=total,
        average=_format_one_decimal(mean),
        top_service=top_service,
    )


def chart_data(records: Sequence[FeedbackRecord]) -> dict[str, dict[str, list[Any]]]:
    """Build label/data series for the service bar chart and rating pie chart."""

    services = group_by_service(records)
    return {
        "service": {
            "labels": list(services.keys()),
            "data": list(services.values()),
        },
        "rating": {
            "labels": list(RATING_LABELS),
            "data": group_by_rating(records),
        },
    }


def format_stars(rating: int) -> str:
    """Render a rating as filled stars followed by empty ones."""

    filled = max(0, min(rating, MAX_RATING))
    return FILLED_STAR * filled + EMPTY_STAR * (MAX_RATING - filled)


def _format_one_decimal(value: float) -> str:
    # Decimal(float) is exact, so halves round up the same way on every platform.
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
