from __future__ import annotations

import pytest

from feedback_desk.core.analytics import (
    FeedbackSummary,
    chart_data,
    filter_feedback,
    format_stars,
    group_by_rating,
    group_by_service,
    summarize,
)
from feedback_desk.core.feedback_records import FeedbackRecord


def _record(record_id: int, service: str, rating: int, comments: str = "") -> FeedbackRecord:
    return FeedbackRecord(
        id=record_id,
        service_type=service,
        rating=rating,
        comments=comments,
        date="2026-10-19T12:00:00.000Z",
    )


@pytest.fixture()
def scenario() -> tuple[FeedbackRecord, ...]:
    return (
        _record(1, "Support", 5),
        _record(2, "Sales", 3),
        _record(3, "Support", 4),
    )


def test_scenario_aggregates(scenario: tuple[FeedbackRecord, ...]) -> None:
    summary = summarize(scenario)

    assert summary == FeedbackSummary(total=3, average="4.0", top_service="Support")
    assert group_by_service(scenario) == {"Support": 2, "Sales": 1}
    assert list(group_by_service(scenario)) == ["Support", "Sales"]
    assert group_by_rating(scenario) == [0, 0, 1, 1, 1]

    support = filter_feedback(scenario, service_type="Support")
    assert [record.id for record in support] == [3, 1]


def test_empty_collection_has_zero_results() -> None:
    assert summarize(()) == FeedbackSummary(total=0, average="0.0", top_service="-")
    assert group_by_service(()) == {}
    assert group_by_rating(()) == [0, 0, 0, 0, 0]
    assert filter_feedback(()) == ()
    assert filter_feedback((), service_type="Support", rating=5) == ()


def test_filter_combines_criteria_with_and(scenario: tuple[FeedbackRecord, ...]) -> None:
    assert [r.id for r in filter_feedback(scenario, service_type="Support", rating=4)] == [3]
    assert filter_feedback(scenario, service_type="Sales", rating=5) == ()
    assert [r.id for r in filter_feedback(scenario, rating=3)] == [2]


def test_filter_without_criteria_returns_everything_latest_first(
    scenario: tuple[FeedbackRecord, ...],
) -> None:
    everything = filter_feedback(scenario)

    assert set(everything) == set(scenario)
    assert everything == tuple(reversed(scenario))


def test_filter_is_idempotent_and_leaves_input_untouched(
    scenario: tuple[FeedbackRecord, ...],
) -> None:
    records = list(scenario)

    once = filter_feedback(records, service_type="Support")
    twice = filter_feedback(once, service_type="Support")

    assert once == twice
    assert records == list(scenario)


def test_filter_service_match_is_exact(scenario: tuple[FeedbackRecord, ...]) -> None:
    assert filter_feedback(scenario, service_type="support") == ()


def test_top_service_tie_goes_to_first_encountered() -> None:
    records = (
        _record(1, "Billing", 2),
        _record(2, "Sales", 4),
        _record(3, "Sales", 4),
        _record(4, "Billing", 1),
    )

    assert summarize(records).top_service == "Billing"
    assert summarize(tuple(reversed(records))).top_service == "Billing"
    assert summarize(records[1:]).top_service == "Sales"


@pytest.mark.parametrize(
    ("ratings", "expected"),
    [
        ([5], "5.0"),
        ([1, 2], "1.5"),
        ([4, 4, 5], "4.3"),
        ([1, 1, 2], "1.3"),
        ([4, 4, 4, 5], "4.3"),
        ([1, 2, 2, 2], "1.8"),
        ([1] * 17 + [2] * 3, "1.1"),
    ],
)
def test_average_rounds_to_one_decimal(ratings: list[int], expected: str) -> None:
    records = tuple(_record(idx, "Sales", rating) for idx, rating in enumerate(ratings))
    assert summarize(records).average == expected


def test_rating_buckets_always_cover_five_slots_and_sum_to_total() -> None:
    records = tuple(_record(idx, "Sales", 5) for idx in range(7)) + (_record(99, "Sales", 1),)

    buckets = group_by_rating(records)

    assert len(buckets) == 5
    assert buckets == [1, 0, 0, 0, 7]
    assert sum(buckets) == summarize(records).total


def test_chart_data_matches_groupings(scenario: tuple[FeedbackRecord, ...]) -> None:
    charts = chart_data(scenario)

    assert charts["service"] == {"labels": ["Support", "Sales"], "data": [2, 1]}
    assert charts["rating"]["labels"] == ["1 Star", "2 Stars", "3 Stars", "4 Stars", "5 Stars"]
    assert charts["rating"]["data"] == [0, 0, 1, 1, 1]


def test_summary_to_dict_uses_display_keys() -> None:
    summary = FeedbackSummary(total=2, average="3.5", top_service="Sales")
    assert summary.to_dict() == {"total": 2, "average": "3.5", "topService": "Sales"}


def test_format_stars() -> None:
    assert format_stars(3) == "★★★☆☆"
    assert format_stars(5) == "★★★★★"
    assert format_stars(1) == "★☆☆☆☆"
