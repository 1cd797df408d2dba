"""Rich renderers for CLI outputs."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping, Sequence

from rich.panel import Panel
from rich.table import Table

from feedback_desk.cli.io import console
from feedback_desk.core.analytics import RATING_LABELS, FeedbackSummary, format_stars
from feedback_desk.core.feedback_records import FeedbackRecord


def format_local_datetime(timestamp: str) -> str:
    """Return ``timestamp`` as a local "date at time" string."""

    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    local = moment.astimezone()
    return f"{local.strftime('%Y-%m-%d')} at {local.strftime('%H:%M:%S')}"


def render_feedback_list(records: Sequence[FeedbackRecord]) -> None:
    """Display feedback entries or an empty-state panel."""

    if not records:
        console.print(
            Panel(
                "[bold]No feedback found[/]\nTry changing filters or submit new feedback.",
                title="Feedback",
            )
        )
        return

    table = Table(title="Feedback", show_lines=False)
    table.add_column("Service", style="cyan")
    table.add_column("Rating", style="yellow")
    table.add_column("Comments")
    table.add_column("Submitted", style="dim")

    for record in records:
        comment = f'"{record.comments}"' if record.comments else ""
        table.add_row(
            record.service_type,
            format_stars(record.rating),
            comment,
            format_local_datetime(record.date),
        )

    console.print(table)


def render_summary(summary: FeedbackSummary) -> None:
    """Display headline statistics."""

    lines = [
        f"[bold]Total feedback:[/] {summary.total}",
        f"[bold]Average rating:[/] {summary.average}",
        f"[bold]Top service:[/] {summary.top_service}",
    ]
    console.print(Panel("\n".join(lines), title="Analytics"))


def render_service_breakdown(counts: Mapping[str, int]) -> None:
    """Display feedback counts per service category."""

    if not counts:
        console.print(Panel("No services reviewed yet.", title="Feedback by Service"))
        return

    table = Table(title="Feedback by Service")
    table.add_column("Service", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("")
    peak = max(counts.values())
    for service, count in counts.items():
        table.add_row(service, str(count), _bar(count, peak))
    console.print(table)


def render_rating_distribution(buckets: Sequence[int]) -> None:
    """Display how many entries fall into each star bucket."""

    table = Table(title="Rating Distribution")
    table.add_column("Rating", style="yellow")
    table.add_column("Count", justify="right")
    table.add_column("")
    peak = max(buckets) if buckets else 0
    for label, count in zip(RATING_LABELS, buckets):
        table.add_row(label, str(count), _bar(count, peak))
    console.print(table)


def render_service_types(service_types: Sequence[str]) -> None:
    """List the configured service categories."""

    table = Table(title="Service Types")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Service", style="cyan")
    for idx, name in enumerate(service_types, start=1):
        table.add_row(str(idx), name)
    console.print(table)


def _bar(count: int, peak: int, width: int = 20) -> str:
    if peak <= 0 or count <= 0:
        return ""
    return "█" * max(1, round(width * count / peak))


__all__ = [
    "format_local_datetime",
    "render_feedback_list",
    "render_rating_distribution",
    "render_service_breakdown",
    "render_service_types",
    "render_summary",
]
