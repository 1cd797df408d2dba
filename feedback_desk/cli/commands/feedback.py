"""Feedback commands for the Feedback Desk CLI."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.panel import Panel

from feedback_desk.cli.io import console
from feedback_desk.cli.renderers import (
    render_feedback_list,
    render_rating_distribution,
    render_service_breakdown,
    render_service_types,
    render_summary,
)
from feedback_desk.cli.utils import (
    apply_log_override,
    match_service_type,
    require_rating,
    resolve_service_type,
)
from feedback_desk.core.errors import InvalidFeedbackError


def _cli():
    return sys.modules["feedback_desk.cli"]


def submit(
    service_type: str = typer.Argument(..., help="Service the feedback is about."),
    rating: Optional[int] = typer.Option(
        None, "--rating", "-r", help="Star rating from 1 to 5."
    ),
    comments: str = typer.Option(
        "", "--comments", "-c", help="Optional free-form comments."
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Submit a star rating and comments for a service."""

    apply_log_override(log_level)
    state = _cli().get_state()
    stars = require_rating(rating)
    service = resolve_service_type(service_type, state.service_types)

    orchestrator = _cli().get_orchestrator()
    context = {"service_type": service, "rating": stars, "comments": comments}
    try:
        orchestrator.execute("submit_feedback", context)
    except InvalidFeedbackError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(
        Panel(
            "Your feedback has been submitted successfully.",
            title="Thank You!",
            border_style="green",
        )
    )


def list_feedback(
    service_type: Optional[str] = typer.Option(
        None, "--service", "-s", help="Only show feedback for this service."
    ),
    rating: Optional[int] = typer.Option(
        None, "--rating", "-r", min=1, max=5, help="Only show this star rating."
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Emit raw JSON instead of a rendered table.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """List feedback, most recent first, optionally filtered."""

    apply_log_override(log_level)
    state = _cli().get_state()
    service = match_service_type(service_type, state.service_types)
    orchestrator = _cli().get_orchestrator()
    result = orchestrator.execute(
        "list_feedback", {"service_type": service, "rating": rating}
    )
    records = result.get("records") or ()

    if raw:
        console.print_json(data=[record.to_dict() for record in records])
        return
    render_feedback_list(records)


def analytics(
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit summary and chart series as JSON.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Show summary statistics and the service and rating breakdowns."""

    apply_log_override(log_level)
    orchestrator = _cli().get_orchestrator()
    result = orchestrator.execute("feedback_analytics", {})

    if as_json:
        console.print_json(
            data={"summary": result["summary"].to_dict(), "charts": result["charts"]}
        )
        return

    render_summary(result["summary"])
    render_service_breakdown(result["by_service"])
    render_rating_distribution(result["by_rating"])


def clear(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Delete without confirmation prompt.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Delete every stored feedback entry."""

    apply_log_override(log_level)
    state = _cli().get_state()
    store = state.store
    if store is not None and len(store) == 0 and not store.has_snapshot():
        console.print("[yellow]No feedback to delete.[/]")
        return

    if not force and not typer.confirm(
        "Delete all feedback? You won't be able to revert this!"
    ):
        console.print("[yellow]Feedback unchanged.[/]")
        return

    result = _cli().get_orchestrator().execute("clear_feedback", {})
    console.print(f"[green]Deleted {result.get('removed', 0)} feedback entries.[/]")


def services(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """List the service types feedback can be submitted for."""

    apply_log_override(log_level)
    state = _cli().get_state()
    render_service_types(state.service_types)


__all__ = ["analytics", "clear", "list_feedback", "services", "submit"]
