"""Feedback Desk CLI package."""

from __future__ import annotations

import logging

import typer

from feedback_desk.cli.commands.feedback import (
    analytics,
    clear,
    list_feedback,
    services,
    submit,
)
from feedback_desk.cli.io import console
from feedback_desk.cli.renderers import (
    format_local_datetime,
    render_feedback_list,
    render_rating_distribution,
    render_service_breakdown,
    render_service_types,
    render_summary,
)
from feedback_desk.cli.runtime import (
    build_orchestrator,
    get_orchestrator,
    get_runtime,
    get_state,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from feedback_desk.cli.state import AppState
from feedback_desk.cli.utils import (
    apply_log_override,
    match_service_type,
    require_rating,
    resolve_service_type,
)
from feedback_desk.core.logging_setup import configure_logging
from feedback_desk.core.orchestrator import Orchestrator
from feedback_desk.db.feedback_repository import FeedbackRepository
from feedback_desk.db.sqlite_client import SQLiteClient
from feedback_desk.services.config_service import ConfigService
from feedback_desk.services.feedback_store import FeedbackStore

logger = logging.getLogger(__name__)

# Typer application ----------------------------------------------------------

app = typer.Typer(
    add_completion=False, help="Collect and review service feedback."
)

# Command registration -------------------------------------------------------

app.command()(submit)
app.command("list")(list_feedback)
app.command()(analytics)
app.command()(clear)
app.command()(services)


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer app / entrypoint
    "app",
    "main",
    # Console & logging
    "console",
    "logger",
    "configure_logging",
    # State & runtime
    "AppState",
    "build_orchestrator",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
    # Commands
    "analytics",
    "clear",
    "list_feedback",
    "services",
    "submit",
    # Renderers
    "format_local_datetime",
    "render_feedback_list",
    "render_rating_distribution",
    "render_service_breakdown",
    "render_service_types",
    "render_summary",
    # Utilities
    "apply_log_override",
    "match_service_type",
    "require_rating",
    "resolve_service_type",
    # Classes re-exported so tests can swap them in runtime wiring
    "ConfigService",
    "SQLiteClient",
    "FeedbackRepository",
    "FeedbackStore",
    "Orchestrator",
]
