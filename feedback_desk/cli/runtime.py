"""Runtime wiring for the Feedback Desk CLI."""

from __future__ import annotations

import logging
from typing import Any

from feedback_desk.cli.state import AppState
from feedback_desk.core.logging_setup import configure_logging
from feedback_desk.core.logging_setup import set_runtime_level  # re-export via utils
from feedback_desk.core.orchestrator import Orchestrator
from feedback_desk.db.feedback_repository import FeedbackRepository
from feedback_desk.db.sqlite_client import SQLiteClient
from feedback_desk.services.config_service import ConfigService
from feedback_desk.services.feedback_store import FeedbackStore
from feedback_desk.workflows.clear_feedback import ClearFeedbackWorkflow
from feedback_desk.workflows.feedback_analytics import FeedbackAnalyticsWorkflow
from feedback_desk.workflows.list_feedback import ListFeedbackWorkflow
from feedback_desk.workflows.submit_feedback import SubmitFeedbackWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[Orchestrator, AppState] | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_SQLITE_CLIENT = SQLiteClient
_DEFAULT_FEEDBACK_REPOSITORY = FeedbackRepository
_DEFAULT_FEEDBACK_STORE = FeedbackStore


def initialize_runtime() -> tuple[Orchestrator, AppState]:
    """Initialize the feedback store and workflows for CLI usage."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")
    storage = config_service.storage_config

    sqlite_cls = _resolve_dependency("SQLiteClient", _DEFAULT_SQLITE_CLIENT)
    sqlite_client = sqlite_cls(storage.sqlite_path)
    sqlite_client.initialize_schema()

    repository_cls = _resolve_dependency(
        "FeedbackRepository", _DEFAULT_FEEDBACK_REPOSITORY
    )
    repository = repository_cls(sqlite_client=sqlite_client, key=storage.key)
    store_cls = _resolve_dependency("FeedbackStore", _DEFAULT_FEEDBACK_STORE)
    store = store_cls(
        repository=repository,
        on_corrupt_load=config_service.corrupt_load_policy,
    )
    store.load()
    logger.debug("Feedback store ready (records=%s).", len(store))

    orchestrator = build_orchestrator(store)
    state = AppState(
        store=store,
        service_types=config_service.service_types,
        app_name=str(config_service.app_metadata.get("name", "Feedback Desk")),
    )
    return orchestrator, state


def build_orchestrator(store: FeedbackStore) -> Orchestrator:
    """Register the feedback workflows against ``store``."""

    orchestrator_cls = _resolve_dependency("Orchestrator", Orchestrator)
    orchestrator = orchestrator_cls(workflows={})
    for workflow in (
        SubmitFeedbackWorkflow(store=store),
        ListFeedbackWorkflow(store=store),
        FeedbackAnalyticsWorkflow(store=store),
        ClearFeedbackWorkflow(store=store),
    ):
        orchestrator.register(workflow)
    return orchestrator


def get_runtime() -> tuple[Orchestrator, AppState]:
    """Return the lazily-initialized orchestrator and CLI state."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[Orchestrator, AppState] | None) -> None:
    """Replace the cached runtime tuple."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    """Return the cached orchestrator instance."""

    orchestrator, _ = get_runtime()
    return orchestrator


def get_state() -> AppState:
    """Return the cached application state."""

    _, state = get_runtime()
    return state


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("feedback_desk.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "build_orchestrator",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
