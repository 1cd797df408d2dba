"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from feedback_desk.core.feedback_records import is_valid_rating

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["feedback_desk.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def require_rating(rating: Optional[int]) -> int:
    """Reject a missing or out-of-range star rating."""

    if rating is None or not is_valid_rating(rating):
        raise typer.BadParameter("Please select a star rating between 1 and 5.")
    return rating


def resolve_service_type(service_type: str, known: tuple[str, ...]) -> str:
    """Match ``service_type`` against the configured categories.

    The comparison ignores case so ``sales`` selects ``Sales``.

    Raises:
        typer.BadParameter: If the value is blank or not a known category.
    """

    candidate = (service_type or "").strip()
    if not candidate:
        raise typer.BadParameter("Please select a service type.")
    if not known:
        return candidate
    for name in known:
        if name.lower() == candidate.lower():
            return name
    raise typer.BadParameter(
        f"Unknown service type '{candidate}'. Choose one of: {', '.join(known)}."
    )


def match_service_type(
    service_type: Optional[str], known: tuple[str, ...]
) -> Optional[str]:
    """Return the configured spelling of a filter value, or the value unchanged.

    Unknown names pass through so the filter simply matches nothing.
    """

    candidate = (service_type or "").strip()
    if not candidate:
        return None
    for name in known:
        if name.lower() == candidate.lower():
            return name
    return candidate


__all__ = [
    "apply_log_override",
    "match_service_type",
    "require_rating",
    "resolve_service_type",
]
