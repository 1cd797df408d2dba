"""CLI runtime state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from feedback_desk.services.feedback_store import FeedbackStore


@dataclass
class AppState:
    """Objects shared by CLI commands for one invocation."""

    store: Optional["FeedbackStore"] = field(default=None, repr=False, compare=False)
    service_types: tuple[str, ...] = ()
    app_name: str = "Feedback Desk"


__all__ = ["AppState"]
