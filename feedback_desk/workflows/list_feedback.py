"""Feedback listing workflow."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.analytics import filter_feedback
from ..services.feedback_store import FeedbackStore


@dataclass
class ListFeedbackWorkflow:
    store: FeedbackStore
    name: str = "list_feedback"

    def run(self, context: dict) -> dict:
        records = filter_feedback(
            self.store.all(),
            service_type=context.get("service_type"),
            rating=context.get("rating"),
        )
        return {"records": records}
