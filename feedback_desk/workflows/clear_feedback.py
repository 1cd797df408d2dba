"""Feedback reset workflow."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.feedback_store import FeedbackStore


@dataclass
class ClearFeedbackWorkflow:
    store: FeedbackStore
    name: str = "clear_feedback"

    def run(self, context: dict) -> dict:
        removed = len(self.store)
        self.store.clear()
        return {"removed": removed}
