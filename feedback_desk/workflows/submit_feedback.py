"""Feedback submission workflow.

Updates:
    v0.1.0 - 2026-10-19 - Record a feedback entry through the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..services.feedback_store import FeedbackStore


@dataclass
class SubmitFeedbackWorkflow:
    store: FeedbackStore
    name: str = "submit_feedback"

    def run(self, context: dict) -> dict:
        """Submit one feedback entry.

        Args:
            context (dict): Must contain ``service_type`` and ``rating``;
                ``comments`` is optional.

        Returns:
            dict: The stored record under ``record``.
        """

        record = self.store.submit(
            service_type=context["service_type"],
            rating=context["rating"],
            comments=context.get("comments") or "",
        )
        return {"record": record}
