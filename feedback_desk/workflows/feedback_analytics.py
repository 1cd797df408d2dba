"""Analytics workflow.

Updates:
    v0.1.0 - 2026-10-19 - Summary statistics and chart series for the whole collection.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.analytics import chart_data, group_by_rating, group_by_service, summarize
from ..services.feedback_store import FeedbackStore


@dataclass
class FeedbackAnalyticsWorkflow:
    store: FeedbackStore
    name: str = "feedback_analytics"

    def run(self, context: dict) -> dict:
        """Recompute every aggregate from the current collection.

        Args:
            context (dict): Unused; accepted for the workflow contract.

        Returns:
            dict: ``summary``, ``by_service``, ``by_rating`` and ``charts`` entries.
        """

        records = self.store.all()
        return {
            "summary": summarize(records),
            "by_service": group_by_service(records),
            "by_rating": group_by_rating(records),
            "charts": chart_data(records),
        }
