"""Workflow orchestration utilities.

Every CLI action runs through ``Orchestrator.execute`` so that each store
mutation or aggregation emits one structured completion or failure event.

Updates:
    v0.1.0 - 2026-10-19 - Dispatch feedback workflows with structured duration logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Mapping, Protocol


class Workflow(Protocol):
    """Protocol describing the workflow contract."""

    name: str

    def run(self, context: dict) -> dict:
        """Execute the workflow and return a response.

        Args:
            context (dict): Input data required by the workflow.

        Returns:
            dict: Workflow-specific result payload.
        """

        ...


@dataclass(slots=True)
class Orchestrator:
    workflows: dict[str, Workflow] = field(default_factory=dict)

    _logger = logging.getLogger(__name__)

    @property
    def workflow_names(self) -> tuple[str, ...]:
        return tuple(self.workflows)

    def execute(
        self, workflow_name: str, context: Mapping[str, Any] | None = None
    ) -> dict:
        """Run a registered workflow with a private copy of ``context``.

        Args:
            workflow_name (str): Name of the workflow to execute.
            context (Mapping[str, Any] | None): Payload passed to the workflow.

        Returns:
            dict: Output produced by the workflow.

        Raises:
            KeyError: If the workflow name is unknown.
        """

        workflow = self.workflows.get(workflow_name)
        if workflow is None:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.")
        payload = dict(context or {})
        started = perf_counter()
        try:
            result = workflow.run(payload)
        except Exception as exc:
            self._logger.error(
                "workflow_failed",
                extra={
                    "workflow": workflow_name,
                    "duration_ms": _elapsed_ms(started),
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
                exc_info=True,
            )
            raise

        self._logger.info(
            "workflow_completed",
            extra={
                "workflow": workflow_name,
                "duration_ms": _elapsed_ms(started),
                "context_keys": sorted(payload),
                "result_keys": sorted(result),
            },
        )
        return result

    def register(self, workflow: Workflow) -> None:
        """Register a workflow implementation under its ``name``.

        Raises:
            ValueError: If another workflow already uses the same name.
        """

        existing = self.workflows.get(workflow.name)
        if existing is not None and existing is not workflow:
            raise ValueError(f"Workflow '{workflow.name}' is already registered.")
        self.workflows[workflow.name] = workflow


def _elapsed_ms(started: float) -> float:
    return round((perf_counter() - started) * 1000, 2)
