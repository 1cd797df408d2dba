"""Configuration service for Feedback Desk.

Updates:
    v0.1.0 - 2026-10-19 - Settings and storage configuration for the feedback store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader
from ..db.feedback_repository import DEFAULT_STORAGE_KEY
from .feedback_store import CorruptLoadPolicy

DEFAULT_SERVICE_TYPES = (
    "Customer Support",
    "Technical Support",
    "Sales",
    "Billing",
    "Product Quality",
    "Delivery",
)


@dataclass(slots=True, frozen=True)
class StorageConfig:
    """Location of the persisted feedback snapshot."""

    sqlite_path: str
    key: str = DEFAULT_STORAGE_KEY


class ConfigService:
    """Loads and exposes configuration for Feedback Desk components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")
        self._storage = self._loader.load("storage")

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        app_section = self._settings.get("app", {})
        return dict(app_section) if isinstance(app_section, dict) else {}

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        logging_section = self._settings.get("logging", {})
        return dict(logging_section) if isinstance(logging_section, dict) else {}

    @property
    def storage_config(self) -> StorageConfig:
        """Return the snapshot storage location.

        Raises:
            ValueError: If the storage key is configured but empty.
        """

        section = self._storage.get("storage", {})
        if not isinstance(section, dict):
            section = {}
        expanded = self._expand_env_values(section)
        key = expanded.get("key", DEFAULT_STORAGE_KEY)
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Storage configuration requires a non-empty 'key' value.")
        return StorageConfig(
            sqlite_path=str(expanded.get("sqlite_path", "./data/feedback.db")),
            key=key.strip(),
        )

    @property
    def service_types(self) -> tuple[str, ...]:
        """Return the fixed list of selectable service categories.

        Raises:
            ValueError: If the configured list is empty or holds blank entries.
        """

        feedback_section = self._feedback_section()
        configured = feedback_section.get("service_types")
        if configured is None:
            return DEFAULT_SERVICE_TYPES
        if not isinstance(configured, list) or not configured:
            raise ValueError("'feedback.service_types' must be a non-empty list.")
        names = tuple(str(name).strip() for name in configured)
        if any(not name for name in names):
            raise ValueError("'feedback.service_types' cannot contain blank entries.")
        return names

    @property
    def corrupt_load_policy(self) -> CorruptLoadPolicy:
        """Return how unreadable snapshots are treated on load.

        Raises:
            ValueError: If the configured policy name is unknown.
        """

        raw = self._feedback_section().get(
            "on_corrupt_load", CorruptLoadPolicy.RESET_TO_EMPTY.value
        )
        try:
            return CorruptLoadPolicy(str(raw).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(policy.value for policy in CorruptLoadPolicy)
            raise ValueError(
                f"Unknown on_corrupt_load policy '{raw}' (expected one of: {allowed})."
            ) from exc

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    def _feedback_section(self) -> dict[str, Any]:
        section = self._settings.get("feedback", {})
        return section if isinstance(section, dict) else {}

    @staticmethod
    def _expand_env_values(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: ConfigService._expand_env_values(entry)
                for key, entry in value.items()
            }
        if isinstance(value, list):
            return [ConfigService._expand_env_values(item) for item in value]
        if isinstance(value, str):
            return os.path.expandvars(value)
        return value
