from __future__ import annotations

import itertools
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from feedback_desk.db.feedback_repository import FeedbackRepository  # noqa: E402
from feedback_desk.db.sqlite_client import SQLiteClient  # noqa: E402
from feedback_desk.services.feedback_store import FeedbackStore  # noqa: E402


@pytest.fixture()
def sqlite_client(tmp_path: Path) -> SQLiteClient:
    client = SQLiteClient(tmp_path / "feedback.db")
    client.initialize_schema()
    yield client
    client.close()


@pytest.fixture()
def repository(sqlite_client: SQLiteClient) -> FeedbackRepository:
    return FeedbackRepository(sqlite_client=sqlite_client)


@pytest.fixture()
def store(repository: FeedbackRepository) -> FeedbackStore:
    ids = itertools.count(1_700_000_000_000)
    seconds = itertools.count(0)
    feedback_store = FeedbackStore(
        repository=repository,
        id_generator=lambda: next(ids),
        clock=lambda: f"2026-10-19T12:00:{next(seconds) % 60:02d}.000Z",
    )
    feedback_store.load()
    return feedback_store
