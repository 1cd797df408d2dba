from __future__ import annotations

import json
from typing import Any

import pytest
from typer.testing import CliRunner

import feedback_desk.cli as cli
from feedback_desk.db.feedback_repository import FeedbackRepository
from feedback_desk.db.sqlite_client import SQLiteClient
from feedback_desk.services.feedback_store import FeedbackStore
from tests.helpers.cli import capture_json, make_cli_runtime, mute_console, patch_runtime


@pytest.fixture()
def cli_session(
    monkeypatch: pytest.MonkeyPatch, store: FeedbackStore
) -> tuple[CliRunner, cli.AppState, list[Any]]:
    runner = CliRunner()
    orchestrator, state = make_cli_runtime(store)
    patch_runtime(monkeypatch, orchestrator, state)
    payloads = capture_json(monkeypatch)
    return runner, state, payloads


def test_end_to_end_cli_flow(cli_session: tuple[CliRunner, cli.AppState, list[Any]]) -> None:
    runner, state, payloads = cli_session
    assert state.store is not None

    result = runner.invoke(cli.app, ["services"])
    assert result.exit_code == 0

    for args in (
        ["submit", "Support", "--rating", "5", "--comments", "Fast"],
        ["submit", "Sales", "-r", "3"],
        ["submit", "Support", "-r", "4"],
    ):
        result = runner.invoke(cli.app, args)
        assert result.exit_code == 0, result.output
    assert len(state.store) == 3

    result = runner.invoke(cli.app, ["list", "--service", "Support", "--raw"])
    assert result.exit_code == 0
    assert [item["rating"] for item in payloads[-1]] == [4, 5]

    result = runner.invoke(cli.app, ["list", "--rating", "3"])
    assert result.exit_code == 0

    result = runner.invoke(cli.app, ["analytics", "--json"])
    assert result.exit_code == 0
    assert payloads[-1]["summary"] == {"total": 3, "average": "4.0", "topService": "Support"}
    assert payloads[-1]["charts"]["rating"]["data"] == [0, 0, 1, 1, 1]

    result = runner.invoke(cli.app, ["analytics"])
    assert result.exit_code == 0

    result = runner.invoke(cli.app, ["clear"], input="n\n")
    assert result.exit_code == 0
    assert len(state.store) == 3

    result = runner.invoke(cli.app, ["clear", "--force"])
    assert result.exit_code == 0
    assert state.store.all() == ()


def test_cli_rejects_invalid_submissions(
    cli_session: tuple[CliRunner, cli.AppState, list[Any]],
) -> None:
    runner, state, _ = cli_session

    assert runner.invoke(cli.app, ["submit", "Support"]).exit_code != 0
    assert runner.invoke(cli.app, ["submit", "Support", "--rating", "9"]).exit_code != 0
    assert runner.invoke(cli.app, ["submit", "Unknown", "--rating", "3"]).exit_code != 0
    assert runner.invoke(cli.app, ["list", "--rating", "0"]).exit_code != 0
    assert state.store is not None and state.store.all() == ()


def test_cli_list_raw_outputs_records(
    cli_session: tuple[CliRunner, cli.AppState, list[Any]],
) -> None:
    runner, state, payloads = cli_session
    assert state.store is not None
    record = state.store.submit("Billing", 1, "Overcharged")

    result = runner.invoke(cli.app, ["list", "--raw"])

    assert result.exit_code == 0
    assert payloads[-1] == [record.to_dict()]
    assert json.loads(json.dumps(payloads[-1]))[0]["serviceType"] == "Billing"


def test_cli_list_matches_service_case_insensitively(
    cli_session: tuple[CliRunner, cli.AppState, list[Any]],
) -> None:
    runner, state, payloads = cli_session
    assert state.store is not None
    state.store.submit("Support", 5)
    state.store.submit("Sales", 2)

    result = runner.invoke(cli.app, ["list", "--service", "support", "--raw"])
    assert result.exit_code == 0
    assert [item["serviceType"] for item in payloads[-1]] == ["Support"]

    result = runner.invoke(cli.app, ["list", "--service", "Marketing", "--raw"])
    assert result.exit_code == 0
    assert payloads[-1] == []


def test_cli_clear_removes_unreadable_snapshot(
    monkeypatch: pytest.MonkeyPatch,
    sqlite_client: SQLiteClient,
    repository: FeedbackRepository,
) -> None:
    sqlite_client.set_item("feedbackData", "{not json")
    store = FeedbackStore(repository=repository)
    assert store.load() == ()
    orchestrator, state = make_cli_runtime(store)
    patch_runtime(monkeypatch, orchestrator, state)
    mute_console(monkeypatch)

    result = CliRunner().invoke(cli.app, ["clear", "--force"])

    assert result.exit_code == 0
    assert not repository.exists()
    assert not store.has_snapshot()


def test_cli_services_accepts_log_level(
    cli_session: tuple[CliRunner, cli.AppState, list[Any]],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    runner, _, _ = cli_session
    levels: list[str] = []
    monkeypatch.setattr(cli, "set_runtime_level", lambda level: levels.append(level))

    result = runner.invoke(cli.app, ["services", "--log-level", "DEBUG"])

    assert result.exit_code == 0, result.output
    assert levels == ["DEBUG"]
