"""Tests for the sync CLI."""

from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from openbeta_sync.cli import app
from openbeta_sync.config import EXIT_FATAL
from tests.unit.fakes import FakeIndexClient, FakeSourceStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def _drop_log_sinks() -> Iterator[None]:
    """The CLI logs to the runner's stderr, which is closed after each invoke."""
    yield
    logger.remove()


class _ClosableStore(FakeSourceStore):
    closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPESENSE_NODE", "search.example.org")
    monkeypatch.setenv("TYPESENSE_API_KEY", "secret")


@pytest.fixture
def wired(store: FakeSourceStore) -> Iterator[dict[str, Any]]:
    """Replace the real clients with fakes, recording how they were built."""
    closable = _ClosableStore(store.collections)
    built: dict[str, Any] = {"client": None, "store": closable, "store_args": None}

    def make_client(settings: object) -> FakeIndexClient:
        built["client"] = built["client"] or FakeIndexClient()
        return built["client"]  # type: ignore[no-any-return]

    def make_store(uri: str, database: str) -> _ClosableStore:
        built["store_args"] = (uri, database)
        return closable

    with (
        patch("openbeta_sync.cli.TypesenseApi", side_effect=make_client),
        patch("openbeta_sync.cli.MongoSourceStore", side_effect=make_store),
    ):
        yield built


@pytest.mark.usefixtures("env")
def test_areas_flag_syncs_areas_only(wired: dict[str, Any]) -> None:
    result = runner.invoke(app, ["--areas"])

    assert result.exit_code == 0, result.output
    client: FakeIndexClient = wired["client"]
    assert len(client.collections["areas"]) == 3
    assert "climbs" not in client.collections
    assert wired["store"].closed is True
    assert wired["client"].closed is True


@pytest.mark.usefixtures("env")
def test_both_flags_sync_both_collections(wired: dict[str, Any]) -> None:
    result = runner.invoke(app, ["--areas", "--climbs", "--chunk-size", "2"])

    assert result.exit_code == 0, result.output
    client: FakeIndexClient = wired["client"]
    assert len(client.collections["areas"]) == 3
    assert client.collections["climbs"][0]["areaNames"] == ["A", "B", "C"]
    assert wired["store_args"] == ("mongodb://localhost:27017", "openbeta")


@pytest.mark.usefixtures("env")
def test_no_flags_does_no_work(wired: dict[str, Any]) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert wired["client"] is None
    assert wired["store_args"] is None


def test_missing_credentials_exit_fatal_before_any_call(
    monkeypatch: pytest.MonkeyPatch, wired: dict[str, Any]
) -> None:
    monkeypatch.delenv("TYPESENSE_NODE", raising=False)
    monkeypatch.delenv("TYPESENSE_API_KEY", raising=False)

    result = runner.invoke(app, ["--areas", "--climbs"])

    assert result.exit_code == EXIT_FATAL
    assert wired["client"] is None
    assert wired["store_args"] is None


@pytest.mark.usefixtures("env")
def test_provisioning_failure_exits_fatal(wired: dict[str, Any]) -> None:
    wired["client"] = FakeIndexClient(fail_create=True)

    result = runner.invoke(app, ["--areas", "--climbs"])

    assert result.exit_code == EXIT_FATAL
    client: FakeIndexClient = wired["client"]
    assert ("create", "climbs") not in client.calls
    assert not any(op == "import" for op, _ in client.calls)
    assert wired["store"].closed is True
    assert wired["client"].closed is True


@pytest.mark.usefixtures("env")
def test_failed_chunk_still_exits_zero(wired: dict[str, Any]) -> None:
    wired["client"] = FakeIndexClient(fail_imports={0})

    result = runner.invoke(app, ["--areas", "--chunk-size", "2"])

    assert result.exit_code == 0
    assert len(wired["client"].collections["areas"]) == 1


def test_chunk_size_must_be_positive(env: None) -> None:
    result = runner.invoke(app, ["--areas", "--chunk-size", "0"])

    assert result.exit_code == 2
