"""
Tests for the travelogue CLI
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from travelogue.cli import cli
from travelogue.config import settings
from travelogue.database.connection import reset_database


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.setenv("TRAVELOGUE_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    reset_database()
    yield CliRunner()
    reset_database()


@pytest.mark.integration
@pytest.mark.requires_db
def test_init_db_then_seed(runner: CliRunner):
    result = runner.invoke(cli, ["init-db"])
    assert result.exit_code == 0, result.output
    assert "Database tables created" in result.output

    result = runner.invoke(cli, ["seed"])
    assert result.exit_code == 0, result.output
    assert "Database seeded successfully" in result.output
    assert "840, 392" in result.output


@pytest.mark.integration
@pytest.mark.requires_db
def test_second_seed_exits_non_zero(runner: CliRunner):
    assert runner.invoke(cli, ["init-db"]).exit_code == 0
    assert runner.invoke(cli, ["seed"]).exit_code == 0

    result = runner.invoke(cli, ["seed"])

    assert result.exit_code == 1


@pytest.mark.unit
def test_schema_prints_sdl(runner: CliRunner):
    result = runner.invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "blogPostsPublishedAfter(date: String!): [BlogPost!]!" in result.output
    assert "start_date: DateTime!" in result.output
    assert "enum SortOrder {\n  asc\n  desc\n}" in result.output
    assert "type Mutation" not in result.output


@pytest.mark.unit
@pytest.mark.parametrize(("log_level", "debug"), [("debug", True), ("warning", False)])
def test_serve_applies_log_level_to_settings(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, log_level: str, debug: bool
):
    monkeypatch.setattr(settings, "debug", not debug)
    monkeypatch.setattr(settings, "log_level", "INFO")

    with patch("travelogue.cli.uvicorn.run") as mock_run:
        result = runner.invoke(cli, ["serve", "--log-level", log_level])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    assert settings.debug is debug
    assert settings.log_level == log_level.upper()
    assert mock_run.call_args.kwargs["log_level"] == log_level
