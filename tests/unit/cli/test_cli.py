"""Tests for the dialogstack CLI."""

import pytest
from typer.testing import CliRunner

from dialogstack.cli import chat_runner
from dialogstack.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Leave the process logging configuration alone while the CLI runs."""
    monkeypatch.setattr(chat_runner, "setup_logging", lambda *args, **kwargs: None)


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "dialogstack version" in result.output


def test_chat_with_age_bot():
    """
    GIVEN the age sample bot
    WHEN the user greets it, answers 35 and exits
    THEN the bot asks for the age and echoes it back
    """
    result = runner.invoke(app, ["chat", "--bot", "age", "--user", "u1"], input="hi\n35\nexit\n")

    assert result.exit_code == 0
    assert "How old are you?" in result.output
    assert "age=35" in result.output
    assert "Dialog completed with result: 35" in result.output


def test_chat_cancel_command():
    result = runner.invoke(app, ["chat", "--bot", "age"], input="hi\ncancel\nexit\n")

    assert result.exit_code == 0
    assert "Dialogs cancelled" in result.output


def test_chat_unknown_bot_exits_with_error():
    result = runner.invoke(app, ["chat", "--bot", "nope"])

    assert result.exit_code == 1


def test_chat_reads_config_file(tmp_path):
    config = tmp_path / "dialogstack.yaml"
    config.write_text("persistence:\n  backend: langgraph\n")

    result = runner.invoke(
        app, ["chat", "--bot", "age", "--config", str(config)], input="hi\nexit\n"
    )

    assert result.exit_code == 0
    assert "How old are you?" in result.output
