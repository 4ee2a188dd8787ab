"""Tests for the config command group against a real, isolated ConfigService."""

import json

from typer.testing import CliRunner

from chatbot_cli.commands.config import app
from chatbot_cli.services.config_service import get_config_service

runner = CliRunner()


class TestView:
    def test_view_shows_every_key(self):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        for key in ("data_file", "history_file", "log_level", "color", "prompt"):
            assert key in result.output


class TestGet:
    def test_known_key(self):
        result = runner.invoke(app, ["get", "log_level"])
        assert result.exit_code == 0
        assert result.output.strip() == "INFO"

    def test_unknown_key(self):
        result = runner.invoke(app, ["get", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestSet:
    def test_set_string(self):
        result = runner.invoke(app, ["set", "log_level", "debug"])

        assert result.exit_code == 0
        saved = json.loads(get_config_service().config_path.read_text(encoding="utf-8"))
        assert saved["log_level"] == "DEBUG"

    def test_set_bool(self):
        result = runner.invoke(app, ["set", "color", "false"])
        assert result.exit_code == 0
        assert get_config_service().get("color") is False

    def test_invalid_value(self):
        result = runner.invoke(app, ["set", "log_level", "LOUD"])
        assert result.exit_code == 1
        assert get_config_service().get("log_level") == "INFO"

    def test_unknown_key(self):
        result = runner.invoke(app, ["set", "nope", "1"])
        assert result.exit_code == 1


class TestReset:
    def test_reset_key_with_yes(self):
        runner.invoke(app, ["set", "prompt", "> "])

        result = runner.invoke(app, ["reset", "prompt", "--yes"])

        assert result.exit_code == 0
        assert get_config_service().get("prompt") == "❯ "

    def test_reset_declined(self):
        runner.invoke(app, ["set", "color", "false"])

        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert get_config_service().get("color") is False

    def test_reset_all_confirmed(self):
        runner.invoke(app, ["set", "color", "false"])

        result = runner.invoke(app, ["reset"], input="y\n")

        assert result.exit_code == 0
        assert get_config_service().get("color") is True

    def test_reset_unknown_key(self):
        result = runner.invoke(app, ["reset", "nope", "--yes"])
        assert result.exit_code == 1
