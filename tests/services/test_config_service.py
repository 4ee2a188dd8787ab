"""Tests for ConfigService."""

from __future__ import annotations

import json

import pytest

from chatbot_cli.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def service(isolated_dirs) -> ConfigService:
    return ConfigService()


class TestLoad:
    def test_first_run_writes_defaults(self, service, isolated_dirs):
        config = service.config

        assert service.config_path == isolated_dirs / "config" / "config.json"
        assert service.config_path.exists()
        assert config.data_file == str(isolated_dirs / "data" / "tasks.txt")
        assert config.log_level == "INFO"
        assert config.color is True

    def test_reads_existing_file(self, service):
        service.config_path.write_text(
            json.dumps({"data_file": "/tmp/elsewhere.txt", "log_level": "debug"}),
            encoding="utf-8",
        )

        config = service.load_config()

        assert config.data_file == "/tmp/elsewhere.txt"
        assert config.log_level == "DEBUG"

    def test_invalid_file_raises_runtime_error(self, service):
        service.config_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            service.load_config()

    def test_singleton(self):
        assert get_config_service() is get_config_service()


class TestGetSet:
    def test_get_known_and_unknown(self, service):
        assert service.get("log_level") == "INFO"
        assert service.get("nope") is None

    def test_set_persists(self, service):
        service.set("log_level", "warning")

        saved = json.loads(service.config_path.read_text(encoding="utf-8"))
        assert saved["log_level"] == "WARNING"
        assert ConfigService().config.log_level == "WARNING"

    def test_set_unknown_key(self, service):
        with pytest.raises(KeyError):
            service.set("nope", "x")

    @pytest.mark.parametrize(
        "key, value", [("log_level", "LOUD"), ("data_file", "   "), ("color", "maybe")]
    )
    def test_set_invalid_value(self, service, key, value):
        with pytest.raises(ValueError, match=f"Invalid value for '{key}'"):
            service.set(key, value)
        assert service.get(key) == service.create_default_config().model_dump()[key]


class TestReset:
    def test_reset_single_key(self, service):
        service.set("log_level", "DEBUG")
        service.set("color", False)

        service.reset_config("log_level")

        assert service.get("log_level") == "INFO"
        assert service.get("color") is False

    def test_reset_everything(self, service):
        service.set("prompt", "> ")
        service.set("color", False)

        service.reset_config()

        assert service.config == service.create_default_config()

    def test_reset_unknown_key(self, service):
        with pytest.raises(KeyError):
            service.reset_config("nope")
