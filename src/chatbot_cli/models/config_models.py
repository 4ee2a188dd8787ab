"""Configuration models for ChatBot CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import BaseModel, Field, field_validator

APP_NAME = "chatbot_cli"


def _default_data_file() -> str:
    return str(Path(user_data_dir(APP_NAME)) / "tasks.txt")


def _default_history_file() -> str:
    return str(Path(user_data_dir(APP_NAME)) / "history.txt")


class AppConfig(BaseModel):
    """Main ChatBot CLI configuration."""

    data_file: str = Field(
        default_factory=_default_data_file, description="Flat file holding the tasks"
    )
    history_file: str = Field(
        default_factory=_default_history_file, description="REPL input history"
    )
    log_level: str = Field(default="INFO", description="Log file verbosity")
    color: bool = Field(default=True, description="Colored console output")
    prompt: str = Field(default="❯ ", description="REPL prompt")

    @field_validator("data_file", "history_file")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure paths are not blank."""
        if not v or not v.strip():
            raise ValueError("path cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level
