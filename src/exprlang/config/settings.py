"""Application settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exprlang.eval.format import OutputFormat


class Settings(BaseSettings):
    """Driver and REPL settings, read from EXPRLANG_* variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EXPRLANG_",
        case_sensitive=False,
        extra="ignore",
    )

    output_format: OutputFormat = Field(default=OutputFormat.DECIMAL)
    show_type: bool = Field(default=False)
    home: str | None = Field(default=None)

    def resolve_home(self) -> Path:
        if self.home:
            return Path(self.home).expanduser().resolve()
        return (Path.home() / ".exprlang").resolve()

    def history_file(self) -> Path:
        return self.resolve_home() / "history"


def load_settings(**overrides: Any) -> Settings:
    """Load settings; explicit overrides (CLI flags) win over the environment.

    Overrides whose value is None are ignored so unset flags fall through.
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
