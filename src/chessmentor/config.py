"""Centralized application configuration.

Settings are read from ``CHESSMENTOR_*`` environment variables or a
``.env.chessmentor`` file. The advisor is optional: without a base URL and
model the console app runs human-vs-human only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESSMENTOR_",
        env_file=".env.chessmentor",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Advisor (OpenAI-compatible chat completions endpoint)
    advisor_base_url: str | None = None
    advisor_model: str | None = None
    advisor_api_key: str | None = None
    advisor_timeout: float = 30.0
    advisor_mode: Literal["player", "teacher"] = "player"
    advisor_level: int = Field(default=1, ge=1, le=5)

    # Saved games
    saves_dir: Path = Path("saves")

    log_level: str = "WARNING"

    @property
    def advisor_enabled(self) -> bool:
        return bool(self.advisor_base_url and self.advisor_model)
