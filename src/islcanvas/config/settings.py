"""Environment-driven application settings.

Values are loaded from environment variables (prefix ``ISL_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from islcanvas.lang.ast import Color


class CanvasSettings(BaseSettings):
    """Size and initial fill of the canvas every interpreter starts from."""

    model_config = SettingsConfigDict(env_prefix="ISL_CANVAS_")

    width: int = Field(default=400, ge=1, le=10_000)
    height: int = Field(default=400, ge=1, le=10_000)
    background: tuple[int, int, int, int] = (255, 255, 255, 255)
    """RGBA fill, e.g. ``ISL_CANVAS_BACKGROUND='[0,0,0,255]'``."""

    @field_validator("background")
    @classmethod
    def _channels_in_range(cls, value: tuple[int, int, int, int]) -> Color:
        if any(not 0 <= c <= 255 for c in value):
            raise ValueError(f"background channels must be within 0-255, got {value}")
        return Color(*value)


class ReplSettings(BaseSettings):
    """Interactive session knobs."""

    model_config = SettingsConfigDict(env_prefix="ISL_REPL_")

    prompt: str = " λ> "
    history_file: Path = Path.home() / ".islcanvas" / "history.txt"
    quit_words: tuple[str, ...] = (":q", "exit")


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    canvas: CanvasSettings = Field(default_factory=CanvasSettings)
    repl: ReplSettings = Field(default_factory=ReplSettings)


# Module-level singleton — import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
