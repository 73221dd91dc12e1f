"""Configuration management for colorexp."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from colorexp.core.constants import InputLimits
from colorexp.core.palette import HighlightMode


class Config(BaseSettings):
    """Application configuration."""

    highlight_mode: HighlightMode = Field(
        default=HighlightMode.FOREGROUND,
        alias="COLOREXP_HIGHLIGHT_MODE",
        description="Default palette (foreground, background, both)",
    )
    max_line_length: int = Field(
        default=int(InputLimits.MAX_LINE_LENGTH),
        alias="COLOREXP_MAX_LINE_LENGTH",
        description="Longest input line accepted, counted in decoded characters rather than bytes",
        ge=1,
    )
    log_level: str = Field(
        default="WARNING",
        alias="COLOREXP_LOG_LEVEL",
        description="Logging level for diagnostics on stderr",
    )
    log_file: Path | None = Field(
        default=None,
        alias="COLOREXP_LOG_FILE",
        description="Optional file receiving diagnostics",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


def load_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()
