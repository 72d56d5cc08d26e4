"""Runtime settings via pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flightcalc.config import summarize_validation_error
from flightcalc.exceptions import InvalidInputError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """flightcalc runtime configuration.

    Values are loaded from ``FLIGHTCALC_*`` environment variables, falling back
    to a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_dir: str = "logs"
    log_level: LogLevel = "INFO"
    log_file_name: str = "scenario.log"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_case_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Return settings freshly read from the environment, raising InvalidInputError if invalid."""
    try:
        return Settings()
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid settings: {summarize_validation_error(exc)}") from exc
