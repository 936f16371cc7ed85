from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.orchestration.culture import Culture

# .env is loaded once at import so every BaseSettings subclass sees its values
load_dotenv()


class LoggingSettings(BaseSettings):
    """structlog settings. Env vars prefixed with LOG_."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    json_output: bool = True

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(
                f"LOG_LEVEL must be a standard logging level name (got '{v}')"
            )
        return level


class RuntimeSettings(BaseSettings):
    """Runtime handle settings. Env vars prefixed with RUNTIME_.

    culture: when set, contexts created through Runtime.create_context start
    with this culture instead of the ambient one.
    """

    model_config = SettingsConfigDict(env_prefix="RUNTIME_")

    name: str = "default"
    culture: str | None = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("RUNTIME_NAME must not be blank")
        return v.strip()

    @field_validator("culture")
    @classmethod
    def _normalize_culture(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return Culture.parse(v).name
