from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from infra.paths import ENV_FILE, LOG_DIR

ENV_PREFIX = "WUMPUS_"


class Settings(BaseModel):
    """Runtime configuration, read from WUMPUS_* environment variables."""

    host: str = "127.0.0.1"
    port: int = 3001
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = LOG_DIR / "backend.log"
    session_ttl_seconds: float = Field(default=24 * 60 * 60, gt=0)
    sweep_interval_seconds: float = Field(default=60 * 60, gt=0)
    debug_routes: bool = True
    default_grid_size: int = Field(default=4, ge=4, le=10)

    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_disables_file(cls, value):
        if value == "":
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, env_file: str | Path | None = ENV_FILE) -> "Settings":
        """
        Build settings from the process environment.

        A .env file is loaded first (without overriding variables that are
        already set); unset fields keep their defaults.
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        return cls(**values)


# Usage: from infra.settings import Settings; settings = Settings.from_env(); settings.port
