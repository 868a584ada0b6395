"""Application configuration using pydantic-settings."""

from __future__ import annotations

from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings, overridable through SOLDIER_SAVINGS_* env vars."""

    model_config = {"env_prefix": "SOLDIER_SAVINGS_"}

    log_level: str = "INFO"
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    database_path: str = "soldier_savings.db"
    share_base_url: str = "http://localhost:5173/"
    default_unit: Literal["won", "manwon"] = "won"
