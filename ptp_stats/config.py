"""Reporter configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    monitoring_host: str = Field(default="0.0.0.0", alias="MONITORING_HOST")
    monitoring_port: int = Field(default=8888, ge=1, le=65535, alias="MONITORING_PORT")
    metric_interval_seconds: float = Field(default=60.0, gt=0, alias="METRIC_INTERVAL_SECONDS")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]
