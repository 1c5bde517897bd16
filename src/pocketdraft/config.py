"""Lightweight configuration for the pocketdraft tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pocketdraft.domain.enums import Strategy


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="POCKETDRAFT_"
    )

    data_dir: Path = Field(
        default=Path("faction-data"), description="Directory holding <Faction>.yaml files"
    )
    default_strategy: Strategy = Field(
        default=Strategy.HEURISTIC, description="Strategy used when a request names none"
    )
    default_points: int = Field(default=30, ge=0, description="Budget used when none is given")
    rng_seed: str | None = Field(
        default=None,
        description="Fixed seed making every draft reproducible (development only)",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
