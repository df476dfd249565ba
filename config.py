"""
Centralised settings loader.

Values come from the process environment first, then from `.env`.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local")
    log_level: str = Field("INFO")
    cors_origins: list[str] = Field(["*"])
    host: str = Field("127.0.0.1")
    port: int = Field(8000)

    # ─── catalog checks ──────────────────────────────────────────────
    # max |stored kcal - macro-derived kcal| before a menu is flagged
    calorie_tolerance: float = Field(0.5, ge=0)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
