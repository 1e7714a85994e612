"""
Centralised settings loader.

Values come from the environment (or a local ``.env`` file) through
pydantic-settings.  Only the outer layers (loader, API) read these; the
``core`` package receives everything as explicit arguments.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ───────────────────────────────────────────────
    env_name: str = Field("local", description="ENV_NAME")
    database_url: str | None = Field(None, description="DATABASE_URL")

    # ─── catalog loader ─────────────────────────────────────────────
    # serve the static seed catalog when the store is down
    catalog_fallback_enabled: bool = Field(True, description="CATALOG_FALLBACK_ENABLED")

    # ─── personalisation ────────────────────────────────────────────
    rec_page_size: int = Field(8, ge=1, description="REC_PAGE_SIZE")
    default_calorie_goal: float = Field(2000, description="DEFAULT_CALORIE_GOAL")
    default_protein_goal: float = Field(150, description="DEFAULT_PROTEIN_GOAL")

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
