"""Library configuration via environment variables with FIELDRULES_ prefix."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Field rule defaults.

    All settings are read from environment variables prefixed with
    ``FIELDRULES_``. They only supply defaults: a host model configured with
    ``strict=True`` or a validation context carrying ``convert`` takes
    precedence over ``convert`` here.
    """

    model_config = SettingsConfigDict(env_prefix="FIELDRULES_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    # Debug event per rejected value (structlog prints all levels until setup_logging runs)
    log_rejections: bool = False

    # ── Validation ─────────────────────────────────────────────────────────
    # Trim leading/trailing whitespace before scanning number strings
    convert: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read from the environment once."""
    return Settings()
