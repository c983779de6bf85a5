"""Library configuration via environment variables with CURRENCY_FORMAT_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level defaults.

    Formatting rules themselves are per-input (``FormatConfig`` and friends);
    these settings only cover locale fallbacks, logging and caret behaviour.
    """

    model_config = SettingsConfigDict(env_prefix="CURRENCY_FORMAT_")

    # ── Locales ──────────────────────────────────────────────────────────
    default_locale: str = "en-US"
    fallback_locale: str = "en-US"

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # ── Caret ────────────────────────────────────────────────────────────
    # Re-apply the caret on the next scheduler tick for hosts that reset it.
    reapply_caret: bool = True
