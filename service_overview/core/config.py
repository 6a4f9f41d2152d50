from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SWO_",
        case_sensitive=False,
    )

    # ── Overview configuration file ─────────────────────────────
    config_file: str = "config.json"

    # ── Fetching ────────────────────────────────────────────────
    request_timeout_seconds: float = 2.0
    # No dispatch-wide deadline unless set
    dispatch_deadline_seconds: Optional[float] = None

    # ── Info endpoint URL assembly ──────────────────────────────
    url_mid_fix: str = "/"
    url_post_fix: str = "/actuator/info"

    # ── Logging ─────────────────────────────────────────────────
    log_json: bool = False

    # ── API ─────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000


# Singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
