from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = REPO_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE), env_file_encoding="utf-8", extra="ignore"
    )

    # human-readable console logs instead of JSON
    DEBUG: bool = False
    LOG_JSON: bool = False
    ENVIRONMENT: str = "development"

    # Payments
    PAYMENTS_MODE: Literal["mock", "live"] = "mock"
    # Sent to Stripe as the API key ("login"); never exposed to browsers.
    STRIPE_SECRET_KEY: str = ""
    # Client-side key for card forms; unused by server-side operations.
    STRIPE_PUBLISHABLE_KEY: str = ""
    STRIPE_API_TIMEOUT_SECONDS: float = 10.0

    @property
    def secret_key(self) -> str:
        return self.STRIPE_SECRET_KEY.strip()

    @property
    def publishable_key(self) -> str:
        return self.STRIPE_PUBLISHABLE_KEY.strip()

    @property
    def live_mode(self) -> bool:
        return self.PAYMENTS_MODE == "live"


settings = Settings()
