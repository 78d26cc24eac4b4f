"""
goinstant_auth.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the signer and logging.
- Hide the secret key from repr/logging.
- Offer a cached settings instance.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from goinstant_auth.claims import AUDIENCE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOINSTANT_AUTH_", case_sensitive=False)

    service_name: str = "goinstant-auth"
    log_level: str = "INFO"
    log_json: bool = True

    # base64 or base64url shared secret.
    secret_key: str | None = Field(default=None, repr=False)
    audience: str = AUDIENCE

    # Yield to the event loop once before the async digest.
    defer_digest: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Nothing reads the environment at import time; `Signer(...)` works without
# any settings at all.
