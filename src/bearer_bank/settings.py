"""
bearer_bank.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (JWT secret, demo principal secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Enterprise pattern:
    - Strict env-driven configuration
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="BANK_", case_sensitive=False)

    # Environment controls toggle behavior like exposing error details in 500s.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "bearer-bank"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "bearer-bank"
    jwt_audience: str = "bearer-bank-api"
    jwt_secret: str = Field(default="dev-secret-change-me-before-deploying", repr=False)
    token_ttl: timedelta = timedelta(hours=24)

    # Demo principal + account seeded at startup
    demo_identity: str = "john_doe"
    demo_secret: str = Field(default="password123", repr=False)
    demo_balance: Decimal = Decimal("5000")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The signing secret is a trust boundary: anyone holding it can mint tokens
# that the gate will accept.
