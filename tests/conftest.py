"""
tests.conftest

Shared fixtures and helpers.
"""

from __future__ import annotations

from datetime import timedelta

import httpx
import pytest

from bearer_bank.auth.jwt import JwtConfig
from bearer_bank.settings import Settings

TEST_SECRET = "test-signing-secret-0123456789abcdef"
OTHER_SECRET = "another-signing-secret-fedcba9876543210"


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", jwt_secret=TEST_SECRET, log_level="WARNING")


@pytest.fixture
def jwt_cfg() -> JwtConfig:
    return JwtConfig(
        alg="HS256",
        issuer="bearer-bank",
        audience="bearer-bank-api",
        secret=TEST_SECRET,
        ttl=timedelta(hours=24),
    )


def client_for(app, *, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
