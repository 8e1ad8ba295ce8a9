"""
tests.test_settings

Tests for env-driven settings.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from bearer_bank.settings import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.token_ttl == timedelta(hours=24)
    assert s.demo_identity == "john_doe"
    assert s.demo_balance == Decimal("5000")


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BANK_JWT_SECRET", "from-env-secret-0123456789abcdefgh")
    monkeypatch.setenv("BANK_TOKEN_TTL", "PT1H")
    monkeypatch.setenv("BANK_ENV", "prod")
    s = Settings()
    assert s.jwt_secret == "from-env-secret-0123456789abcdefgh"
    assert s.token_ttl == timedelta(hours=1)
    assert s.env == "prod"


def test_secrets_hidden_from_repr() -> None:
    s = Settings(jwt_secret="very-secret-signing-key-0123456789", demo_secret="hunter2")
    assert "very-secret-signing-key" not in repr(s)
    assert "hunter2" not in repr(s)


# --- Module Notes -----------------------------------------------------------
# `monkeypatch.setenv` keeps env overrides scoped to a single test.
