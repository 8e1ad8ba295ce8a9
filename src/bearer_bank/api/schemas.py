"""
bearer_bank.api.schemas

Request/response models shared across routers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, Field


def to_number(value: Decimal) -> int | float:
    # Balances go out as JSON numbers; integral amounts stay integers (5000, not 5000.0).
    if value == value.to_integral_value():
        return int(value)
    return float(value)


class LoginRequest(BaseModel):
    # Loose types: presence/emptiness is judged by the issuer, not by schema validation.
    identity: Any = Field(default=None, validation_alias=AliasChoices("identity", "username"))
    secret: Any = Field(default=None, validation_alias=AliasChoices("secret", "password"))


class LoginResponse(BaseModel):
    token: str
    tokenType: str = "Bearer"
    expiresAt: str
    message: str = "Login successful"


class AmountRequest(BaseModel):
    amount: Any = None


class BalanceResponse(BaseModel):
    identity: str
    balance: int | float


class TransactionResponse(BalanceResponse):
    message: str
