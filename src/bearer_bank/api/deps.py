"""
bearer_bank.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the core components.
- Encapsulate app.state access patterns (issuer/gate/ledger).
"""

from __future__ import annotations

from fastapi import Request

from bearer_bank.auth.gate import TokenGate
from bearer_bank.auth.issuer import CredentialIssuer
from bearer_bank.ledger.service import Ledger


# Components are created once in `bearer_bank.api.app.create_app`.
def get_issuer(request: Request) -> CredentialIssuer:
    return request.app.state.issuer  # type: ignore[attr-defined]


def get_gate(request: Request) -> TokenGate:
    return request.app.state.gate  # type: ignore[attr-defined]


def get_ledger(request: Request) -> Ledger:
    return request.app.state.ledger  # type: ignore[attr-defined]
