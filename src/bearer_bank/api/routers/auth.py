"""
bearer_bank.api.routers.auth

Login endpoint.

Responsibilities:
- Exchange an identity+secret pair for a bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bearer_bank.api.deps import get_issuer
from bearer_bank.api.errors import ApiError
from bearer_bank.api.schemas import LoginRequest, LoginResponse
from bearer_bank.auth.issuer import CredentialIssuer
from bearer_bank.errors import CoreError

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    issuer: CredentialIssuer = Depends(get_issuer),
) -> LoginResponse:
    result = issuer.issue(body.identity, body.secret)
    if isinstance(result, CoreError):
        raise ApiError(result)
    return LoginResponse(token=result.token, expiresAt=result.expires_at.isoformat())


# --- Module Notes -----------------------------------------------------------
# Failed logins share one response so callers cannot probe which identities exist.
