"""
bearer_bank.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Run the token gate on the raw `Authorization` header.
- Hand the verified identity to protected endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Header

from bearer_bank.api.deps import get_gate
from bearer_bank.api.errors import ApiError
from bearer_bank.auth.gate import TokenGate
from bearer_bank.errors import CoreError
from bearer_bank.observability.logging import get_logger

log = get_logger(__name__)


def get_identity(
    authorization: str | None = Header(default=None),
    gate: TokenGate = Depends(get_gate),
) -> str:
    # The raw header is passed through untouched; HTTPBearer would accept
    # any casing of the scheme.
    result = gate.authenticate(authorization)
    if isinstance(result, CoreError):
        log.info("token_rejected", kind=result.kind.value)
        raise ApiError(result)
    return result


# --- Module Notes -----------------------------------------------------------
# Protected routers declare `identity: str = Depends(get_identity)`.
