"""
bearer_bank.auth.gate

Token gate for protected operations.

Responsibilities:
- Parse the `Authorization: Bearer <token>` header strictly.
- Verify the token and yield the identity it asserts.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from bearer_bank.auth.jwt import IDENTITY_CLAIM, JwtConfig, decode_and_validate, utcnow
from bearer_bank.errors import CoreError, ErrorKind

BEARER_SCHEME = "Bearer"


class TokenGate:
    """
    Stateless verifier; safe to share across concurrent requests.

    The returned identity is trusted as-is; it is not re-checked against the
    principal directory, so a token stays valid until it expires.
    """

    def __init__(self, *, cfg: JwtConfig, clock: Callable[[], datetime] = utcnow) -> None:
        self._cfg = cfg
        self._clock = clock

    def authenticate(self, raw_header: str | None) -> str | CoreError:
        if not raw_header:
            return CoreError(ErrorKind.no_token, "Authorization header is missing")

        parts = raw_header.split(" ")
        if len(parts) != 2 or parts[0] != BEARER_SCHEME:
            return CoreError(
                ErrorKind.malformed_header,
                "Authorization header must be in format: Bearer <token>",
            )

        result = decode_and_validate(cfg=self._cfg, token=parts[1], now=self._clock())
        if isinstance(result, CoreError):
            return result
        return result[IDENTITY_CLAIM]
