"""
bearer_bank.auth.jwt

JWT issuing and validation helpers.

Responsibilities:
- Issue time-limited JWTs carrying the principal identity.
- Decode and validate JWTs with strict claim requirements (iss/aud/exp/iat/identity).
- Report expiry separately from other failures, with the original expiry instant.

Note:
- Expiry is checked here rather than by PyJWT so that the boundary is exact
  (a token expiring at `t` is rejected at `t`) and the clock can be injected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from bearer_bank.auth.models import IssuedToken
from bearer_bank.errors import CoreError, ErrorKind

IDENTITY_CLAIM = "identity"


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str
    ttl: timedelta = timedelta(hours=24)


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def issue_token(*, cfg: JwtConfig, identity: str, now: datetime | None = None) -> IssuedToken:
    issued_at = int((now or utcnow()).timestamp())
    expires_at = issued_at + int(cfg.ttl.total_seconds())
    # Keep payload minimal and stable; downstream code only reads the identity claim.
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        IDENTITY_CLAIM: identity,
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(payload, cfg.secret, algorithm=cfg.alg)
    return IssuedToken(token=token, expires_at=datetime.fromtimestamp(expires_at, tz=UTC))


def decode_and_validate(
    *, cfg: JwtConfig, token: str, now: datetime | None = None
) -> dict[str, Any] | CoreError:
    try:
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "verify_exp": False,
                "require": ["exp", "iat", "iss", "aud", IDENTITY_CLAIM],
            },
        )
    except InvalidTokenError:
        return _invalid_token()

    identity = payload.get(IDENTITY_CLAIM)
    exp = payload.get("exp")
    if not isinstance(identity, str) or not identity:
        return _invalid_token()
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        return _invalid_token()

    # Signature is good at this point; only the clock can still reject it.
    if (now or utcnow()).timestamp() >= exp:
        expired_at = datetime.fromtimestamp(exp, tz=UTC)
        return CoreError(
            ErrorKind.token_expired,
            "Your session has expired. Please login again.",
            {"expiredAt": expired_at.isoformat()},
        )
    return payload


def _invalid_token() -> CoreError:
    return CoreError(ErrorKind.invalid_token, "The provided token is invalid or malformed")


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by `auth/issuer.py`; decoding by `auth/gate.py`.
