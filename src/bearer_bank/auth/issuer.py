"""
bearer_bank.auth.issuer

Credential issuer.

Responsibilities:
- Validate an identity+secret pair against the principal directory.
- Issue a signed, expiring token for the matched principal.
"""

from __future__ import annotations

import hmac
from collections.abc import Callable
from datetime import datetime
from typing import Any

from bearer_bank.auth.jwt import JwtConfig, issue_token, utcnow
from bearer_bank.auth.models import IssuedToken
from bearer_bank.auth.principals import PrincipalDirectory
from bearer_bank.errors import CoreError, invalid_credentials, missing_fields
from bearer_bank.observability.logging import get_logger

log = get_logger(__name__)


class CredentialIssuer:
    def __init__(
        self,
        *,
        directory: PrincipalDirectory,
        cfg: JwtConfig,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._directory = directory
        self._cfg = cfg
        self._clock = clock

    def issue(self, identity: Any, secret: Any) -> IssuedToken | CoreError:
        if not _present(identity) or not _present(secret):
            return missing_fields("Identity and secret are required")

        principal = self._directory.get(identity)
        # Compare even for unknown identities so both failures take the same path.
        expected = principal.secret if principal is not None else ""
        secret_ok = hmac.compare_digest(expected.encode(), secret.encode())
        if principal is None or not secret_ok:
            log.info("login_rejected", identity=identity)
            return invalid_credentials()

        issued = issue_token(cfg=self._cfg, identity=principal.identity, now=self._clock())
        log.info(
            "login_succeeded",
            identity=principal.identity,
            expires_at=issued.expires_at.isoformat(),
        )
        return issued


def _present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


# --- Module Notes -----------------------------------------------------------
# The issuer keeps no session state; a token is the only artifact of a login.
