"""
bearer_bank.errors

Error taxonomy shared by the issuer, gate and ledger.

Responsibilities:
- Enumerate every error kind a core operation can return.
- Group kinds into categories (validation/authentication/state/internal).
- Carry safe caller-facing context (current balance, expiry instant).

Core operations return `CoreError` values instead of raising; only the HTTP
boundary (`bearer_bank.api.errors`) turns them into responses.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class ErrorCategory(str, enum.Enum):
    validation = "validation"
    authentication = "authentication"
    state = "state"
    internal = "internal"


class ErrorKind(str, enum.Enum):
    missing_fields = "MissingFields"
    invalid_amount = "InvalidAmount"
    non_positive_amount = "NonPositiveAmount"
    insufficient_funds = "InsufficientFunds"
    invalid_credentials = "InvalidCredentials"
    no_token = "NoToken"
    malformed_header = "MalformedHeader"
    invalid_token = "InvalidToken"
    token_expired = "TokenExpired"
    not_found = "NotFound"
    internal = "Internal"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.missing_fields: ErrorCategory.validation,
    ErrorKind.invalid_amount: ErrorCategory.validation,
    ErrorKind.non_positive_amount: ErrorCategory.validation,
    ErrorKind.insufficient_funds: ErrorCategory.state,
    ErrorKind.invalid_credentials: ErrorCategory.authentication,
    ErrorKind.no_token: ErrorCategory.authentication,
    ErrorKind.malformed_header: ErrorCategory.authentication,
    ErrorKind.invalid_token: ErrorCategory.authentication,
    ErrorKind.token_expired: ErrorCategory.authentication,
    ErrorKind.not_found: ErrorCategory.state,
    ErrorKind.internal: ErrorCategory.internal,
}


@dataclass(frozen=True, slots=True)
class CoreError:
    """
    A tagged failure returned by a core operation.

    `context` holds only values that are safe to show the caller.
    """

    kind: ErrorKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category


def missing_fields(message: str = "Required fields are missing") -> CoreError:
    return CoreError(ErrorKind.missing_fields, message)


def invalid_credentials() -> CoreError:
    # Same message for unknown identity and wrong secret.
    return CoreError(ErrorKind.invalid_credentials, "Invalid credentials")


def not_found(message: str = "Account not found") -> CoreError:
    return CoreError(ErrorKind.not_found, message)


# --- Module Notes -----------------------------------------------------------
# Adding a kind means adding its category above and its status code in
# `bearer_bank.api.errors`.
