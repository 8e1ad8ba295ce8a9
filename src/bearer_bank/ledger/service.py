"""
bearer_bank.ledger.service

Balance operations for identity-keyed accounts.

Responsibilities:
- Validate transaction amounts (present, finite, strictly positive, bounded).
- Round amounts to cents so balance arithmetic stays exact.
- Apply credit/debit as a single locked read-modify-write per account.
- Refuse debits that would take the balance below zero.

Every operation returns either the resulting balance or a `CoreError`.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from bearer_bank.errors import CoreError, ErrorKind, missing_fields, not_found
from bearer_bank.ledger.models import Account
from bearer_bank.ledger.store import AccountStore, InMemoryAccountStore
from bearer_bank.observability.logging import get_logger

log = get_logger(__name__)

CENT = Decimal("0.01")
# Both limits keep every balance well inside the 28-digit default context at cent precision.
MAX_AMOUNT = Decimal("1000000000000")
MAX_BALANCE = Decimal("1000000000000000")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _invalid_amount(message: str = "Amount must be a valid number") -> CoreError:
    return CoreError(ErrorKind.invalid_amount, message)


def parse_amount(raw: Any) -> Decimal | CoreError:
    if raw is None:
        return missing_fields("Amount is required")

    amount: Decimal | None = None
    # bool is an int subclass; `true` is not an amount.
    if isinstance(raw, bool):
        amount = None
    elif isinstance(raw, int | Decimal):
        amount = Decimal(raw)
    elif isinstance(raw, float):
        # str() keeps 0.1 as Decimal("0.1") rather than its binary expansion.
        amount = Decimal(str(raw)) if math.isfinite(raw) else None
    elif isinstance(raw, str):
        try:
            amount = Decimal(raw.strip())
        except InvalidOperation:
            amount = None

    if amount is None or not amount.is_finite():
        return _invalid_amount()
    if amount <= 0:
        return CoreError(ErrorKind.non_positive_amount, "Amount must be greater than 0")
    if amount > MAX_AMOUNT:
        return _invalid_amount(f"Amount must not exceed {MAX_AMOUNT}")

    # Sub-cent amounts such as 1e-400 round to zero and are refused like zero.
    amount = to_cents(amount)
    if amount <= 0:
        return CoreError(ErrorKind.non_positive_amount, "Amount must be at least 0.01")
    return amount


class Ledger:
    def __init__(self, store: AccountStore | None = None) -> None:
        self._store = store if store is not None else InMemoryAccountStore()

    def open_account(self, owner: str, balance: Decimal = Decimal("0")) -> Account:
        if not balance.is_finite() or balance > MAX_BALANCE:
            raise ValueError(f"opening balance must be finite and at most {MAX_BALANCE}")
        return self._store.add(owner=owner, balance=to_cents(balance))

    def read(self, identity: str) -> Decimal | CoreError:
        account = self._store.get(identity)
        if account is None:
            return not_found()
        # Decimal is immutable; an unlocked read sees some committed balance.
        return account.balance

    def credit(self, identity: str, amount: Any) -> Decimal | CoreError:
        value = parse_amount(amount)
        if isinstance(value, CoreError):
            return value
        account = self._store.get(identity)
        if account is None:
            return not_found()

        with account.lock:
            if account.balance + value > MAX_BALANCE:
                log.info("deposit_rejected", identity=identity, amount=str(value))
                return _invalid_amount(f"Balance must not exceed {MAX_BALANCE}")
            account.balance = account.balance + value
            balance = account.balance
        log.info("deposit_applied", identity=identity, amount=str(value), balance=str(balance))
        return balance

    def debit(self, identity: str, amount: Any) -> Decimal | CoreError:
        value = parse_amount(amount)
        if isinstance(value, CoreError):
            return value
        account = self._store.get(identity)
        if account is None:
            return not_found()

        with account.lock:
            current = account.balance
            # Check and write under one lock hold so concurrent debits cannot overdraw.
            if current < value:
                log.info(
                    "withdrawal_rejected",
                    identity=identity,
                    amount=str(value),
                    balance=str(current),
                )
                return CoreError(
                    ErrorKind.insufficient_funds,
                    "Insufficient balance",
                    {"currentBalance": current},
                )
            account.balance = current - value
            balance = account.balance
        log.info("withdrawal_applied", identity=identity, amount=str(value), balance=str(balance))
        return balance


# --- Module Notes -----------------------------------------------------------
# Deposits and withdrawals are not idempotent: replaying a request applies it
# again. An idempotency key would belong here if that ever matters.
