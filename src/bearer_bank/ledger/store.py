"""
bearer_bank.ledger.store

Account store keyed by identity.

Responsibilities:
- Define the storage interface the ledger depends on (`AccountStore`).
- Provide the in-memory implementation used by the service.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from bearer_bank.ledger.models import Account


class AccountStore(Protocol):
    def add(self, *, owner: str, balance: Decimal) -> Account: ...

    def get(self, owner: str) -> Account | None: ...


class InMemoryAccountStore:
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def add(self, *, owner: str, balance: Decimal) -> Account:
        # Accounts are opened at startup only; bad seed data is a configuration bug.
        if owner in self._accounts:
            raise ValueError(f"account already exists: {owner}")
        if balance < 0:
            raise ValueError("opening balance must be non-negative")
        account = Account(owner=owner, balance=balance)
        self._accounts[owner] = account
        return account

    def get(self, owner: str) -> Account | None:
        return self._accounts.get(owner)


# --- Module Notes -----------------------------------------------------------
# A persistent store would implement the same two methods; the ledger does not
# care where accounts live as long as each `Account` carries its own lock.
