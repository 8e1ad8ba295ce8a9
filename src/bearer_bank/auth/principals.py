"""
bearer_bank.auth.principals

Principal lookup.

Responsibilities:
- Define the lookup interface the issuer depends on (`PrincipalDirectory`).
- Provide an in-memory implementation seeded at startup.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from bearer_bank.auth.models import Principal


class PrincipalDirectory(Protocol):
    def get(self, identity: str) -> Principal | None: ...


class InMemoryPrincipalDirectory:
    def __init__(self, principals: Iterable[Principal] = ()) -> None:
        self._by_identity: dict[str, Principal] = {p.identity: p for p in principals}

    def get(self, identity: str) -> Principal | None:
        return self._by_identity.get(identity)


# --- Module Notes -----------------------------------------------------------
# Records are read-only after startup, so lookups need no locking.
