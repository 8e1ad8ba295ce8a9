"""
bearer_bank.ledger.models

Ledger domain models.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(slots=True)
class Account:
    """
    One balance per owner. `balance >= 0` holds whenever `lock` is free.
    """

    owner: str
    balance: Decimal
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
