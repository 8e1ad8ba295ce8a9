"""
bearer_bank.auth.models

Auth domain models.

Responsibilities:
- Define the known-principal record (`Principal`).
- Define the result of a successful login (`IssuedToken`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Principal:
    """
    An identity capable of authenticating.
    """

    identity: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    expires_at: datetime


# --- Module Notes -----------------------------------------------------------
# Principal secrets are compared in plain form; hashing is out of scope for the demo.
