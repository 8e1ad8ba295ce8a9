"""
bearer_bank.ledger

Ledger package.

Responsibilities:
- Account model and identity-keyed account store.
- Balance read/credit/debit operations with monetary invariants.
"""

# Package marker.
