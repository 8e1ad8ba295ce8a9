"""
bearer_bank.api.routers.accounts

Protected account endpoints.

Responsibilities:
- Read the caller's balance.
- Apply deposits and withdrawals through the ledger.

The caller's identity always comes from the verified token, never from the body.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends

from bearer_bank.api.deps import get_ledger
from bearer_bank.api.errors import ApiError
from bearer_bank.api.schemas import AmountRequest, BalanceResponse, TransactionResponse, to_number
from bearer_bank.auth.deps import get_identity
from bearer_bank.errors import CoreError
from bearer_bank.ledger.service import Ledger, parse_amount

router = APIRouter(tags=["accounts"])


def _unwrap(result: Decimal | CoreError) -> Decimal:
    if isinstance(result, CoreError):
        raise ApiError(result)
    return result


@router.get("/balance", response_model=BalanceResponse)
async def get_balance(
    identity: str = Depends(get_identity),
    ledger: Ledger = Depends(get_ledger),
) -> BalanceResponse:
    balance = _unwrap(ledger.read(identity))
    return BalanceResponse(identity=identity, balance=to_number(balance))


@router.post("/deposit", response_model=TransactionResponse)
async def deposit(
    body: AmountRequest,
    identity: str = Depends(get_identity),
    ledger: Ledger = Depends(get_ledger),
) -> TransactionResponse:
    amount = _unwrap(parse_amount(body.amount))
    balance = _unwrap(ledger.credit(identity, amount))
    return TransactionResponse(
        identity=identity,
        balance=to_number(balance),
        message=f"Deposited ${to_number(amount)}",
    )


@router.post("/withdraw", response_model=TransactionResponse)
async def withdraw(
    body: AmountRequest,
    identity: str = Depends(get_identity),
    ledger: Ledger = Depends(get_ledger),
) -> TransactionResponse:
    amount = _unwrap(parse_amount(body.amount))
    balance = _unwrap(ledger.debit(identity, amount))
    return TransactionResponse(
        identity=identity,
        balance=to_number(balance),
        message=f"Withdrew ${to_number(amount)}",
    )


# --- Module Notes -----------------------------------------------------------
# The amount is parsed here only to echo it in the message; the ledger
# validates it again before touching the account.
