"""
tests.test_ledger

Unit tests for the ledger service.

Responsibilities:
- Cover amount validation, funds checks and not-found handling.
- Check that balances stay exact and never go negative, including under threads.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from bearer_bank.errors import CoreError, ErrorKind
from bearer_bank.ledger.service import MAX_AMOUNT, MAX_BALANCE, Ledger, parse_amount
from bearer_bank.ledger.store import InMemoryAccountStore


@pytest.fixture
def ledger() -> Ledger:
    ledger = Ledger()
    ledger.open_account("john_doe", Decimal("5000"))
    return ledger


def test_read_returns_opening_balance(ledger) -> None:
    assert ledger.read("john_doe") == Decimal("5000")


def test_deposit_then_withdraw(ledger) -> None:
    assert ledger.credit("john_doe", 1000) == Decimal("6000")
    assert ledger.debit("john_doe", 500) == Decimal("5500")
    assert ledger.read("john_doe") == Decimal("5500")


@pytest.mark.parametrize("amount", [1, "0.01", 12.5, "999999.99", Decimal("5000")])
def test_credit_then_debit_round_trips(ledger, amount) -> None:
    before = ledger.read("john_doe")
    ledger.credit("john_doe", amount)
    assert ledger.debit("john_doe", amount) == before


@pytest.mark.parametrize(
    ("amount", "kind"),
    [
        (None, ErrorKind.missing_fields),
        ("abc", ErrorKind.invalid_amount),
        ("", ErrorKind.invalid_amount),
        ("12abc", ErrorKind.invalid_amount),
        ("NaN", ErrorKind.invalid_amount),
        ("Infinity", ErrorKind.invalid_amount),
        (float("nan"), ErrorKind.invalid_amount),
        (float("inf"), ErrorKind.invalid_amount),
        (True, ErrorKind.invalid_amount),
        ([100], ErrorKind.invalid_amount),
        ({"value": 1}, ErrorKind.invalid_amount),
        (0, ErrorKind.non_positive_amount),
        ("0", ErrorKind.non_positive_amount),
        (-1, ErrorKind.non_positive_amount),
        ("-0.01", ErrorKind.non_positive_amount),
    ],
)
def test_bad_amounts_fail_and_leave_balance_unchanged(ledger, amount, kind) -> None:
    for op in (ledger.credit, ledger.debit):
        result = op("john_doe", amount)
        assert isinstance(result, CoreError)
        assert result.kind is kind
    assert ledger.read("john_doe") == Decimal("5000")


def test_numeric_strings_are_accepted() -> None:
    assert parse_amount(" 100 ") == Decimal("100")
    assert parse_amount(0.1) == Decimal("0.1")


def test_overdraft_is_refused_with_current_balance(ledger) -> None:
    ledger.debit("john_doe", 4500)

    result = ledger.debit("john_doe", 50000)

    assert isinstance(result, CoreError)
    assert result.kind is ErrorKind.insufficient_funds
    assert result.context["currentBalance"] == Decimal("500")
    assert ledger.read("john_doe") == Decimal("500")


def test_debit_to_exactly_zero_is_allowed(ledger) -> None:
    assert ledger.debit("john_doe", "5000") == Decimal("0")
    result = ledger.debit("john_doe", "0.01")
    assert isinstance(result, CoreError)
    assert result.kind is ErrorKind.insufficient_funds


def test_sequence_of_debits_never_goes_negative(ledger) -> None:
    for amount in (3000, 1500, 700, 400, 250, 100, 50):
        ledger.debit("john_doe", amount)
        assert ledger.read("john_doe") >= 0
    assert ledger.read("john_doe") == Decimal("0")


def test_unknown_account_is_not_found(ledger) -> None:
    for result in (
        ledger.read("nobody"),
        ledger.credit("nobody", 10),
        ledger.debit("nobody", 10),
    ):
        assert isinstance(result, CoreError)
        assert result.kind is ErrorKind.not_found


def test_store_rejects_bad_seed_data() -> None:
    store = InMemoryAccountStore()
    store.add(owner="john_doe", balance=Decimal("1"))
    with pytest.raises(ValueError):
        store.add(owner="john_doe", balance=Decimal("1"))
    with pytest.raises(ValueError):
        store.add(owner="jane_doe", balance=Decimal("-1"))


def test_concurrent_debits_cannot_overdraw() -> None:
    ledger = Ledger()
    ledger.open_account("john_doe", Decimal("100"))
    workers = 32
    barrier = threading.Barrier(workers)

    def withdraw(_: int):
        barrier.wait()
        return ledger.debit("john_doe", 10)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(withdraw, range(workers)))

    succeeded = [r for r in results if not isinstance(r, CoreError)]
    refused = [r for r in results if isinstance(r, CoreError)]
    assert len(succeeded) == 10
    assert all(r.kind is ErrorKind.insufficient_funds for r in refused)
    assert ledger.read("john_doe") == Decimal("0")


def test_concurrent_credits_and_debits_are_not_lost() -> None:
    ledger = Ledger()
    ledger.open_account("john_doe", Decimal("1000"))

    def churn(i: int) -> None:
        if i % 2:
            ledger.credit("john_doe", 3)
        else:
            ledger.debit("john_doe", 3)

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(churn, range(400)))

    assert ledger.read("john_doe") == Decimal("1000")


@pytest.mark.parametrize("amount", ["1e40", "1e5000", 1e300, "1000000000000.01"])
def test_out_of_range_amounts_are_invalid(ledger, amount) -> None:
    for op in (ledger.credit, ledger.debit):
        result = op("john_doe", amount)
        assert isinstance(result, CoreError)
        assert result.kind is ErrorKind.invalid_amount
    assert ledger.read("john_doe") == Decimal("5000")


@pytest.mark.parametrize("amount", ["1e-400", "0.004", 0.001])
def test_sub_cent_amounts_round_to_zero_and_are_refused(ledger, amount) -> None:
    for op in (ledger.credit, ledger.debit):
        result = op("john_doe", amount)
        assert isinstance(result, CoreError)
        assert result.kind is ErrorKind.non_positive_amount
    assert ledger.read("john_doe") == Decimal("5000")


def test_amounts_are_rounded_to_cents() -> None:
    assert parse_amount("0.005") == Decimal("0.01")
    assert parse_amount("12.344") == Decimal("12.34")
    assert parse_amount(MAX_AMOUNT) == MAX_AMOUNT


def test_round_trip_is_exact_at_the_largest_amount(ledger) -> None:
    ledger.credit("john_doe", MAX_AMOUNT)
    assert ledger.debit("john_doe", MAX_AMOUNT) == Decimal("5000")
    ledger.credit("john_doe", "0.01")
    assert ledger.read("john_doe") == Decimal("5000.01")


def test_deposit_cannot_push_balance_past_the_cap() -> None:
    ledger = Ledger()
    ledger.open_account("john_doe", MAX_BALANCE - Decimal("1"))

    result = ledger.credit("john_doe", 2)

    assert isinstance(result, CoreError)
    assert result.kind is ErrorKind.invalid_amount
    assert ledger.read("john_doe") == MAX_BALANCE - Decimal("1")
    assert ledger.credit("john_doe", 1) == MAX_BALANCE


# --- Module Notes -----------------------------------------------------------
# The threaded tests rely on the per-account lock in `ledger/models.py`.
