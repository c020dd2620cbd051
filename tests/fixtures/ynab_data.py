#!/usr/bin/env python3
"""
Synthetic YNAB Test Data

Builders for YNAB transaction payloads and an in-memory quote source.
All ids, amounts, and prices are synthetic.
"""

from typing import Any

from ynab_tracker.core.errors import QuoteUnavailableError
from ynab_tracker.ynab.models import YnabTransaction

SYNTHETIC_ACCOUNT_ID = "acct-0001"


def make_transaction_dict(
    transaction_id: str = "txn-0001",
    memo: str | None = "$AAPL 2.5$",
    amount: int = 1000,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a YNAB API transaction payload."""
    data: dict[str, Any] = {
        "id": transaction_id,
        "date": "2024-08-15",
        "amount": amount,
        "memo": memo,
        "cleared": "cleared",
        "approved": True,
        "flag_color": None,
        "account_id": SYNTHETIC_ACCOUNT_ID,
        "account_name": "Synthetic Brokerage",
        "payee_id": "payee-0001",
        "payee_name": "Test Broker",
        "category_id": None,
        "category_name": None,
        "transfer_account_id": None,
        "transfer_transaction_id": None,
        "matched_transaction_id": None,
        "import_id": None,
        "deleted": False,
        "subtransactions": [],
    }
    data.update(overrides)
    return data


def make_transaction(
    transaction_id: str = "txn-0001",
    memo: str | None = "$AAPL 2.5$",
    amount: int = 1000,
    **overrides: Any,
) -> YnabTransaction:
    """Build a YnabTransaction snapshot."""
    return YnabTransaction.from_dict(make_transaction_dict(transaction_id, memo, amount, **overrides))


def make_subtransaction_dict(transaction_id: str, amount: int) -> dict[str, Any]:
    """Build a YNAB API subtransaction payload."""
    return {
        "id": f"{transaction_id}-sub",
        "transaction_id": transaction_id,
        "amount": amount,
        "memo": None,
        "payee_id": None,
        "category_id": None,
        "deleted": False,
    }


class StaticQuoteSource:
    """Quote source answering from a fixed price table and counting calls."""

    def __init__(self, prices: dict[str, str]):
        self.prices = dict(prices)
        self.calls: list[str] = []

    def get_price(self, symbol: str) -> str:
        self.calls.append(symbol)
        if symbol not in self.prices:
            raise QuoteUnavailableError(symbol, "symbol not found")
        return self.prices[symbol]
