#!/usr/bin/env python3
"""
Tracker Domain Models

State owned by the reconciliation engine. Quantity and price are kept as
the exact text they were read as, so a value written to the state file reads
back byte-for-byte and comparisons are purely textual.
"""

from dataclasses import dataclass, field
from typing import Any

from ..ynab.models import TransactionMutation


@dataclass(frozen=True)
class TrackedState:
    """Last-known pricing state of one tracked transaction."""

    symbol: str
    quantity: str
    price: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackedState":
        """
        Create TrackedState from its persisted form.

        Raises:
            ValueError: If a field is missing or not text
        """
        values = {}
        for key in ("symbol", "quantity", "price"):
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"Tracked state field {key!r} must be a string, got {value!r}")
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Convert to the persisted form."""
        return {"symbol": self.symbol, "quantity": self.quantity, "price": self.price}


@dataclass
class BudgetState:
    """Persisted reconciliation state of one budget."""

    server_knowledge: int | None = None
    transactions: dict[str, TrackedState] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetState":
        """Create BudgetState from its persisted form."""
        knowledge = data.get("server_knowledge")
        if knowledge is not None and not isinstance(knowledge, int):
            raise ValueError(f"server_knowledge must be an integer, got {knowledge!r}")

        transactions = data.get("transactions") or {}
        if not isinstance(transactions, dict):
            raise ValueError("transactions must be a mapping of transaction id to state")

        return cls(
            server_knowledge=knowledge,
            transactions={txn_id: TrackedState.from_dict(state) for txn_id, state in transactions.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted form."""
        return {
            "server_knowledge": self.server_knowledge,
            "transactions": {txn_id: state.to_dict() for txn_id, state in self.transactions.items()},
        }


@dataclass
class ReconcileResult:
    """Outcome of one reconciliation pass over a budget."""

    next_store: dict[str, TrackedState]
    mutations: list[TransactionMutation]
    changed: bool
