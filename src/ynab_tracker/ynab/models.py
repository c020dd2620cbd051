#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models representing YNAB API data structures.
Amounts stay in integer milliunits exactly as the API reports them, and
dates stay as the API's ISO text so they can be echoed back unchanged.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class YnabBudget:
    """
    YNAB budget summary from API.

    Only the fields the tracker needs to iterate budgets.
    """

    id: str
    name: str
    last_modified_on: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabBudget":
        """
        Create YnabBudget from API dict.

        Args:
            data: Dictionary from YNAB API (budgets endpoint)

        Returns:
            YnabBudget instance
        """
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            last_modified_on=data.get("last_modified_on"),
        )


@dataclass
class YnabSubtransaction:
    """
    YNAB subtransaction (split) from API.

    Represents a split transaction within a parent transaction.
    """

    id: str
    transaction_id: str
    amount: int
    memo: str | None = None
    payee_id: str | None = None
    category_id: str | None = None
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabSubtransaction":
        """
        Create YnabSubtransaction from API dict.

        Args:
            data: Dictionary from YNAB API (subtransaction object)

        Returns:
            YnabSubtransaction instance
        """
        return cls(
            id=data["id"],
            transaction_id=data.get("transaction_id", ""),
            amount=data["amount"],
            memo=data.get("memo"),
            payee_id=data.get("payee_id"),
            category_id=data.get("category_id"),
            deleted=data.get("deleted", False),
        )


@dataclass
class YnabTransaction:
    """
    YNAB transaction from API.

    Read-only snapshot of a transaction as returned by the delta endpoint.
    """

    id: str
    account_id: str
    date: str
    amount: int  # milliunits
    memo: str | None
    cleared: str  # "cleared", "uncleared", "reconciled"
    approved: bool
    payee_id: str | None = None
    payee_name: str | None = None
    category_id: str | None = None
    flag_color: str | None = None
    import_id: str | None = None
    deleted: bool = False
    subtransactions: list[YnabSubtransaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabTransaction":
        """
        Create YnabTransaction from API dict.

        Args:
            data: Dictionary from YNAB API (transactions endpoint)

        Returns:
            YnabTransaction instance
        """
        subtransactions = [YnabSubtransaction.from_dict(sub) for sub in data.get("subtransactions") or []]

        return cls(
            id=data["id"],
            account_id=data.get("account_id", "unknown"),
            date=data["date"],
            amount=data["amount"],
            memo=data.get("memo"),
            cleared=data.get("cleared", "uncleared"),
            approved=data.get("approved", True),
            payee_id=data.get("payee_id"),
            payee_name=data.get("payee_name"),
            category_id=data.get("category_id"),
            flag_color=data.get("flag_color"),
            import_id=data.get("import_id"),
            deleted=data.get("deleted", False),
            subtransactions=subtransactions,
        )

    @property
    def subtransaction_count(self) -> int:
        """Number of splits on this transaction."""
        return len(self.subtransactions)

    @property
    def is_split(self) -> bool:
        """Check if this transaction has subtransactions."""
        return self.subtransaction_count > 0


@dataclass(frozen=True)
class TransactionMutation:
    """
    Outbound amount update for a single transaction.

    Every field other than ``amount`` is echoed from the snapshot so the
    PATCH payload is complete even though only the amount changes.
    """

    id: str
    account_id: str
    date: str
    amount: int
    payee_id: str | None
    payee_name: str | None
    category_id: str | None
    memo: str | None
    cleared: str
    approved: bool
    flag_color: str | None
    import_id: str | None

    @classmethod
    def from_transaction(cls, transaction: YnabTransaction, amount: int) -> "TransactionMutation":
        """Build a mutation carrying ``amount`` and the snapshot's other fields."""
        return cls(
            id=transaction.id,
            account_id=transaction.account_id,
            date=transaction.date,
            amount=amount,
            payee_id=transaction.payee_id,
            payee_name=transaction.payee_name,
            category_id=transaction.category_id,
            memo=transaction.memo,
            cleared=transaction.cleared,
            approved=transaction.approved,
            flag_color=transaction.flag_color,
            import_id=transaction.import_id,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize as an item of the YNAB bulk-update request."""
        return {
            "id": self.id,
            "account_id": self.account_id,
            "date": self.date,
            "amount": self.amount,
            "payee_id": self.payee_id,
            "payee_name": self.payee_name,
            "category_id": self.category_id,
            "memo": self.memo,
            "cleared": self.cleared,
            "approved": self.approved,
            "flag_color": self.flag_color,
            "import_id": self.import_id,
        }


@dataclass
class TransactionDelta:
    """Transactions changed since a cursor, plus the cursor to use next time."""

    transactions: list[YnabTransaction]
    server_knowledge: int
