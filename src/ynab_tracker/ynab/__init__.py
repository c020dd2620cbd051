"""
YNAB Integration Package

Models and API client for the parts of YNAB the tracker talks to: budgets,
transaction deltas by server knowledge, and bulk transaction updates.
"""

from .client import YnabClient
from .models import (
    TransactionDelta,
    TransactionMutation,
    YnabBudget,
    YnabSubtransaction,
    YnabTransaction,
)

__all__ = [
    "TransactionDelta",
    "TransactionMutation",
    "YnabBudget",
    "YnabClient",
    "YnabSubtransaction",
    "YnabTransaction",
]
