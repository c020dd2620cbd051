#!/usr/bin/env python3
"""
Tracker State DataStore

Durable per-budget record of tracked transactions and the last server
knowledge cursor, kept in a single JSON file:

    {
      "budgets": {
        "<budget id>": {
          "server_knowledge": 1234,
          "transactions": {
            "<transaction id>": {"symbol": "AAPL", "quantity": "2.5", "price": "189.91"}
          }
        }
      }
    }
"""

import logging
from pathlib import Path
from typing import Any

from ..core.datastore_mixin import DataStoreMixin
from ..core.json_utils import read_json, write_json
from .models import BudgetState

logger = logging.getLogger(__name__)


class TrackerStateStore(DataStoreMixin):
    """
    DataStore for tracked transaction state.

    Each save rewrites the whole file with one budget replaced, so budgets
    saved earlier in a run survive a failure in a later budget.
    """

    def __init__(self, path: Path):
        """
        Initialize tracker state store.

        Args:
            path: JSON file holding the state (data/tracker/state.json)
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if the state file exists."""
        return self.path.exists()

    def load(self) -> dict[str, BudgetState]:
        """
        Load state for every budget.

        Returns:
            Mapping of budget id to BudgetState (empty if no file yet)

        Raises:
            ValueError: If the file does not have the expected structure
        """
        if not self.exists():
            return {}

        data = read_json(self.path)
        if not isinstance(data, dict):
            raise ValueError(f"Invalid tracker state format: expected dict, got {type(data).__name__}")

        budgets = data.get("budgets") or {}
        if not isinstance(budgets, dict):
            raise ValueError("Invalid tracker state format: 'budgets' must be a mapping")

        return {budget_id: BudgetState.from_dict(state) for budget_id, state in budgets.items()}

    def load_budget(self, budget_id: str) -> BudgetState:
        """Load state for one budget, or an empty state if it was never synced."""
        return self.load().get(budget_id, BudgetState())

    def save_budget(self, budget_id: str, state: BudgetState) -> None:
        """
        Persist state for one budget, leaving other budgets untouched.

        Args:
            budget_id: Budget the state belongs to
            state: State to write
        """
        budgets = self.load()
        budgets[budget_id] = state
        self._write(budgets)
        logger.debug(
            f"Saved {len(state.transactions)} tracked transactions for budget {budget_id} "
            f"at knowledge {state.server_knowledge}"
        )

    def budget_ids(self) -> list[str]:
        """Get ids of every budget with saved state."""
        return list(self.load().keys())

    def item_count(self) -> int | None:
        """Get count of tracked transactions across all budgets."""
        if not self.exists():
            return None
        return sum(len(state.transactions) for state in self.load().values())

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No tracker state found"
        return f"Tracker state: {count} transactions across {len(self.budget_ids())} budgets"

    def _write(self, budgets: dict[str, BudgetState]) -> None:
        data: dict[str, Any] = {"budgets": {budget_id: state.to_dict() for budget_id, state in budgets.items()}}
        write_json(self.path, data)
