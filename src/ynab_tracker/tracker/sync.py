#!/usr/bin/env python3
"""
Tracker Sync

Runs the reconciliation engine against YNAB one budget at a time:
fetch changes since the saved cursor, reconcile, push amount updates, then
persist the new state and cursor.

State for a budget is saved only after YNAB has accepted its updates, so
the saved cursor never runs ahead of what was actually pushed. Any error
aborts the whole run; budgets finished before the error keep their saved
state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..ynab.client import YnabClient
from ..ynab.models import TransactionMutation
from .datastore import TrackerStateStore
from .engine import ReconciliationEngine
from .models import BudgetState
from .prices import PriceResolver

logger = logging.getLogger(__name__)


@dataclass
class BudgetSyncResult:
    """What happened to one budget during a sync run."""

    budget_id: str
    fetched: int
    tracked: int
    mutations: list[TransactionMutation] = field(default_factory=list)
    changed: bool = False
    previous_knowledge: int | None = None
    server_knowledge: int | None = None
    saved: bool = False

    @property
    def skipped(self) -> bool:
        """True when the cursor had not moved and nothing was examined."""
        return self.previous_knowledge is not None and self.previous_knowledge == self.server_knowledge


class TrackerSync:
    """Per-run orchestrator tying YNAB, the engine, and the state store together."""

    def __init__(
        self,
        client: YnabClient,
        store: TrackerStateStore,
        resolver: PriceResolver,
        dry_run: bool = False,
        full_refresh: bool = False,
    ):
        """
        Initialize a sync run.

        Args:
            client: YNAB API client
            store: Durable tracker state
            resolver: Price resolver shared by every budget of this run
            dry_run: Compute updates without sending or saving anything
            full_refresh: Ignore saved cursors and re-price every transaction
        """
        self.client = client
        self.store = store
        self.resolver = resolver
        self.engine = ReconciliationEngine(resolver)
        self.dry_run = dry_run
        self.full_refresh = full_refresh

    def budget_ids(self) -> list[str]:
        """Ids of every budget the token can see."""
        return [budget.id for budget in self.client.get_budgets()]

    def sync_budget(self, budget_id: str) -> BudgetSyncResult:
        """
        Reconcile a single budget.

        Raises:
            QuoteUnavailableError: If a price lookup fails
            LedgerRejectedError: If YNAB rejects the fetch or the update
        """
        state = self.store.load_budget(budget_id)
        previous_knowledge = None if self.full_refresh else state.server_knowledge

        delta = self.client.get_transactions(budget_id, previous_knowledge)
        result = self.engine.reconcile(
            delta.transactions,
            previous_cursor=previous_knowledge,
            new_cursor=delta.server_knowledge,
            previous_store=state.transactions,
        )

        server_knowledge = delta.server_knowledge
        if result.mutations and not self.dry_run:
            server_knowledge = self.client.patch_transactions(budget_id, result.mutations)

        sync_result = BudgetSyncResult(
            budget_id=budget_id,
            fetched=len(delta.transactions),
            tracked=len(result.next_store),
            mutations=result.mutations,
            changed=result.changed,
            previous_knowledge=previous_knowledge,
            server_knowledge=server_knowledge,
        )

        if not self.dry_run:
            self.store.save_budget(
                budget_id,
                BudgetState(server_knowledge=server_knowledge, transactions=result.next_store),
            )
            sync_result.saved = True

        logger.info(
            f"Budget {budget_id}: {sync_result.fetched} fetched, {sync_result.tracked} tracked, "
            f"{len(result.mutations)} updated{' (dry run)' if self.dry_run else ''}"
        )
        return sync_result

    def run(
        self,
        budget_ids: list[str] | None = None,
        on_budget: Callable[[str], None] | None = None,
    ) -> list[BudgetSyncResult]:
        """
        Reconcile several budgets in order.

        Args:
            budget_ids: Budgets to process; all visible budgets if None
            on_budget: Called with each budget id before it is processed

        Returns:
            One result per budget, in processing order
        """
        if budget_ids is None:
            budget_ids = self.budget_ids()

        results = []
        for budget_id in budget_ids:
            if on_budget is not None:
                on_budget(budget_id)
            results.append(self.sync_budget(budget_id))
        logger.info(f"Synced {len(results)} budgets with {self.resolver.lookups} price lookups")
        return results
