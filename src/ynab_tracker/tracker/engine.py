#!/usr/bin/env python3
"""
Reconciliation Engine

Decides which transactions of a budget need their amount rewritten.

Given the transactions YNAB reports as changed since the last cursor and the
tracked state from the previous run, the engine produces the next tracked
state and the minimal list of amount updates to send back:

- An unchanged cursor means nothing changed; the pass is skipped entirely.
- Deleted and split transactions are untracked.
- Memos without a well-formed ``$SYMBOL QUANTITY$`` token, or whose quantity
  sign disagrees with the amount, are skipped and keep whatever state they had.
- Everything else is priced. An update is emitted when the (symbol, quantity,
  price) triple differs from the stored one or the computed amount differs
  from YNAB's amount. The stored triple is always refreshed.

The engine never mutates its inputs and performs no I/O apart from price
lookups through the resolver.
"""

import logging
from collections.abc import Iterable

from ..core.currency import compute_milliunits, format_milliunits
from ..ynab.models import TransactionMutation, YnabTransaction
from .memo import is_sign_consistent, parse_memo
from .models import ReconcileResult, TrackedState
from .prices import PriceResolver

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """Computes tracked state transitions and outbound updates for a budget."""

    def __init__(self, resolver: PriceResolver):
        self.resolver = resolver

    def reconcile(
        self,
        transactions: Iterable[YnabTransaction],
        previous_cursor: int | None,
        new_cursor: int | None,
        previous_store: dict[str, TrackedState],
    ) -> ReconcileResult:
        """
        Run one reconciliation pass.

        Args:
            transactions: Transactions changed since ``previous_cursor``
            previous_cursor: Server knowledge the fetch was made from
            new_cursor: Server knowledge returned by the fetch
            previous_store: Tracked state from the last successful pass

        Returns:
            ReconcileResult with the next store, the updates, and whether
            anything changed

        Raises:
            QuoteUnavailableError: If any price lookup fails; nothing is
                returned for the pass
        """
        if new_cursor == previous_cursor:
            return ReconcileResult(next_store=dict(previous_store), mutations=[], changed=False)

        next_store = dict(previous_store)
        mutations: dict[str, TransactionMutation] = {}

        for transaction in transactions:
            if transaction.deleted or transaction.is_split:
                if next_store.pop(transaction.id, None) is not None:
                    logger.debug(f"Untracked transaction {transaction.id}")
                mutations.pop(transaction.id, None)
                continue

            parsed = parse_memo(transaction.memo)
            if parsed is None:
                logger.debug(f"Skipped transaction {transaction.id}: no tracking token in memo")
                continue
            if not is_sign_consistent(parsed.quantity, transaction.amount):
                logger.debug(
                    f"Skipped transaction {transaction.id}: quantity {parsed.quantity} sign does not match "
                    f"amount {transaction.amount}"
                )
                continue

            price = self.resolver.resolve(parsed.symbol)
            candidate = TrackedState(symbol=parsed.symbol, quantity=parsed.quantity, price=price)
            new_amount = compute_milliunits(candidate.quantity, candidate.price)

            previous = next_store.get(transaction.id)
            if previous != candidate or new_amount != transaction.amount:
                logger.debug(
                    f"Transaction {transaction.id}: {candidate.quantity} {candidate.symbol} @ {candidate.price} "
                    f"-> {format_milliunits(new_amount)} (was {format_milliunits(transaction.amount)})"
                )
                mutations[transaction.id] = TransactionMutation.from_transaction(transaction, new_amount)
            else:
                mutations.pop(transaction.id, None)

            next_store[transaction.id] = candidate

        untracked = any(txn_id not in next_store for txn_id in previous_store)
        return ReconcileResult(
            next_store=next_store,
            mutations=list(mutations.values()),
            changed=untracked or bool(mutations),
        )
