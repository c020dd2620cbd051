"""
Tracker Package

Keeps YNAB transaction amounts in step with market prices for the
instruments named in their memos.

Key Components:
- memo: ``$SYMBOL QUANTITY$`` memo parsing and sign checks
- prices: per-run memoized price lookup over a quote source
- engine: reconciliation of changed transactions against tracked state
- datastore: durable per-budget tracked state and server knowledge
- sync: budget-by-budget fetch, reconcile, update, persist loop
"""

from .datastore import TrackerStateStore
from .engine import ReconciliationEngine
from .memo import ParsedMemo, is_sign_consistent, parse_memo
from .models import BudgetState, ReconcileResult, TrackedState
from .prices import PriceResolver, QuoteSource, YahooQuoteSource
from .sync import BudgetSyncResult, TrackerSync

__all__ = [
    # Memo parsing
    "ParsedMemo",
    "is_sign_consistent",
    "parse_memo",
    # Pricing
    "PriceResolver",
    "QuoteSource",
    "YahooQuoteSource",
    # State
    "BudgetState",
    "TrackedState",
    "TrackerStateStore",
    # Reconciliation
    "ReconcileResult",
    "ReconciliationEngine",
    "BudgetSyncResult",
    "TrackerSync",
]
