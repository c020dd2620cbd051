"""
YNAB Price Tracker

Rewrites YNAB transaction amounts from live market prices. A memo such as
``$AAPL 2.5$`` marks a transaction as 2.5 units of AAPL; each run re-prices
changed transactions and pushes corrected amounts back to YNAB.

Domain Packages:
- core: Configuration, currency arithmetic, JSON persistence, errors
- ynab: YNAB API models and client
- tracker: Memo parsing, pricing, reconciliation, and sync
- cli: Command-line interface

Example Usage:
    from ynab_tracker.tracker import PriceResolver, ReconciliationEngine
    from ynab_tracker.core.currency import compute_milliunits
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.currency import compute_milliunits, format_milliunits
from .core.errors import LedgerRejectedError, QuoteUnavailableError, TrackerError

__all__ = [
    "Environment",
    "get_config",
    "compute_milliunits",
    "format_milliunits",
    "LedgerRejectedError",
    "QuoteUnavailableError",
    "TrackerError",
]
