#!/usr/bin/env python3
"""Exceptions that abort a tracker run."""


class TrackerError(Exception):
    """Base class for errors that abort a tracker run."""


class QuoteUnavailableError(TrackerError):
    """A market price could not be obtained for a symbol."""

    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        self.reason = reason
        super().__init__(f"Price unavailable for {symbol}: {reason}")


class LedgerRejectedError(TrackerError):
    """YNAB rejected a request or could not be reached."""

    def __init__(self, detail: str, status_code: int | None = None, error_id: str | None = None):
        self.detail = detail
        self.status_code = status_code
        self.error_id = error_id
        prefix = f"YNAB error ({status_code})" if status_code is not None else "YNAB error"
        super().__init__(f"{prefix}: {detail}")
