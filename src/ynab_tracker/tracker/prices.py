#!/usr/bin/env python3
"""
Price Resolution

PriceResolver memoizes prices for the lifetime of one run, so every distinct
symbol is quoted at most once no matter how many budgets reference it. Cache
misses are delegated to a QuoteSource; YahooQuoteSource reads the latest
regular-market price from Yahoo Finance.

A failed lookup raises QuoteUnavailableError. There is no fallback price.
"""

import json
import logging
from decimal import Decimal
from typing import Protocol
from urllib.parse import quote

import requests

from ..core.errors import QuoteUnavailableError

logger = logging.getLogger(__name__)


class QuoteSource(Protocol):
    """Anything that can quote a current price for a symbol."""

    def get_price(self, symbol: str) -> str:
        """Return the current price as decimal text, or raise QuoteUnavailableError."""
        ...


class YahooQuoteSource:
    """Quote source backed by the Yahoo Finance chart endpoint."""

    def __init__(
        self,
        base_url: str = "https://query1.finance.yahoo.com",
        timeout: int = 15,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        # Yahoo rejects requests without a browser-like user agent
        self.session.headers.setdefault("User-Agent", "Mozilla/5.0 (compatible; ynab-tracker)")

    def get_price(self, symbol: str) -> str:
        """
        Fetch the regular market price for ``symbol``.

        The JSON body is decoded with Decimal floats so the returned text is
        the provider's literal value.

        Raises:
            QuoteUnavailableError: On transport errors, unknown symbols, or
                responses without a price
        """
        url = f"{self.base_url}/v8/finance/chart/{quote(symbol, safe='')}"
        try:
            response = self.session.get(url, params={"interval": "1d", "range": "1d"}, timeout=self.timeout)
        except requests.RequestException as e:
            raise QuoteUnavailableError(symbol, str(e)) from e

        try:
            payload = json.loads(response.text, parse_float=Decimal)
        except ValueError as e:
            raise QuoteUnavailableError(symbol, f"invalid response (HTTP {response.status_code})") from e

        chart = payload.get("chart") if isinstance(payload, dict) else None
        if not isinstance(chart, dict):
            raise QuoteUnavailableError(symbol, f"unexpected response (HTTP {response.status_code})")

        error = chart.get("error")
        if error:
            description = error.get("description") if isinstance(error, dict) else str(error)
            raise QuoteUnavailableError(symbol, description or "unknown error")

        if not response.ok:
            raise QuoteUnavailableError(symbol, f"HTTP {response.status_code}")

        results = chart.get("result") or []
        if not results:
            raise QuoteUnavailableError(symbol, "symbol not found")

        price = (results[0].get("meta") or {}).get("regularMarketPrice")
        if price is None:
            raise QuoteUnavailableError(symbol, "no regular market price")

        return str(price)


class PriceResolver:
    """
    Per-run memoizing price lookup.

    Build one resolver per run and share it across every budget of that run.
    """

    def __init__(self, source: QuoteSource):
        self.source = source
        self.prices: dict[str, str] = {}
        self.lookups = 0

    def resolve(self, symbol: str) -> str:
        """
        Get the price of ``symbol`` as decimal text.

        Raises:
            QuoteUnavailableError: If the source cannot quote the symbol
        """
        cached = self.prices.get(symbol)
        if cached is not None:
            return cached

        self.lookups += 1
        try:
            price = self.source.get_price(symbol)
        except QuoteUnavailableError:
            raise
        except Exception as e:
            raise QuoteUnavailableError(symbol, str(e)) from e

        logger.debug(f"Quoted {symbol} at {price}")
        self.prices[symbol] = price
        return price
