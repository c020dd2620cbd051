#!/usr/bin/env python3
"""
Memo Parser

Extracts an instrument symbol and signed quantity from a transaction memo.
A tracked memo contains a token of the form ``$SYMBOL QUANTITY$``, e.g.
``"Brokerage buy $AAPL 2.5$"``. Only the first token counts.
"""

import re
from dataclasses import dataclass
from decimal import Decimal

MEMO_PATTERN = re.compile(r"\$([^$]{1,10}) (-?[0-9.]+)\$")
QUANTITY_PATTERN = re.compile(r"-?(\d+\.?\d*|\.\d+)")


@dataclass(frozen=True)
class ParsedMemo:
    """Symbol and quantity text found in a memo."""

    symbol: str
    quantity: str


def parse_memo(memo: str | None) -> ParsedMemo | None:
    """
    Parse the first ``$SYMBOL QUANTITY$`` token of a memo.

    Args:
        memo: Memo text, possibly None

    Returns:
        ParsedMemo, or None if the memo has no well-formed token

    Examples:
        parse_memo("$AAPL 2.5$") -> ParsedMemo(symbol="AAPL", quantity="2.5")
        parse_memo("$BTC-USD -0.01$ sold") -> ParsedMemo(symbol="BTC-USD", quantity="-0.01")
        parse_memo("coffee") -> None
    """
    if not memo:
        return None

    match = MEMO_PATTERN.search(memo)
    if match is None:
        return None

    symbol, quantity = match.group(1), match.group(2)
    if not QUANTITY_PATTERN.fullmatch(quantity):
        return None

    return ParsedMemo(symbol=symbol, quantity=quantity)


def is_sign_consistent(quantity: str, amount: int) -> bool:
    """
    Check that a memo quantity and a ledger amount point the same way.

    A positive quantity needs a positive amount; zero or negative quantities
    need a zero or negative amount.
    """
    return (Decimal(quantity) > 0) == (amount > 0)
