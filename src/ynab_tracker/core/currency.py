#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

YNAB stores every amount as integer milliunits (1000 milliunits = 1.00 in the
budget's currency). Instrument quantities and quoted prices arrive as decimal
text; they are only turned into numbers at the moment an amount is computed.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Keep quantities and prices as text until multiplication
- Truncate toward zero when converting a product to milliunits
"""

from decimal import Decimal, InvalidOperation, localcontext

MILLIUNITS_PER_UNIT = 1000


def parse_decimal(value: str) -> Decimal:
    """
    Parse decimal text without going through float.

    Args:
        value: Decimal text such as "2.5", "-0.25" or "100.1234"

    Returns:
        Decimal with the exact value of the text

    Raises:
        ValueError: If the text is not a finite decimal number
    """
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid decimal value: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Invalid decimal value: {value!r}")
    return result


def compute_milliunits(quantity: str, price: str) -> int:
    """
    Compute the milliunit amount for a quantity of an instrument at a price.

    The product is truncated toward zero, matching integer conversion.

    Args:
        quantity: Signed quantity text (e.g. "2.5")
        price: Unit price text (e.g. "100.1234")

    Returns:
        Amount in milliunits

    Example:
        compute_milliunits("2.5", "100.1234") -> 250308
        compute_milliunits("-2.5", "100.1234") -> -250308
    """
    quantity_value = parse_decimal(quantity)
    price_value = parse_decimal(price)

    # Wide enough to hold the exact product; int() then truncates
    digits = len(quantity_value.as_tuple().digits) + len(price_value.as_tuple().digits) + 4
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        product = quantity_value * price_value * MILLIUNITS_PER_UNIT
    return int(product)


def format_milliunits(milliunits: int) -> str:
    """
    Format milliunits as a dollar string with two decimal places.

    Uses integer arithmetic only; sub-cent milliunits are truncated.

    Example:
        format_milliunits(-45990) -> "-$45.99"
        format_milliunits(250308) -> "$250.30"
    """
    is_negative = milliunits < 0
    cents = abs(int(milliunits)) // 10

    dollars = cents // 100
    remainder = cents % 100

    if is_negative:
        return f"-${dollars}.{remainder:02d}"
    return f"${dollars}.{remainder:02d}"
