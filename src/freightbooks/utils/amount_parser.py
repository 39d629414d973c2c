"""Amount parsing and coercion utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Any

# Magnitudes above 10**MAX_AMOUNT_EXPONENT count as malformed
MAX_AMOUNT_EXPONENT = 100


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "Bs. 123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"Bs\.?|[$€]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValueError(f"Could not parse amount '{amount_str}': out of range")
    return -amount if is_negative else amount


def _in_range(amount: Decimal) -> bool:
    return amount.is_finite() and (not amount or amount.adjusted() <= MAX_AMOUNT_EXPONENT)


def coerce_amount(value: Any) -> Decimal:
    """Convert a loosely typed numeric field to Decimal, degrading to zero.

    Backend payloads may carry numbers, numeric strings, blanks or nulls.
    Anything that is not a finite number, or whose magnitude exceeds
    ``10**MAX_AMOUNT_EXPONENT``, becomes ``Decimal(0)`` instead of raising,
    so one bad field cannot abort a whole calculation.
    """
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if _in_range(value) else Decimal(0)
    if isinstance(value, int):
        amount = Decimal(value)
        return amount if _in_range(amount) else Decimal(0)
    if isinstance(value, float):
        # str() keeps the short repr, so 0.1 stays 0.1 rather than its binary expansion
        return coerce_amount(str(value))
    if isinstance(value, str):
        try:
            return parse_amount(value)
        except ValueError:
            return Decimal(0)
    return Decimal(0)


def coerce_quantity(value: Any) -> int:
    """Convert a cargo quantity to a positive int.

    Missing, malformed or non-positive quantities count as a single unit;
    fractions below one unit round up to one.
    """
    amount = coerce_amount(value)
    if amount <= 0:
        return 1
    return max(int(amount), 1)
