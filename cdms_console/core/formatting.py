"""Display formatting for amounts, counts, and percentages."""
from __future__ import annotations

import re
from typing import Any, Optional

CURRENCY_SYMBOL = "$"


def to_number(value: Any) -> Optional[float]:
    """Coerce API scalars (numbers or decimal strings) to float."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def format_currency(value: Any) -> str:
    """Render ``1234.5`` as ``$1,234.50`` and ``-12`` as ``-$12.00``.

    Non-numeric values are passed through as text; missing values become "".
    """

    number = to_number(value)
    if number is None:
        return "" if value in (None, "") else str(value)
    sign = "-" if number < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(number):,.2f}"


def format_count(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return "" if value is None else str(value)
    return f"{int(round(number)):,}"


def format_decimal(value: Any, places: int = 2) -> str:
    number = to_number(value)
    if number is None:
        return "" if value is None else str(value)
    return f"{number:.{places}f}"


def format_percentage(value: Any) -> str:
    """The server already computes percentages; only the sign is appended."""

    if value is None or value == "":
        return ""
    return f"{value}%"


def parse_currency(text: Any) -> Optional[float]:
    """Parse user input such as ``$1,234.50`` into a float.

    Empty input returns ``None``; anything else that is not a decimal amount
    raises ``ValueError``.
    """

    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    cleaned = re.sub(r"[\s,]", "", str(text)).replace(CURRENCY_SYMBOL, "")
    if not cleaned:
        return None
    if not re.fullmatch(r"-?\d+(\.\d+)?", cleaned):
        raise ValueError(f"{text!r} is not a valid amount")
    return float(cleaned)
