"""Display helpers for amounts shown in the payoff plan (Chilean peso style)."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

_NON_NUMERIC_RE = re.compile(r"[^0-9-]")


def _swap_separators(text: str) -> str:
    # "1,234.5" -> "1.234,5"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(amount: float) -> str:
    """
    Whole units with "." as thousands separator:
    - 1234567.4 -> "1.234.567"
    - 999.5 -> "1.000"
    """
    units = Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP)
    return _swap_separators(f"{units:,}")


def format_percentage(value: float) -> str:
    """One decimal with "," as decimal separator, e.g. 19.95 -> "20,0"."""
    rounded = Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return _swap_separators(f"{rounded:,}")


def parse_currency_string(value: str) -> int:
    """
    Parse what ``format_currency`` produces (and what users type):
    - "$1.234.567" -> 1234567
    - "-50.000" -> -50000
    - "" -> 0
    """
    digits = _NON_NUMERIC_RE.sub("", value or "")
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        raise ValueError(f"parse_currency_string: not an amount: {value!r}") from None
