"""Number parsing and display helpers shared by renderers."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

PLACEHOLDER = "—"
BLANK = "___"
CURRENCY_SYMBOL = "R"

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float | None:
    """Parse the leading numeric prefix of ``value``.

    ``"10000"``, ``12.5`` and ``" 42abc"`` parse; ``"R 500"``, ``""``, booleans
    and ``None`` do not. Non-finite results are treated as unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return None
        number = float(match.group(0))
    return number if math.isfinite(number) else None


def group_thousands(value: float) -> str:
    """Round half away from zero and group digits with spaces: ``15 000``."""
    rounded = int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))
    return f"{rounded:,}".replace(",", " ")


def format_rand(value: Any) -> str:
    number = parse_number(value)
    if number is None:
        return PLACEHOLDER
    return f"{CURRENCY_SYMBOL} {group_thousands(number)}"


def sum_numbers(values: Any) -> float:
    """Sum parsed values, counting blanks and non-numeric input as zero."""
    return sum((parse_number(value) or 0.0) for value in values)


def humanize_key(key: str) -> str:
    return key.replace("_", " ")

