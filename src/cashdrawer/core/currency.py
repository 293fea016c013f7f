#!/usr/bin/env python3
"""
Currency Parsing, Rounding and Formatting Utilities

Shared numeric helpers for the cash drawer reconciler.

Amounts typed at the drawer are free-form strings ("12,50", "1O0", "")
and are normalized with a sanitize-then-parse step before any calculation.
Arithmetic is plain float; every place that compares floats goes through
the tolerance helpers here so validation and allocation agree.

Key Principles:
- Parsing never raises: unparseable input is 0 (or None where the caller
  must tell "missing" from "zero")
- Rounding to cents is half-up, like the register display
- One tolerance constant, overridable from configuration
"""

import math
import re

DEFAULT_TOLERANCE = 0.001
DEFAULT_CURRENCY_SYMBOL = "€"

_DISALLOWED_CHARS = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def sanitize_numeric_input(raw: str | None) -> str:
    """
    Normalize a typed value to digits, dots and minus signs.

    Commas are treated as decimal separators, every other character is
    dropped, and only the first dot survives.

    Examples:
        sanitize_numeric_input("12,50") -> "12.50"
        sanitize_numeric_input("1.2.3") -> "1.23"
        sanitize_numeric_input("€ 7") -> "7"
    """
    if not raw:
        return ""

    value = _DISALLOWED_CHARS.sub("", str(raw).replace(",", "."))

    parts = value.split(".")
    if len(parts) > 2:
        value = parts[0] + "." + "".join(parts[1:])

    return value


def parse_number(raw: str | float | int | None) -> float | None:
    """
    Parse the leading number of a value, or None if there is none.

    Mirrors a lenient float parse: "12abc" -> 12.0, "-" -> None, "" -> None.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return None if math.isnan(raw) else float(raw)

    match = _LEADING_NUMBER.match(raw)
    if not match:
        return None
    return float(match.group(0))


def parse_amount(raw: str | float | int | None) -> float:
    """Parse a value as float, defaulting to 0 on empty or invalid input."""
    value = parse_number(raw)
    return value if value is not None else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def round_cents(value: float) -> float:
    """Round an amount to 2 decimals (half-up)."""
    return math.floor(value * 100 + 0.5) / 100


def is_multiple_of(value: float, unit: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Check that value is an integer multiple of unit, within tolerance.

    The remainder is accepted when it is close to 0 or close to unit itself,
    which covers float results that land just under the next multiple
    (0.19999 % 0.2 == 0.19999).
    """
    remainder = math.fmod(abs(value), unit)
    return remainder < tolerance or (unit - remainder) < tolerance


def format_plain_number(value: float) -> str:
    """
    Format a number the way it is stored back into a field.

    Examples:
        format_plain_number(3.0) -> "3"
        format_plain_number(0.6000000000000001) -> "0.6"
    """
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def format_amount(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format an amount with 2 decimals and the currency suffix.

    Example:
        format_amount(12.3) -> "12.30€"
    """
    cents = round_half_up(abs(amount) * 100)
    sign = "-" if amount < 0 and cents else ""
    return f"{sign}{cents // 100}.{cents % 100:02d}{symbol}"


def format_denomination(face_value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Label a bill or coin by its face value.

    Examples:
        format_denomination(100) -> "100€"
        format_denomination(0.05) -> "5c"
    """
    if face_value >= 1:
        return f"{format_plain_number(face_value)}{symbol}"
    return f"{round_half_up(face_value * 100)}c"
