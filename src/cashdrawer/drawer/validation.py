#!/usr/bin/env python3
"""
Validation Rules

Advisory per-field checks. An invalid field is only flagged for display;
totals and persistence carry on with the best-effort parse.
"""

from ..core.currency import DEFAULT_TOLERANCE, is_multiple_of, parse_number
from .denominations import DENOMINATIONS, get_denomination
from .state import DrawerState


def validate_field(state: DrawerState, field_id: str, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Check whether a field's current value fits the active mode.

    - Empty values are always valid (not entered yet)
    - Count mode: denominations need a non-negative whole number
    - Amount mode: denominations need a multiple of their face value
    - Other fields accept any number
    """
    raw = state.get_value(field_id)
    if not raw:
        return True

    denomination = get_denomination(field_id)
    if denomination is None:
        return True

    value = parse_number(raw)

    if state.is_count_mode:
        return value is not None and value.is_integer() and value >= 0

    # Unparseable amounts are not flagged in amount mode
    if value is None:
        return True
    return is_multiple_of(value, denomination.face_value, tolerance)


def validate_all(state: DrawerState, tolerance: float = DEFAULT_TOLERANCE) -> set[str]:
    """Return the ids of denomination fields that fail validation."""
    return {d.id for d in DENOMINATIONS if not validate_field(state, d.id, tolerance)}
