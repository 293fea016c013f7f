#!/usr/bin/env python3
"""
Mode Converter

Switches denomination fields between amount and count representation,
rewriting the stored values so the drawer total does not change.
"""

import logging

from ..core.currency import format_plain_number, parse_number, round_cents, round_half_up
from .denominations import DENOMINATIONS
from .state import DrawerState, InputMode

logger = logging.getLogger(__name__)


def convert_value(value: float, face_value: float, target: InputMode) -> float:
    """
    Convert one denomination value into the target representation.

    Amount -> count rounds to the nearest whole unit; count -> amount is
    rounded to cents to drop float artifacts (3 * 0.2 -> 0.6).
    """
    if target == InputMode.COUNT:
        return float(round_half_up(value / face_value))
    return round_cents(value * face_value)


def set_mode(state: DrawerState, target: InputMode) -> bool:
    """
    Switch the input mode, converting stored denomination values in place.

    Empty, zero and non-numeric fields are left exactly as they are.

    Returns:
        True if the mode changed, False if the state was already in target
    """
    if state.mode == target:
        return False

    converted = 0
    for denomination in DENOMINATIONS:
        raw = state.values.get(denomination.id, "")
        value = parse_number(raw)
        if not raw or value is None or value == 0:
            continue

        new_value = convert_value(value, denomination.face_value, target)
        state.values[denomination.id] = format_plain_number(new_value)
        converted += 1

    logger.debug(f"Input mode {state.mode.value} -> {target.value}, converted {converted} fields")
    state.mode = target
    return True
