#!/usr/bin/env python3
"""
Totals Calculator

Derives the five shift totals from a drawer state:

- grand total: everything in the drawer, channels and adjustments included
- adjustments total: sum of the exoda entries
- cash total: grand total minus the fixed float, the adjustments and every
  deduction channel (may go negative)
- cash-limited total: cash total with the adjustments added back
- income-limited total: cash-limited total plus the card terminals

compute_totals is a pure function of the state; nothing is cached.
"""

from dataclasses import dataclass

from ..core.currency import DEFAULT_CURRENCY_SYMBOL, format_amount, parse_amount
from .denominations import CARD_CHANNELS, DEDUCTION_CHANNELS, FIELD_IDS, get_denomination
from .state import DrawerState

DEFAULT_FIXED_DEDUCTION = 1000.0


@dataclass(frozen=True)
class DrawerTotals:
    """Derived totals for one drawer state."""

    grand_total: float
    adjustments_total: float
    deductions_total: float
    cash_total: float
    cash_limited_total: float
    income_limited_total: float

    def formatted(self, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> dict[str, str]:
        """Display strings keyed by total name."""
        return {
            "grand_total": format_amount(self.grand_total, symbol),
            "adjustments_total": format_amount(self.adjustments_total, symbol),
            "cash_total": format_amount(self.cash_total, symbol),
            "cash_limited_total": format_amount(self.cash_limited_total, symbol),
            "income_limited_total": format_amount(self.income_limited_total, symbol),
        }


def field_amount(state: DrawerState, field_id: str) -> float:
    """Money value of a field; counts are multiplied by their face value."""
    value = parse_amount(state.get_value(field_id))
    denomination = get_denomination(field_id)
    if denomination is not None and state.is_count_mode:
        return value * denomination.face_value
    return value


def adjustments_total(state: DrawerState) -> float:
    """Sum of the active adjustment amounts (labels are ignored)."""
    return sum(parse_amount(entry.amount) for entry in state.adjustments)


def compute_totals(state: DrawerState, fixed_deduction: float = DEFAULT_FIXED_DEDUCTION) -> DrawerTotals:
    """
    Compute all derived totals for a drawer state.

    Args:
        state: Current drawer entries and mode
        fixed_deduction: Float left in the drawer, subtracted from the cash total

    Returns:
        DrawerTotals with full-precision floats
    """
    exoda = adjustments_total(state)

    grand = sum(field_amount(state, field_id) for field_id in FIELD_IDS) + exoda

    deductions = fixed_deduction + exoda
    for field_id in DEDUCTION_CHANNELS:
        deductions += parse_amount(state.get_value(field_id))

    cash = grand - deductions
    cash_limited = cash + exoda
    income_limited = cash_limited
    for field_id in CARD_CHANNELS:
        income_limited += parse_amount(state.get_value(field_id))

    return DrawerTotals(
        grand_total=grand,
        adjustments_total=exoda,
        deductions_total=deductions,
        cash_total=cash,
        cash_limited_total=cash_limited,
        income_limited_total=income_limited,
    )
