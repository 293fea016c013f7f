#!/usr/bin/env python3
"""
Presentation Views

Turns totals and the envelope allocation into display-ready structures:

- BreakdownView ("envelope"): what to put in the envelope and what stays
  in the drawer, every denomination listed
- SummaryView ("send"): the end-of-shift report with totals, individual
  adjustments, non-zero channels and what is left after the envelope

Both views get their allocation from plan_envelope, so the two screens
always agree on which pieces leave the drawer.
"""

from dataclasses import dataclass, field
from datetime import date

from ..core.currency import DEFAULT_CURRENCY_SYMBOL, DEFAULT_TOLERANCE, format_denomination, parse_amount, round_cents
from .allocation import Allocation, allocate, available_counts
from .denominations import BILLS, COINS, DEDUCTION_CHANNELS, DENOMINATIONS, SAFE_BOX, Denomination, get_other_field
from .state import DrawerState
from .totals import DEFAULT_FIXED_DEDUCTION, DrawerTotals, compute_totals


@dataclass(frozen=True)
class DenominationLine:
    """One `count x denomination` row."""

    face_value: float
    count: int
    label: str

    @property
    def amount(self) -> float:
        return self.face_value * self.count


@dataclass(frozen=True)
class AmountLine:
    """One labeled money row."""

    label: str
    amount: float


@dataclass(frozen=True)
class EnvelopePlan:
    """Totals plus the allocation of the cash total."""

    totals: DrawerTotals
    allocation: Allocation


@dataclass(frozen=True)
class BreakdownView:
    """What goes into the envelope and what remains."""

    has_cash: bool
    put: list[DenominationLine] = field(default_factory=list)
    put_total: float = 0.0
    keep: list[DenominationLine] = field(default_factory=list)
    keep_total: float = 0.0
    shortfall: float = 0.0

    @property
    def nothing_available(self) -> bool:
        """True when there was cash to set aside but no piece could be used."""
        return self.has_cash and not self.put


@dataclass(frozen=True)
class SummaryView:
    """End-of-shift report."""

    operator_name: str
    shift_date: date
    grand_total: float
    cash_total: float
    adjustments_total: float
    adjustments: list[AmountLine] = field(default_factory=list)
    channels: list[AmountLine] = field(default_factory=list)
    remaining_bills: list[DenominationLine] = field(default_factory=list)
    remaining_coins: list[DenominationLine] = field(default_factory=list)
    safe_box: float = 0.0


def plan_envelope(
    state: DrawerState,
    fixed_deduction: float = DEFAULT_FIXED_DEDUCTION,
    tolerance: float = DEFAULT_TOLERANCE,
) -> EnvelopePlan:
    """Compute totals and allocate the cash total from the drawer stock."""
    totals = compute_totals(state, fixed_deduction)
    allocation = allocate(totals.cash_total, available_counts(state), tolerance)
    return EnvelopePlan(totals=totals, allocation=allocation)


def _lines(
    denominations: tuple[Denomination, ...],
    counts: dict[float, int],
    symbol: str,
    skip_zero: bool,
) -> list[DenominationLine]:
    lines = []
    for denomination in denominations:
        count = counts.get(denomination.face_value, 0)
        if skip_zero and count <= 0:
            continue
        lines.append(DenominationLine(denomination.face_value, count, format_denomination(denomination.face_value, symbol)))
    return lines


def build_breakdown_view(plan: EnvelopePlan, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> BreakdownView:
    """Build the envelope breakdown from a plan."""
    if round_cents(plan.totals.cash_total) <= 0:
        return BreakdownView(has_cash=False)

    allocation = plan.allocation
    return BreakdownView(
        has_cash=True,
        put=_lines(DENOMINATIONS, allocation.used, symbol, skip_zero=True),
        put_total=allocation.used_total,
        keep=_lines(DENOMINATIONS, allocation.leftover_counts, symbol, skip_zero=False),
        keep_total=allocation.leftover_total,
        shortfall=allocation.remaining_uncovered,
    )


def build_summary_view(state: DrawerState, plan: EnvelopePlan, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> SummaryView:
    """Build the end-of-shift summary from a state and its plan."""
    adjustments = []
    for index, entry in enumerate(state.adjustments, start=1):
        amount = parse_amount(entry.amount)
        if amount == 0:
            continue
        adjustments.append(AmountLine(entry.label or f"Exoda {index}", amount))

    channels = []
    for field_id in DEDUCTION_CHANNELS:
        amount = parse_amount(state.get_value(field_id))
        if amount == 0:
            continue
        other = get_other_field(field_id)
        channels.append(AmountLine(other.label if other else field_id, amount))

    leftover = plan.allocation.leftover_counts
    return SummaryView(
        operator_name=state.operator_name,
        shift_date=state.shift_date,
        grand_total=plan.totals.grand_total,
        cash_total=plan.totals.cash_total,
        adjustments_total=plan.totals.adjustments_total,
        adjustments=adjustments,
        channels=channels,
        remaining_bills=_lines(BILLS, leftover, symbol, skip_zero=True),
        remaining_coins=_lines(COINS, leftover, symbol, skip_zero=True),
        safe_box=parse_amount(state.get_value(SAFE_BOX)),
    )
