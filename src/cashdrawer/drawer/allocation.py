#!/usr/bin/env python3
"""
Allocation Engine

Greedy breakdown of a target amount into the bills and coins available in
the drawer. Denominations are taken strictly from largest to smallest, bills
before coins, as many of each as fit; whatever the stock cannot cover is
reported as the uncovered remainder.

This is deliberately not a minimum-coin solver. The operator empties the
highest denominations first, and a combination with fewer pieces or a
smaller shortfall is not searched for.

Key Features:
- Remainder re-rounded to cents after every step so float drift cannot build up
- Coin steps add the tolerance before dividing (1.35 / 0.2 must give 6, not 6.749...)
- Leftover counts reported for every denomination, used or not
"""

import logging
import math
from dataclasses import dataclass, field

from ..core.currency import DEFAULT_TOLERANCE, parse_amount, round_cents, round_half_up
from .denominations import DENOMINATIONS, Denomination
from .state import DrawerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    """
    Result of a greedy allocation.

    All maps are keyed by face value. `used` only holds denominations that
    were actually taken; `leftover_counts` holds every denomination.
    """

    target: float
    used: dict[float, int] = field(default_factory=dict)
    remaining_uncovered: float = 0.0
    leftover_counts: dict[float, int] = field(default_factory=dict)

    @property
    def used_total(self) -> float:
        """Value of the pieces taken, rounded to cents."""
        return round_cents(sum(face * count for face, count in self.used.items()))

    @property
    def leftover_total(self) -> float:
        """Value of the pieces left behind, rounded to cents."""
        return round_cents(sum(face * count for face, count in self.leftover_counts.items()))

    @property
    def has_shortfall(self) -> bool:
        return self.remaining_uncovered > 0


def _pieces_needed(remaining: float, denomination: Denomination, tolerance: float) -> int:
    if denomination.is_bill:
        return math.floor(remaining / denomination.face_value)
    return math.floor((remaining + tolerance) / denomination.face_value)


def allocate(
    target: float,
    available: dict[float, int],
    tolerance: float = DEFAULT_TOLERANCE,
) -> Allocation:
    """
    Split a target amount into available bills and coins, largest first.

    Args:
        target: Amount to set aside; zero or negative means nothing to allocate
        available: Pieces on hand per face value (missing means none)
        tolerance: Float tolerance for coin division and the final remainder

    Returns:
        Allocation with used pieces, uncovered remainder and leftovers
    """
    stock = {d.face_value: max(0, int(available.get(d.face_value, 0))) for d in DENOMINATIONS}
    remaining = round_cents(target)

    used: dict[float, int] = {}
    if remaining > 0:
        for denomination in DENOMINATIONS:
            if remaining <= 0:
                break

            needed = _pieces_needed(remaining, denomination, tolerance)
            taken = min(needed, stock[denomination.face_value])
            if taken > 0:
                used[denomination.face_value] = taken
                remaining = round_cents(remaining - taken * denomination.face_value)

    uncovered = remaining if remaining > tolerance else 0.0
    leftover = {face: max(0, count - used.get(face, 0)) for face, count in stock.items()}

    if uncovered:
        logger.warning(f"Allocation of {target:.2f} short by {uncovered:.2f}")
    else:
        logger.debug(f"Allocation of {target:.2f} used {sum(used.values())} pieces")

    return Allocation(
        target=round_cents(target),
        used=used,
        remaining_uncovered=uncovered,
        leftover_counts=leftover,
    )


def available_counts(state: DrawerState) -> dict[float, int]:
    """
    Pieces on hand per face value, derived from the denomination fields.

    Count mode rounds the stored count; amount mode divides by face value
    first. Negative entries count as none.
    """
    counts: dict[float, int] = {}
    for denomination in DENOMINATIONS:
        value = parse_amount(state.values.get(denomination.id, ""))
        if not state.is_count_mode:
            value = value / denomination.face_value
        counts[denomination.face_value] = max(0, round_half_up(value))
    return counts
