#!/usr/bin/env python3
"""
Denomination Registry

Static catalogue of the drawer's input fields: euro bills and coins with
their face values, plus the non-denominated "other" fields (the safe box and
the card/delivery channels that are deducted from the cash total).

Ordering matters: BILLS and COINS are each kept in descending face value and
DENOMINATIONS lists bills before coins. That order is the priority the
allocation engine follows when filling the envelope.
"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Kind of drawer field."""

    BILL = "bill"
    COIN = "coin"
    OTHER = "other"


@dataclass(frozen=True)
class Denomination:
    """A bill or coin with a fixed face value."""

    id: str
    face_value: float
    category: Category

    def __post_init__(self):
        if self.face_value <= 0:
            raise ValueError(f"Face value must be positive: {self.id}")
        if self.category == Category.OTHER:
            raise ValueError(f"Denomination must be a bill or coin: {self.id}")

    @property
    def is_bill(self) -> bool:
        return self.category == Category.BILL


@dataclass(frozen=True)
class OtherField:
    """Non-denominated money field (no count mode)."""

    id: str
    label: str
    is_deduction_channel: bool = False


BILLS: tuple[Denomination, ...] = (
    Denomination("bill-100", 100, Category.BILL),
    Denomination("bill-50", 50, Category.BILL),
    Denomination("bill-20", 20, Category.BILL),
    Denomination("bill-10", 10, Category.BILL),
    Denomination("bill-5", 5, Category.BILL),
)

COINS: tuple[Denomination, ...] = (
    Denomination("coin-2", 2, Category.COIN),
    Denomination("coin-1", 1, Category.COIN),
    Denomination("coin-0-5", 0.5, Category.COIN),
    Denomination("coin-0-2", 0.2, Category.COIN),
    Denomination("coin-0-1", 0.1, Category.COIN),
    Denomination("coin-0-05", 0.05, Category.COIN),
)

DENOMINATIONS: tuple[Denomination, ...] = BILLS + COINS

SAFE_BOX = "kermata"

OTHER_FIELDS: tuple[OtherField, ...] = (
    OtherField(SAFE_BOX, "Safe box"),
    OtherField("wolt", "WOLT", is_deduction_channel=True),
    OtherField("efood", "EFOOD", is_deduction_channel=True),
    OtherField("mypos", "myPos", is_deduction_channel=True),
    OtherField("eurobank", "Eurobank", is_deduction_channel=True),
)

DEDUCTION_CHANNELS: tuple[str, ...] = tuple(f.id for f in OTHER_FIELDS if f.is_deduction_channel)

# Card terminals: added back when computing the income-limited total
CARD_CHANNELS: tuple[str, ...] = ("mypos", "eurobank")

_BY_ID: dict[str, Denomination] = {d.id: d for d in DENOMINATIONS}
_OTHER_BY_ID: dict[str, OtherField] = {f.id: f for f in OTHER_FIELDS}

FIELD_IDS: tuple[str, ...] = tuple(_BY_ID) + tuple(_OTHER_BY_ID)


def get_denomination(field_id: str) -> Denomination | None:
    """Return the denomination for a field id, or None for other fields."""
    return _BY_ID.get(field_id)


def get_other_field(field_id: str) -> OtherField | None:
    """Return the other-field definition for a field id, if any."""
    return _OTHER_BY_ID.get(field_id)


def is_denomination_field(field_id: str) -> bool:
    return field_id in _BY_ID


def is_known_field(field_id: str) -> bool:
    return field_id in _BY_ID or field_id in _OTHER_BY_ID
