#!/usr/bin/env python3
"""
Drawer State - the Field Value Store

Holds the current entry for every drawer field, the adjustment ("exoda")
list, the operator details and the active input mode. Values are kept as
sanitized strings exactly as typed; parsing happens in the calculators.

The adjustment list has a backing store longer than its active length:
shrinking the list hides trailing entries and growing it again brings them
back, so switching the count back and forth never loses what was typed.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from ..core.currency import sanitize_numeric_input
from .denominations import FIELD_IDS, is_known_field

logger = logging.getLogger(__name__)

DEFAULT_MAX_ADJUSTMENTS = 10


class InputMode(Enum):
    """How denomination fields are interpreted."""

    AMOUNT = "amount"
    COUNT = "count"


class UnknownFieldError(ValueError):
    """Raised when a field id is not part of the drawer layout."""

    pass


class AdjustmentRangeError(ValueError):
    """Raised when an adjustment index or count is outside 1..N."""

    pass


@dataclass
class AdjustmentEntry:
    """A labeled deduction outside the denominated drawer."""

    label: str = ""
    amount: str = ""


@dataclass
class DrawerState:
    """
    Mutable snapshot of everything entered for one shift.

    Mutate through the methods so input is sanitized and ids are checked;
    the calculators only read.
    """

    values: dict[str, str] = field(default_factory=dict)
    mode: InputMode = InputMode.AMOUNT
    operator_name: str = ""
    shift_date: date = field(default_factory=date.today)
    max_adjustments: int = DEFAULT_MAX_ADJUSTMENTS
    _adjustments: list[AdjustmentEntry] = field(default_factory=lambda: [AdjustmentEntry()])
    _adjustment_count: int = 1

    @property
    def is_count_mode(self) -> bool:
        return self.mode == InputMode.COUNT

    # Drawer fields

    def get_value(self, field_id: str) -> str:
        """Return the stored string for a field ("" when nothing was entered)."""
        self._check_field(field_id)
        return self.values.get(field_id, "")

    def set_value(self, field_id: str, raw: str | None) -> str:
        """
        Store a field value after sanitizing it.

        Returns:
            The sanitized value actually stored
        """
        self._check_field(field_id)
        value = sanitize_numeric_input(raw)
        if value:
            self.values[field_id] = value
        else:
            self.values.pop(field_id, None)
        return value

    def _check_field(self, field_id: str) -> None:
        if not is_known_field(field_id):
            raise UnknownFieldError(f"Unknown drawer field: {field_id} (expected one of {', '.join(FIELD_IDS)})")

    # Adjustment entries

    @property
    def adjustment_count(self) -> int:
        return self._adjustment_count

    @property
    def adjustments(self) -> list[AdjustmentEntry]:
        """Active adjustment entries, in order (index 0 is entry 1)."""
        return self._adjustments[: self._adjustment_count]

    def resize_adjustments(self, count: int) -> None:
        """
        Change how many adjustment entries are active.

        Entries beyond the new count are hidden, not discarded.
        """
        if not 1 <= count <= self.max_adjustments:
            raise AdjustmentRangeError(f"Adjustment count must be between 1 and {self.max_adjustments}: {count}")

        while len(self._adjustments) < count:
            self._adjustments.append(AdjustmentEntry())

        logger.debug(f"Adjustment entries resized {self._adjustment_count} -> {count}")
        self._adjustment_count = count

    def get_adjustment(self, index: int) -> AdjustmentEntry:
        """Return the active adjustment entry at a 1-based index."""
        self._check_adjustment_index(index)
        return self._adjustments[index - 1]

    def set_adjustment(self, index: int, amount: str | None = None, label: str | None = None) -> AdjustmentEntry:
        """
        Update an active adjustment entry; arguments left as None are kept.

        Args:
            index: 1-based entry index
            amount: Raw amount text (sanitized before storing)
            label: Free-text description

        Returns:
            The updated entry
        """
        entry = self.get_adjustment(index)
        if amount is not None:
            entry.amount = sanitize_numeric_input(amount)
        if label is not None:
            entry.label = label.strip()
        return entry

    def _check_adjustment_index(self, index: int) -> None:
        if not 1 <= index <= self._adjustment_count:
            raise AdjustmentRangeError(f"Adjustment index must be between 1 and {self._adjustment_count}: {index}")

    # Lifecycle

    def clear(self) -> None:
        """Clear every entry and return to amount mode with one adjustment."""
        self.values.clear()
        self.mode = InputMode.AMOUNT
        self.operator_name = ""
        self._adjustments = [AdjustmentEntry()]
        self._adjustment_count = 1
