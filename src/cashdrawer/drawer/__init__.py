"""
Drawer Reconciliation Engine

Field store, mode conversion, validation, totals and the greedy envelope
allocation, plus the session adapter and snapshot persistence that sit
around them.
"""

from .allocation import Allocation, allocate, available_counts
from .denominations import (
    BILLS,
    COINS,
    DEDUCTION_CHANNELS,
    DENOMINATIONS,
    OTHER_FIELDS,
    Category,
    Denomination,
    OtherField,
    get_denomination,
)
from .modes import set_mode
from .persistence import DrawerSnapshotStore
from .session import DrawerSession, EditResult
from .state import AdjustmentEntry, AdjustmentRangeError, DrawerState, InputMode, UnknownFieldError
from .totals import DrawerTotals, compute_totals
from .validation import validate_all, validate_field
from .views import BreakdownView, SummaryView, build_breakdown_view, build_summary_view, plan_envelope

__all__ = [
    "BILLS",
    "COINS",
    "DEDUCTION_CHANNELS",
    "DENOMINATIONS",
    "OTHER_FIELDS",
    "AdjustmentEntry",
    "AdjustmentRangeError",
    "Allocation",
    "BreakdownView",
    "Category",
    "Denomination",
    "DrawerSession",
    "DrawerSnapshotStore",
    "DrawerState",
    "DrawerTotals",
    "EditResult",
    "InputMode",
    "OtherField",
    "SummaryView",
    "UnknownFieldError",
    "allocate",
    "available_counts",
    "build_breakdown_view",
    "build_summary_view",
    "compute_totals",
    "get_denomination",
    "plan_envelope",
    "set_mode",
    "validate_all",
    "validate_field",
]
