"""
Cash Drawer Reconciler - End-of-Shift Cash Counting

Tallies the bills and coins in a register drawer together with the card and
delivery channels and the shift's expenses, derives the cash that belongs in
the envelope, and works out which pieces to pull.

Domain Packages:
- core: Currency helpers, configuration, JSON utilities
- drawer: Field store, totals, allocation engine, persistence
- cli: Command-line interface

Example Usage:
    from cashdrawer.drawer import DrawerState, compute_totals, allocate, available_counts

    state = DrawerState()
    state.set_value("bill-50", "1500")
    totals = compute_totals(state)
    allocation = allocate(totals.cash_total, available_counts(state))
"""

__version__ = "0.1.0"
__author__ = "Cash Drawer Contributors"

from .core.currency import format_amount, parse_amount, sanitize_numeric_input
from .drawer import DrawerSession, DrawerState, InputMode, allocate, compute_totals

__all__ = [
    "DrawerSession",
    "DrawerState",
    "InputMode",
    "allocate",
    "compute_totals",
    "format_amount",
    "parse_amount",
    "sanitize_numeric_input",
]
