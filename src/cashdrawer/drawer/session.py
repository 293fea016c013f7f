#!/usr/bin/env python3
"""
Drawer Session

Adapter between an input surface (the CLI) and the engine. It owns one
DrawerState and its snapshot store and applies edits with an
"apply on settle" policy:

- field edits sanitize and validate immediately, then mark the totals and
  the snapshot as pending
- settle() performs the pending recompute and the pending save, once,
  however many edits came before it
- mode switches, adjustment resizes and resets settle right away

The engine functions stay synchronous and free of timers; coalescing
repeated edits is entirely this class's business.
"""

import logging
from dataclasses import dataclass

from ..core.config import Config
from .denominations import is_denomination_field
from .modes import set_mode
from .persistence import DrawerSnapshotStore
from .state import DrawerState, InputMode
from .totals import DrawerTotals, compute_totals
from .validation import validate_all, validate_field
from .views import BreakdownView, EnvelopePlan, SummaryView, build_breakdown_view, build_summary_view, plan_envelope

logger = logging.getLogger(__name__)


@dataclass
class EditResult:
    """Outcome of a single field edit."""

    field_id: str
    stored_value: str
    is_valid: bool


class DrawerSession:
    """
    One reconciliation session bound to a configuration.

    Use DrawerSession.restore() to pick up a fresh snapshot, or construct
    directly for an empty drawer.
    """

    def __init__(self, config: Config, state: DrawerState | None = None):
        """
        Initialize session.

        Args:
            config: Application configuration
            state: Existing state (default: empty drawer)
        """
        self.config = config
        self.store = DrawerSnapshotStore(config.persistence.snapshot_file, config.persistence.snapshot_ttl_seconds)
        self.state = state or DrawerState(max_adjustments=config.reconciliation.max_adjustments)
        self.invalid_fields: set[str] = validate_all(self.state, self.tolerance)
        self._totals: DrawerTotals | None = None
        self._recompute_pending = True
        self._save_pending = False

    @classmethod
    def restore(cls, config: Config) -> "DrawerSession":
        """Start a session from the persisted snapshot, if still fresh."""
        store = DrawerSnapshotStore(config.persistence.snapshot_file, config.persistence.snapshot_ttl_seconds)
        state = store.load(max_adjustments=config.reconciliation.max_adjustments)
        return cls(config, state)

    @property
    def tolerance(self) -> float:
        return self.config.reconciliation.tolerance

    @property
    def is_settled(self) -> bool:
        return not self._recompute_pending and not self._save_pending

    # Edits

    def enter(self, field_id: str, raw: str | None) -> EditResult:
        """Enter a value for a bill, coin or other field."""
        stored = self.state.set_value(field_id, raw)
        is_valid = validate_field(self.state, field_id, self.tolerance)
        if is_denomination_field(field_id):
            if is_valid:
                self.invalid_fields.discard(field_id)
            else:
                self.invalid_fields.add(field_id)
        self._mark_dirty()
        return EditResult(field_id=field_id, stored_value=stored, is_valid=is_valid)

    def enter_adjustment(self, index: int, amount: str | None = None, label: str | None = None) -> None:
        """Edit the amount and/or label of an adjustment entry."""
        self.state.set_adjustment(index, amount=amount, label=label)
        if amount is not None:
            self._mark_dirty()
        else:
            # Label-only edits do not move any total
            self._save_pending = True

    def set_operator(self, name: str) -> None:
        self.state.operator_name = name.strip()
        self._save_pending = True

    def resize_adjustments(self, count: int) -> None:
        """Change the number of adjustment entries and settle."""
        self.state.resize_adjustments(count)
        self._mark_dirty()
        self.settle()

    def switch_mode(self, target: InputMode) -> bool:
        """
        Switch between amount and count input, converting entered values.

        Re-validates every denomination field, recomputes and saves at once.

        Returns:
            True if the mode changed
        """
        changed = set_mode(self.state, target)
        if changed:
            self.invalid_fields = validate_all(self.state, self.tolerance)
            self._mark_dirty()
            self.settle()
        return changed

    def reset(self, confirm: bool = False) -> bool:
        """
        Clear every field and delete the snapshot.

        Nothing happens unless confirm is True; there is no undo.

        Returns:
            True if the drawer was cleared
        """
        if not confirm:
            logger.info("Reset not confirmed, drawer left untouched")
            return False

        self.state.clear()
        self.store.clear()
        self.invalid_fields = set()
        self._totals = None
        self._recompute_pending = True
        self._save_pending = False
        logger.info("Drawer reset")
        return True

    # Settling

    def _mark_dirty(self) -> None:
        self._recompute_pending = True
        self._save_pending = True

    def settle(self) -> None:
        """Run the pending recompute and save, if any."""
        if self._recompute_pending:
            self._totals = compute_totals(self.state, self.config.reconciliation.fixed_deduction)
            self._recompute_pending = False
        if self._save_pending:
            self.store.save(self.state)
            self._save_pending = False

    # Outputs

    @property
    def totals(self) -> DrawerTotals:
        """Current totals; recomputed first if edits are pending."""
        if self._recompute_pending or self._totals is None:
            self._totals = compute_totals(self.state, self.config.reconciliation.fixed_deduction)
            self._recompute_pending = False
        return self._totals

    def plan(self) -> EnvelopePlan:
        return plan_envelope(self.state, self.config.reconciliation.fixed_deduction, self.tolerance)

    def breakdown(self) -> BreakdownView:
        """Envelope breakdown for the current cash total."""
        return build_breakdown_view(self.plan(), self.config.reconciliation.currency_symbol)

    def summary(self) -> SummaryView:
        """End-of-shift summary for the current state."""
        return build_summary_view(self.state, self.plan(), self.config.reconciliation.currency_symbol)
