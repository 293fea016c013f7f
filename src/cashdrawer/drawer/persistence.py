#!/usr/bin/env python3
"""
Drawer Snapshot Store

Persists the drawer state between CLI invocations as a single JSON file.
A snapshot is only good for a limited time (one hour by default): an
expired snapshot is deleted as a whole on the next load, so a new shift
never starts from a previous shift's counts.

The shift date is not stored; every restore starts on today's date.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.json_utils import read_json, write_json
from .state import DEFAULT_MAX_ADJUSTMENTS, DrawerState, InputMode

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1
DEFAULT_TTL_SECONDS = 3600


def state_to_dict(state: DrawerState, saved_at: datetime) -> dict[str, Any]:
    """Serialize the persistent part of a drawer state."""
    return {
        "version": SNAPSHOT_VERSION,
        "saved_at": saved_at.timestamp(),
        "mode": state.mode.value,
        "operator_name": state.operator_name,
        "values": {field_id: value for field_id, value in state.values.items() if value},
        "adjustment_count": state.adjustment_count,
        "adjustments": [{"label": entry.label, "amount": entry.amount} for entry in state.adjustments],
    }


def state_from_dict(data: dict[str, Any], max_adjustments: int = DEFAULT_MAX_ADJUSTMENTS) -> DrawerState:
    """
    Rebuild a drawer state from a snapshot dictionary.

    Unknown field ids are dropped and the adjustment count is clamped to
    1..max_adjustments, so a snapshot written under another configuration
    still loads.
    """
    state = DrawerState(max_adjustments=max_adjustments)
    state.mode = InputMode(data.get("mode", InputMode.AMOUNT.value))
    state.operator_name = str(data.get("operator_name", ""))

    for field_id, value in (data.get("values") or {}).items():
        try:
            state.set_value(field_id, str(value))
        except ValueError:
            logger.warning(f"Dropping unknown field from snapshot: {field_id}")

    count = int(data.get("adjustment_count", 1))
    state.resize_adjustments(min(max(count, 1), max_adjustments))
    for index, entry in enumerate(data.get("adjustments") or [], start=1):
        if index > state.adjustment_count:
            break
        state.set_adjustment(index, amount=str(entry.get("amount", "")), label=str(entry.get("label", "")))

    return state


class DrawerSnapshotStore:
    """
    DataStore for the persisted drawer snapshot.

    Manages one JSON file; `load` enforces the freshness window.
    """

    def __init__(self, snapshot_file: Path, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        """
        Initialize snapshot store.

        Args:
            snapshot_file: JSON file holding the snapshot
            ttl_seconds: Seconds after the last save before the snapshot expires
        """
        self.snapshot_file = snapshot_file
        self.ttl_seconds = ttl_seconds

    def exists(self) -> bool:
        """Check if a snapshot file exists (fresh or not)."""
        return self.snapshot_file.exists()

    def save(self, state: DrawerState, now: datetime | None = None) -> None:
        """Write the state as the current snapshot."""
        saved_at = now or datetime.now()
        write_json(self.snapshot_file, state_to_dict(state, saved_at))
        logger.debug(f"Saved drawer snapshot to {self.snapshot_file}")

    def load(self, max_adjustments: int = DEFAULT_MAX_ADJUSTMENTS, now: datetime | None = None) -> DrawerState | None:
        """
        Restore the state from the snapshot if it is still fresh.

        Expired or unreadable snapshots are deleted and None is returned.

        Args:
            max_adjustments: Upper bound for the restored adjustment list
            now: Reference time for the freshness check (default: now)

        Returns:
            Restored DrawerState, or None when there is nothing to restore
        """
        if not self.exists():
            return None

        try:
            data = read_json(self.snapshot_file)
            saved_at = datetime.fromtimestamp(float(data["saved_at"]))
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Discarding unreadable snapshot {self.snapshot_file}: {e}")
            self.clear()
            return None

        age = ((now or datetime.now()) - saved_at).total_seconds()
        if age > self.ttl_seconds:
            logger.info(f"Snapshot expired ({int(age)}s old), starting fresh")
            self.clear()
            return None

        try:
            state = state_from_dict(data, max_adjustments)
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.warning(f"Discarding malformed snapshot {self.snapshot_file}: {e}")
            self.clear()
            return None

        logger.debug(f"Restored drawer snapshot saved {int(age)}s ago")
        return state

    def clear(self) -> None:
        """Delete the snapshot file."""
        self.snapshot_file.unlink(missing_ok=True)
