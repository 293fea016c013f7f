#!/usr/bin/env python3
"""
Shift Report Export

Writes the end-of-shift summary and envelope breakdown as a YAML document,
one file per shift, for filing alongside the envelope.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.currency import DEFAULT_CURRENCY_SYMBOL, format_amount
from .totals import DrawerTotals
from .views import BreakdownView, SummaryView

logger = logging.getLogger(__name__)


def build_report(
    summary: SummaryView,
    totals: DrawerTotals,
    breakdown: BreakdownView,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> dict[str, Any]:
    """Assemble the report as plain data (strings and ints only)."""
    report: dict[str, Any] = {
        "operator": summary.operator_name,
        "date": summary.shift_date.strftime("%d/%m/%Y"),
        "totals": totals.formatted(symbol),
        "adjustments": [{"label": line.label, "amount": format_amount(line.amount, symbol)} for line in summary.adjustments],
        "channels": {line.label: format_amount(line.amount, symbol) for line in summary.channels},
        "safe_box": format_amount(summary.safe_box, symbol),
        "remaining": {line.label: line.count for line in summary.remaining_bills + summary.remaining_coins},
    }

    if breakdown.has_cash:
        report["envelope"] = {
            "put": {line.label: line.count for line in breakdown.put},
            "put_total": format_amount(breakdown.put_total, symbol),
            "keep_total": format_amount(breakdown.keep_total, symbol),
        }
        if breakdown.shortfall:
            report["envelope"]["shortfall"] = format_amount(breakdown.shortfall, symbol)

    return report


def default_report_path(reports_dir: Path, summary: SummaryView) -> Path:
    """Report file name for a shift: shift_YYYY-MM-DD.yaml."""
    return reports_dir / f"shift_{summary.shift_date.isoformat()}.yaml"


def write_report(path: Path, report: dict[str, Any]) -> None:
    """Write a report dictionary as YAML, keeping key order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(report, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    logger.info(f"Wrote shift report to {path}")
