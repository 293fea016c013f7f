#!/usr/bin/env python3
"""
Integration tests for the cashdrawer CLI

Runs complete end-of-shift workflows through the click commands; the
snapshot carries the entries from one command to the next.
"""

import pytest
import yaml
from click.testing import CliRunner

from cashdrawer import __version__
from cashdrawer.cli.main import main
from cashdrawer.core.config import get_config


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, *args: str, input: str | None = None):
    return runner.invoke(main, list(args), input=input)


@pytest.mark.integration
@pytest.mark.cli
class TestEntryCommands:
    """Test entering values through the CLI."""

    def test_set_and_totals(self, runner):
        """Test values persist between commands and feed the totals."""
        assert _invoke(runner, "set", "bill-100", "1100").exit_code == 0
        assert _invoke(runner, "set", "coin-2", "4").exit_code == 0

        result = _invoke(runner, "totals")

        assert result.exit_code == 0
        assert "TAMEIO" in result.output
        assert "1104.00€" in result.output
        assert "104.00€" in result.output

    def test_set_sanitizes_input(self, runner):
        result = _invoke(runner, "set", "coin-0-5", "2,5")

        assert result.exit_code == 0
        assert "coin-0-5 = 2.5" in result.output

    def test_set_warns_on_invalid_amount(self, runner):
        result = _invoke(runner, "set", "bill-20", "30")

        assert result.exit_code == 0
        assert "bill-20 should be a multiple of the face value" in result.output

    def test_set_rejects_unknown_field(self, runner):
        result = _invoke(runner, "set", "bill-500", "500")
        assert result.exit_code != 0

    def test_mode_switch_converts_values(self, runner):
        _invoke(runner, "set", "bill-20", "60")

        result = _invoke(runner, "mode", "count")

        assert result.exit_code == 0
        assert "Switched to count mode." in result.output
        assert "bill-20 = 3" in result.output

        again = _invoke(runner, "mode", "count")
        assert "Already in count mode." in again.output

    def test_operator(self, runner):
        result = _invoke(runner, "operator", "  Maria ")

        assert result.exit_code == 0
        assert "Operator: Maria" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestAdjustmentCommands:
    """Test the adjustment (expense) commands."""

    def test_adjust_and_resize(self, runner):
        result = _invoke(runner, "adjust", "1", "--amount", "12,40", "--label", "Bakery")
        assert result.exit_code == 0
        assert "Exoda 1: Bakery 12.40" in result.output

        result = _invoke(runner, "adjustments", "2")
        assert result.exit_code == 0
        assert "Exoda 1: Bakery 12.40" in result.output
        assert "Exoda 2: - 0" in result.output

    def test_adjust_index_out_of_range(self, runner):
        result = _invoke(runner, "adjust", "2", "--amount", "5")
        assert result.exit_code == 1
        assert "between 1 and 1" in result.output

    def test_adjust_needs_an_option(self, runner):
        result = _invoke(runner, "adjust", "1")
        assert result.exit_code == 2

    def test_adjustments_count_out_of_range(self, runner):
        result = _invoke(runner, "adjustments", "0")
        assert result.exit_code == 1


@pytest.mark.integration
@pytest.mark.cli
class TestOutputCommands:
    """Test the envelope, summary and export commands."""

    def test_envelope_without_cash(self, runner):
        result = _invoke(runner, "envelope")

        assert result.exit_code == 0
        assert "No cash for the envelope." in result.output

    def test_envelope_breakdown(self, runner):
        _invoke(runner, "set", "bill-100", "1100")
        _invoke(runner, "set", "coin-2", "4")

        result = _invoke(runner, "envelope")

        assert result.exit_code == 0
        assert "PUT IN:" in result.output
        assert "= 104.00€" in result.output
        assert "REMAINING:" in result.output
        assert "= 1000.00€" in result.output
        assert "Missing" not in result.output

    def test_envelope_shortfall(self, runner):
        _invoke(runner, "set", "bill-100", "1100")
        _invoke(runner, "set", "kermata", "35")

        result = _invoke(runner, "envelope")

        assert result.exit_code == 0
        assert "Missing: 35.00€" in result.output

    def test_summary(self, runner):
        _invoke(runner, "operator", "Maria")
        _invoke(runner, "set", "bill-50", "1100")
        _invoke(runner, "set", "efood", "30")
        _invoke(runner, "set", "kermata", "80")

        result = _invoke(runner, "summary")

        assert result.exit_code == 0
        assert "Maria" in result.output
        assert "EFOOD: 30.00€" in result.output
        assert "Bills:" in result.output
        assert "Safe box: 80.00€" in result.output

    def test_export(self, runner, tmp_path):
        _invoke(runner, "set", "bill-100", "1200")
        output = tmp_path / "report.yaml"

        result = _invoke(runner, "export", "--output", str(output))

        assert result.exit_code == 0
        assert output.exists()
        with open(output, encoding="utf-8") as f:
            report = yaml.safe_load(f)
        assert report["totals"]["cash_total"] == "200.00€"
        assert report["envelope"]["put"] == {"100€": 2}

    def test_export_default_path(self, runner):
        result = _invoke(runner, "export")

        assert result.exit_code == 0
        reports = list(get_config().persistence.reports_dir.glob("shift_*.yaml"))
        assert len(reports) == 1


@pytest.mark.integration
@pytest.mark.cli
class TestResetCommand:
    """Test clearing the drawer."""

    def test_reset_cancelled(self, runner):
        _invoke(runner, "set", "bill-10", "50")

        result = _invoke(runner, "reset", input="n\n")

        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert get_config().persistence.snapshot_file.exists()

    def test_reset_confirmed(self, runner):
        _invoke(runner, "set", "bill-10", "50")

        result = _invoke(runner, "reset", "--yes")

        assert result.exit_code == 0
        assert "Drawer cleared." in result.output
        assert not get_config().persistence.snapshot_file.exists()

        totals = _invoke(runner, "totals")
        assert "-1000.00€" in totals.output


@pytest.mark.integration
@pytest.mark.cli
class TestInfoCommands:
    """Test version and config output."""

    def test_version(self, runner):
        result = _invoke(runner, "version")

        assert result.exit_code == 0
        assert f"Cash Drawer Reconciler v{__version__}" in result.output

    def test_config(self, runner):
        result = _invoke(runner, "config")

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Reconciliation:" in result.output
        assert "Fixed Deduction: 1000.0" in result.output
        assert "Snapshot Ttl Seconds: 3600" in result.output
        assert "Currency Symbol: €" in result.output
