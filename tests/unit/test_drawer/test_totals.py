#!/usr/bin/env python3
"""Tests for the totals calculator."""

import random

import pytest

from cashdrawer.drawer.state import DrawerState
from cashdrawer.drawer.totals import adjustments_total, compute_totals, field_amount


@pytest.mark.unit
class TestFieldAmount:
    """Test per-field money values."""

    def test_amount_mode_as_is(self, state):
        state.set_value("bill-20", "60")
        assert field_amount(state, "bill-20") == 60.0

    def test_count_mode_multiplies(self, count_state):
        count_state.set_value("bill-20", "3")
        count_state.set_value("wolt", "3")
        assert field_amount(count_state, "bill-20") == 60.0
        assert field_amount(count_state, "wolt") == 3.0

    def test_unparseable_is_zero(self, state):
        state.values["coin-2"] = "-"
        assert field_amount(state, "coin-2") == 0.0
        assert field_amount(state, "bill-5") == 0.0


@pytest.mark.unit
class TestComputeTotals:
    """Test the derived totals."""

    def test_empty_drawer(self, state):
        """Test an empty drawer is 1000 short of the float."""
        totals = compute_totals(state)

        assert totals.grand_total == 0.0
        assert totals.adjustments_total == 0.0
        assert totals.deductions_total == 1000.0
        assert totals.cash_total == -1000.0
        assert totals.cash_limited_total == -1000.0
        assert totals.income_limited_total == -1000.0

    def test_shift(self, shift_state):
        """Test every formula on a realistic shift."""
        totals = compute_totals(shift_state)

        assert totals.adjustments_total == pytest.approx(25.60)
        assert totals.grand_total == pytest.approx(2093.10)
        assert totals.deductions_total == pytest.approx(1475.60)
        assert totals.cash_total == pytest.approx(617.50)
        assert totals.cash_limited_total == pytest.approx(643.10)
        assert totals.income_limited_total == pytest.approx(943.10)

    def test_fixed_deduction_parameter(self, shift_state):
        totals = compute_totals(shift_state, fixed_deduction=500)
        assert totals.cash_total == pytest.approx(1117.50)

    def test_count_mode(self, count_state):
        """Test counts are converted to money for the grand total."""
        count_state.set_value("bill-100", "12")
        count_state.set_value("coin-0-5", "3")
        count_state.set_value("mypos", "100")

        totals = compute_totals(count_state)

        assert totals.grand_total == pytest.approx(1301.50)
        assert totals.cash_total == pytest.approx(201.50)
        assert totals.income_limited_total == pytest.approx(301.50)

    def test_hidden_adjustments_ignored(self, state):
        """Test entries hidden by a resize do not count."""
        state.resize_adjustments(2)
        state.set_adjustment(1, amount="10")
        state.set_adjustment(2, amount="15", label="ignored label")
        assert adjustments_total(state) == 25.0

        state.resize_adjustments(1)
        assert adjustments_total(state) == 10.0

    def test_formatted(self, shift_state):
        """Test display strings have 2 decimals and the suffix."""
        formatted = compute_totals(shift_state).formatted()

        assert formatted == {
            "grand_total": "2093.10€",
            "adjustments_total": "25.60€",
            "cash_total": "617.50€",
            "cash_limited_total": "643.10€",
            "income_limited_total": "943.10€",
        }

    def test_malformed_input_still_computes(self, state):
        """Test junk input never raises."""
        state.values["bill-50"] = "--"
        state.values["wolt"] = "."
        state.set_adjustment(1, amount="abc")

        assert compute_totals(state).cash_total == -1000.0


@pytest.mark.unit
def test_grand_total_independent_of_entry_order(shift_state):
    """Test the order fields are entered in does not change the grand total."""
    entries = list(shift_state.values.items())
    expected = compute_totals(shift_state).grand_total

    shuffled = entries[:]
    random.Random(7).shuffle(shuffled)
    other = DrawerState()
    for field_id, value in shuffled:
        other.set_value(field_id, value)
    other.resize_adjustments(2)
    other.set_adjustment(2, amount="5")
    other.set_adjustment(1, amount="20.60")

    assert compute_totals(other).grand_total == pytest.approx(expected)
