"""Tests for the grid arithmetic behind the numeric generators."""

import random
from decimal import Decimal

import pytest

from schemagen.generators import UnsatisfiableConstraintError
from schemagen.generators.numeric import (
    decimal_places,
    effective_bound,
    grid_step,
    grid_window,
    pick_on_grid,
    quantum_for,
    resolve_window,
)


class TestDecimalPlaces:
    def test_integers_and_whole_floats(self):
        assert decimal_places(100) == 0
        assert decimal_places(100.0) == 0
        assert decimal_places(None) == 0

    def test_fractional_values(self):
        assert decimal_places(99.49) == 2
        assert decimal_places(99.50) == 1
        assert decimal_places(1.3) == 1
        assert decimal_places(0.001) == 3


class TestEffectiveBound:
    """Draft-4 boolean and draft-6 numeric exclusivity."""

    def test_no_exclusive(self):
        assert effective_bound(4, None, lower=True) == (4, False)
        assert effective_bound(4, False, lower=True) == (4, False)

    def test_boolean_exclusive(self):
        assert effective_bound(4, True, lower=True) == (4, True)

    def test_boolean_exclusive_without_limit_is_ignored(self):
        assert effective_bound(None, True, lower=False) == (None, False)

    def test_numeric_exclusive_alone(self):
        assert effective_bound(None, 4, lower=True) == (4, True)

    def test_tighter_of_both_wins(self):
        assert effective_bound(3, 4, lower=True) == (4, True)
        assert effective_bound(5, 4, lower=True) == (5, False)
        assert effective_bound(10, 8, lower=False) == (8, True)
        assert effective_bound(7, 8, lower=False) == (7, False)


class TestResolveWindow:
    def test_defaults_fill_missing_bounds(self):
        assert resolve_window(None, None, -10, 10) == (-10, 10)
        assert resolve_window(3, None, -10, 10) == (3, 10)
        assert resolve_window(None, 3, -10, 10) == (-10, 3)

    def test_lone_bound_outside_defaults_keeps_span(self):
        assert resolve_window(50, None, -10, 10) == (50, 70)
        assert resolve_window(None, -50, -10, 10) == (-70, -50)


class TestGridWindow:
    def test_integer_grid(self):
        assert grid_window(4, 5, quantum_for(0)) == (4, 5)

    def test_exclusive_bounds_drop_endpoints(self):
        assert grid_window(4, 5, quantum_for(0), lower_exclusive=True) == (5, 5)
        assert grid_window(4, 5, quantum_for(0), upper_exclusive=True) == (4, 4)

    def test_non_integral_bounds_round_inward(self):
        assert grid_window(4.5, 7.5, quantum_for(0)) == (5, 7)

    def test_exclusive_off_grid_bound_keeps_nearest_point(self):
        assert grid_window(4.5, 7.5, quantum_for(0), lower_exclusive=True) == (5, 7)

    def test_decimal_grid(self):
        assert grid_window(99.49, 99.50, quantum_for(2)) == (9949, 9950)

    def test_empty_window_raises(self):
        with pytest.raises(UnsatisfiableConstraintError):
            grid_window(5, 5, quantum_for(0), lower_exclusive=True)


class TestGridStep:
    def test_unconstrained(self):
        assert grid_step(None, quantum_for(0)) is None
        assert grid_step(0, quantum_for(0)) is None

    def test_whole_units(self):
        assert grid_step(13, quantum_for(0)) == 13
        assert grid_step(1.3, quantum_for(2)) == 130

    def test_fractional_step_widens(self):
        assert grid_step(2.5, quantum_for(0)) == 5


class TestPickOnGrid:
    def test_uniform_without_step(self):
        rng = random.Random(0)
        values = {pick_on_grid(0, 3, None, rng) for _ in range(50)}
        assert values == {0, 1, 2, 3}

    def test_largest_multiple(self):
        assert pick_on_grid(60, 70, 13, random.Random(0)) == 65

    def test_negative_window(self):
        assert pick_on_grid(-20, -1, 7, random.Random(0)) == -7

    def test_no_multiple_returns_high(self):
        assert pick_on_grid(61, 64, 13, random.Random(0)) == 64


def test_quantum_for():
    assert quantum_for(0) == Decimal(1)
    assert quantum_for(2) == Decimal("0.01")
