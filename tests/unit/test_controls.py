"""Unit tests for ControlInputs."""

import math

import pytest

from structsim.core.controls import ControlInputs, clamp_input


class TestClampInput:
    """Tests for clamp_input."""

    def test_within_range(self):
        assert clamp_input(42.0, 0.0) == 42.0

    def test_clamps_high_and_low(self):
        assert clamp_input(150.0, 0.0) == 100.0
        assert clamp_input(-5.0, 50.0) == 0.0

    def test_infinity_clamps(self):
        assert clamp_input(math.inf, 10.0) == 100.0
        assert clamp_input(-math.inf, 10.0) == 0.0

    def test_nan_keeps_current(self):
        assert clamp_input(math.nan, 37.0) == 37.0


class TestControlInputs:
    """Tests for ControlInputs."""

    def test_defaults(self):
        controls = ControlInputs()
        assert controls.innovation == 50.0
        assert controls.discipline == 0.0
        assert controls.discipline_locked

    def test_set_innovation_clamps(self):
        controls = ControlInputs()
        assert controls.set_innovation(250) == 100.0
        assert controls.set_innovation(-1) == 0.0

    def test_locked_discipline_ignores_writes(self):
        controls = ControlInputs()
        assert controls.set_discipline(80) == 0.0
        assert controls.discipline == 0.0

    def test_unlock_assigns_default(self):
        controls = ControlInputs()
        controls.unlock_discipline(40.0)
        assert not controls.discipline_locked
        assert controls.discipline == 40.0

        assert controls.set_discipline(120) == 100.0

    def test_apply_sets_both(self):
        controls = ControlInputs()
        controls.unlock_discipline(40.0)
        controls.apply(30, 90)
        assert (controls.innovation, controls.discipline) == (30.0, 90.0)

    def test_constructor_clamps(self):
        controls = ControlInputs(innovation=500.0)
        assert controls.innovation == 100.0
