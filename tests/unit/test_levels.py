"""Unit tests for the level gate and capability derivation."""

import pytest

from structsim.core.levels import (
    LevelGate,
    PROTOCOLS,
    LEVEL_TITLES,
    derive_capabilities,
    unlocked_inputs,
)


class TestDeriveCapabilities:
    """Tests for derive_capabilities."""

    def test_level_one_has_nothing(self):
        caps = derive_capabilities(1, discipline=100.0)
        assert not caps.gravity_enabled
        assert not caps.containment_enabled
        assert not caps.health_tracking_enabled
        assert not caps.protocols_enabled

    def test_level_two_gravity_and_containment(self):
        caps = derive_capabilities(2, discipline=40.0)
        assert caps.gravity_enabled
        assert caps.containment_enabled
        assert not caps.health_tracking_enabled

    def test_containment_needs_discipline_above_threshold(self):
        assert not derive_capabilities(2, discipline=15.0).containment_enabled
        assert derive_capabilities(2, discipline=15.5).containment_enabled
        # Gravity does not depend on discipline
        assert derive_capabilities(2, discipline=0.0).gravity_enabled

    def test_level_three_health(self):
        caps = derive_capabilities(3, discipline=0.0)
        assert caps.health_tracking_enabled
        assert not caps.protocols_enabled

    def test_level_four_protocols(self):
        caps = derive_capabilities(4, discipline=50.0)
        assert caps.protocols_enabled
        assert caps.health_tracking_enabled

    def test_custom_threshold(self):
        assert derive_capabilities(2, 20.0, containment_threshold=25.0).containment_enabled is False


class TestLevelGate:
    """Tests for LevelGate."""

    def test_starts_at_one(self):
        gate = LevelGate()
        assert gate.level == 1
        assert gate.title == "The Void"

    def test_advance_by_one(self):
        gate = LevelGate()
        assert gate.advance()
        assert gate.level == 2

    def test_advance_ten_times_stops_at_four(self):
        gate = LevelGate()
        seen = [gate.level]
        for _ in range(10):
            gate.advance()
            seen.append(gate.level)

        assert gate.level == 4
        assert seen == sorted(seen)
        assert max(seen) == 4

    def test_advance_at_terminal_is_noop(self):
        gate = LevelGate(level=4)
        assert gate.is_terminal
        assert gate.advance() is False
        assert gate.level == 4

    def test_invalid_initial_level(self):
        with pytest.raises(ValueError):
            LevelGate(level=0)
        with pytest.raises(ValueError):
            LevelGate(level=5)

    def test_unlocked_inputs(self):
        assert unlocked_inputs(1) == {"innovation"}
        assert unlocked_inputs(2) == {"innovation", "discipline"}
        assert "health" in LevelGate(level=3).unlocked
        assert "protocols" in LevelGate(level=4).unlocked

    def test_titles(self):
        assert set(LEVEL_TITLES) == {1, 2, 3, 4}


class TestProtocols:
    """Tests for protocol presets."""

    def test_focused(self):
        p = PROTOCOLS["focused"]
        assert (p.innovation, p.discipline) == (30.0, 90.0)

    def test_exploratory(self):
        p = PROTOCOLS["exploratory"]
        assert (p.innovation, p.discipline) == (90.0, 20.0)
