"""
Health meters: stress and stagnation.

Two independent bounded accumulators in [0, 100]. Each tick a meter is
either charging (condition met, +damage_rate) or recovering
(-recovery_rate):

    stress:     charges when collisions > stress_threshold
    stagnation: charges when average speed < stagnation_threshold

The meters are exact every tick. How often a UI samples them is the
UI's business (see structsim.analysis.display.MeterSampler).
"""

from __future__ import annotations
from dataclasses import dataclass

METER_MIN = 0.0
METER_MAX = 100.0


@dataclass
class HealthConfig:
    """Thresholds and rates for the health meters."""

    stress_threshold: int = 5  # Collisions per tick that count as stressful
    stagnation_threshold: float = 0.8  # Average speed below this is stagnant
    damage_rate: float = 0.5  # Meter increase per bad tick
    recovery_rate: float = 0.3  # Meter decrease per good tick


def _clamp(value: float) -> float:
    return min(METER_MAX, max(METER_MIN, value))


class HealthMeters:
    """Stress and stagnation accumulators."""

    def __init__(self, config: HealthConfig | None = None):
        self.config = config if config is not None else HealthConfig()
        self.stress: float = 0.0
        self.stagnation: float = 0.0

    def update(self, collisions: int, average_speed: float):
        """Advance both meters by one tick."""
        cfg = self.config

        if collisions > cfg.stress_threshold:
            self.stress = _clamp(self.stress + cfg.damage_rate)
        else:
            self.stress = _clamp(self.stress - cfg.recovery_rate)

        if average_speed < cfg.stagnation_threshold:
            self.stagnation = _clamp(self.stagnation + cfg.damage_rate)
        else:
            self.stagnation = _clamp(self.stagnation - cfg.recovery_rate)

    def set(self, stress: float | None = None, stagnation: float | None = None):
        """Overwrite meter values (clamped). Used by scenarios and tests."""
        if stress is not None:
            self.stress = _clamp(float(stress))
        if stagnation is not None:
            self.stagnation = _clamp(float(stagnation))

    def reset(self):
        self.stress = 0.0
        self.stagnation = 0.0

    def as_dict(self) -> dict:
        return {"stress": self.stress, "stagnation": self.stagnation}
