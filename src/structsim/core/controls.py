"""
Control inputs: the two bounded scalars mutated by the UI.

- innovation ∈ [0, 100]: drives jitter and effective speed
- discipline ∈ [0, 100]: drives attraction and container tightness

Out-of-range values are clamped, never rejected. Discipline stays at 0 and
ignores writes until the level gate unlocks it.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

INPUT_MIN = 0.0
INPUT_MAX = 100.0


def clamp_input(value: float, current: float) -> float:
    """
    Clamp a requested control value to [INPUT_MIN, INPUT_MAX].

    NaN requests are dropped in favor of the current value.
    """
    value = float(value)
    if math.isnan(value):
        logger.warning("Ignoring NaN control input; keeping %.2f", current)
        return current
    clamped = min(INPUT_MAX, max(INPUT_MIN, value))
    if clamped != value:
        logger.debug("Control input %r clamped to %.2f", value, clamped)
    return clamped


@dataclass
class ControlInputs:
    """Current values of the control surface."""

    innovation: float = 50.0
    discipline: float = 0.0
    discipline_locked: bool = field(default=True)

    def __post_init__(self):
        self.innovation = clamp_input(self.innovation, INPUT_MIN)
        self.discipline = clamp_input(self.discipline, INPUT_MIN)

    def set_innovation(self, value: float) -> float:
        self.innovation = clamp_input(value, self.innovation)
        return self.innovation

    def set_discipline(self, value: float) -> float:
        """Set discipline; ignored while the input is locked."""
        if self.discipline_locked:
            logger.debug("Discipline is locked; ignoring %r", value)
            return self.discipline
        self.discipline = clamp_input(value, self.discipline)
        return self.discipline

    def unlock_discipline(self, default: float):
        """Unlock discipline and give it a non-zero starting value."""
        self.discipline_locked = False
        self.discipline = clamp_input(default, self.discipline)

    def apply(self, innovation: float, discipline: float):
        """Set both inputs together."""
        self.set_innovation(innovation)
        self.set_discipline(discipline)
