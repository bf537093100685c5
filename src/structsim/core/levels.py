"""
Level gate: discrete progression that decides which mechanics are live.

    1 "The Void"       energy only
    2 "The Container"  discipline, attraction, containment
    3 "The Organism"   health tracking (stress, stagnation)
    4 "The Architect"  protocol presets

Capabilities are derived in ONE place (`derive_capabilities`) and consumed
by both the integrator and the boundary resolver.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 4

LEVEL_TITLES = {
    1: "The Void",
    2: "The Container",
    3: "The Organism",
    4: "The Architect",
}

# Inputs and panels available at each level
LEVEL_UNLOCKS = {
    1: frozenset({"innovation"}),
    2: frozenset({"innovation", "discipline"}),
    3: frozenset({"innovation", "discipline", "health"}),
    4: frozenset({"innovation", "discipline", "health", "protocols"}),
}


@dataclass(frozen=True)
class Protocol:
    """A named (innovation, discipline) preset."""

    name: str
    title: str
    innovation: float
    discipline: float


PROTOCOLS = {
    "focused": Protocol("focused", "Deep Work Sprint", innovation=30.0, discipline=90.0),
    "exploratory": Protocol("exploratory", "Brainstorm", innovation=90.0, discipline=20.0),
}


@dataclass(frozen=True)
class Capabilities:
    """Boolean capability flags for one tick."""

    gravity_enabled: bool
    containment_enabled: bool
    health_tracking_enabled: bool
    protocols_enabled: bool


def derive_capabilities(
    level: int,
    discipline: float,
    containment_threshold: float = 15.0,
) -> Capabilities:
    """
    Pure derivation of capability flags from level and discipline.

    Containment needs discipline above `containment_threshold`; below it the
    container is drawn but open, and particles drift in the void.
    """
    return Capabilities(
        gravity_enabled=level >= 2,
        containment_enabled=level >= 2 and discipline > containment_threshold,
        health_tracking_enabled=level >= 3,
        protocols_enabled=level >= 4,
    )


def unlocked_inputs(level: int) -> frozenset[str]:
    """Names of the controls and panels available at `level`."""
    return LEVEL_UNLOCKS[level]


class LevelGate:
    """
    Monotonic level state.

    Only `advance()` changes the level: by exactly one, never past 4.
    Entry actions (discipline default, meter reset) are run by the owner
    of the gate, which inspects the return value.
    """

    def __init__(self, level: int = MIN_LEVEL):
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ValueError(f"level must be in [{MIN_LEVEL}, {MAX_LEVEL}], got {level}")
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    @property
    def title(self) -> str:
        return LEVEL_TITLES[self._level]

    @property
    def is_terminal(self) -> bool:
        return self._level >= MAX_LEVEL

    @property
    def unlocked(self) -> frozenset[str]:
        return unlocked_inputs(self._level)

    def advance(self) -> bool:
        """Move to the next level. Returns False (no-op) at the last level."""
        if self.is_terminal:
            logger.debug("Level gate already at %d; advance ignored", self._level)
            return False
        self._level += 1
        logger.info("Advanced to level %d (%s)", self._level, self.title)
        return True

    def capabilities(self, discipline: float, containment_threshold: float = 15.0) -> Capabilities:
        return derive_capabilities(self._level, discipline, containment_threshold)
