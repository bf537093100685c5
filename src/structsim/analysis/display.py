"""
Display state derived from meter values.

Pure functions of a Snapshot (or a meter value): the engine never calls
these. A renderer uses them to decide what to draw.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structsim.core.engine import Simulation, Snapshot


STAGNATION_DISPLAY_THRESHOLD = 70.0  # Particles turn grey above this
STRESS_CRACK_THRESHOLD = 80.0  # Container drawn dashed above this
TINT_THRESHOLD = 50.0  # Background tint appears above this
STRESS_TINT_DIVISOR = 600.0
STAGNATION_TINT_DIVISOR = 500.0


def is_stagnated(stagnation: float, level: int, threshold: float = STAGNATION_DISPLAY_THRESHOLD) -> bool:
    """True when particles should be drawn as stagnated."""
    return level >= 3 and stagnation > threshold


def is_cracking(stress: float, level: int, threshold: float = STRESS_CRACK_THRESHOLD) -> bool:
    """True when the container should be drawn as cracking."""
    return level >= 3 and stress > threshold


def container_alpha(discipline: float) -> float:
    """Opacity of the container ring; a ghost ring at low discipline."""
    return max(0.1, discipline / 100.0)


def background_tints(snapshot: "Snapshot") -> list[tuple[str, float]]:
    """
    Background overlays as (kind, alpha) pairs, drawn in order.

    Only shown once health tracking is active.
    """
    if snapshot.level < 3:
        return []
    tints = []
    if snapshot.stress > TINT_THRESHOLD:
        tints.append(("stress", snapshot.stress / STRESS_TINT_DIVISOR))
    if snapshot.stagnation > TINT_THRESHOLD:
        tints.append(("stagnation", snapshot.stagnation / STAGNATION_TINT_DIVISOR))
    return tints


@dataclass
class MeterReading:
    """Rounded meter values as shown in a HUD."""

    tick: int
    stress: int
    stagnation: int


class MeterSampler:
    """
    Reduced-rate view of the health meters for UI sync.

    Samples every `interval` ticks of the simulation. The engine keeps
    exact values every tick whatever the interval is.
    """

    def __init__(self, interval: int = 10):
        if interval < 1:
            raise ValueError(f"interval must be >= 1, got {interval}")
        self.interval = interval
        self.latest: MeterReading | None = None
        self._last_tick: int | None = None

    def observe(self, sim: "Simulation") -> MeterReading | None:
        """
        Refresh the reading if `interval` ticks passed since the last one.
        A tick count lower than the last sample (simulation reset) always
        resamples.

        Returns the new reading, or None when the cadence skipped this call.
        """
        tick = sim.tick_count
        if self._last_tick is not None and 0 <= tick - self._last_tick < self.interval:
            return None
        self._last_tick = tick
        self.latest = MeterReading(
            tick=tick,
            stress=round(sim.stress),
            stagnation=round(sim.stagnation),
        )
        return self.latest
