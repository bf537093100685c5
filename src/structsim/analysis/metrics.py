"""
Measurements over snapshots and meter histories.

Used to check containment, follow the meters over time, and recover the
effective charge/recovery rate of a meter from its history.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

if TYPE_CHECKING:
    from structsim.core.engine import Simulation, Snapshot


def radial_distances(snapshot: "Snapshot") -> np.ndarray:
    """Distance of every particle center from the container center."""
    cx, cy = snapshot.center
    return np.hypot(snapshot.positions[:, 0] - cx, snapshot.positions[:, 1] - cy)


def containment_overshoot(snapshot: "Snapshot") -> float:
    """
    Largest amount by which a particle edge sits outside the container.

    Zero or negative means every particle is fully inside.
    """
    if snapshot.n_particles == 0:
        return 0.0
    edges = radial_distances(snapshot) + snapshot.radii
    return float(edges.max() - snapshot.container_radius)


@dataclass
class MeterHistory:
    """Per-tick record of meter values and tick statistics."""

    ticks: list[int] = field(default_factory=list)
    stress: list[float] = field(default_factory=list)
    stagnation: list[float] = field(default_factory=list)
    collisions: list[int] = field(default_factory=list)
    average_speed: list[float] = field(default_factory=list)

    def record(self, sim: "Simulation"):
        self.ticks.append(sim.tick_count)
        self.stress.append(sim.stress)
        self.stagnation.append(sim.stagnation)
        self.collisions.append(sim.last_collisions)
        self.average_speed.append(sim.last_average_speed)

    def __len__(self) -> int:
        return len(self.ticks)

    def as_arrays(self) -> dict[str, np.ndarray]:
        return {
            "ticks": np.asarray(self.ticks),
            "stress": np.asarray(self.stress),
            "stagnation": np.asarray(self.stagnation),
            "collisions": np.asarray(self.collisions),
            "average_speed": np.asarray(self.average_speed),
        }


def estimate_rate(values, ticks=None) -> float:
    """
    Least-squares slope of a meter series (meter units per tick).

    Only the unclamped part of the series is fitted: samples sitting at
    0 or 100 are dropped, since the meter cannot move past them.
    """
    y = np.asarray(values, dtype=np.float64)
    x = np.arange(len(y), dtype=np.float64) if ticks is None else np.asarray(ticks, dtype=np.float64)

    free = (y > 0.0) & (y < 100.0)
    if np.count_nonzero(free) < 2:
        return 0.0

    result = stats.linregress(x[free], y[free])
    return float(result.slope)
