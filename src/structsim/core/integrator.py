"""
Integrator: per-tick velocity and position update.

Each tick, for every particle:
    1. Jitter:     v += (U - 0.5) * innovation / jitter_divisor
    2. Attraction: v += (center - x) * discipline * gravity_strength
    3. Friction:   v *= friction
    4. Move:       x += v * speed_multiplier(innovation)

Attraction is a spring toward the center, not 1/r² gravity.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from structsim.core.particles import ParticleStore
    from structsim.core.controls import ControlInputs
    from structsim.core.levels import Capabilities


# Particles closer than this to the center get no attraction this tick
CENTER_EPSILON = 1e-9


@dataclass
class IntegratorConfig:
    """Physics constants for the integrator."""

    friction: float = 0.96  # Velocity damping per tick
    gravity_strength: float = 0.0006  # Spring constant per unit of discipline
    gravity_threshold: float = 5.0  # Discipline must exceed this to attract
    jitter_divisor: float = 150.0  # jitter amplitude = innovation / divisor
    base_speed: float = 0.5  # speed multiplier at innovation 0
    innovation_multiplier: float = 0.25  # speed gain per 10 points of innovation

    def __post_init__(self):
        if not 0.0 < self.friction <= 1.0:
            raise ValueError(f"friction must be in (0, 1], got {self.friction}")


def speed_multiplier(innovation: float, config: IntegratorConfig) -> float:
    """Effective speed factor applied to the position update."""
    return config.base_speed + innovation * config.innovation_multiplier / 10.0


def jitter_amplitude(innovation: float, config: IntegratorConfig) -> float:
    """Width of the uniform velocity perturbation added per axis."""
    return innovation / config.jitter_divisor


class Integrator:
    """Advances every particle by one fixed timestep."""

    def __init__(self, config: IntegratorConfig, rng: np.random.Generator | None = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

    def step(
        self,
        store: "ParticleStore",
        controls: "ControlInputs",
        caps: "Capabilities",
        center: np.ndarray,
    ) -> float:
        """
        Integrate one tick in place.

        Returns:
            Average speed (|vx| + |vy|) after the move, 0 for an empty store
        """
        n = len(store)
        if n == 0:
            return 0.0

        cfg = self.config
        innovation = controls.innovation
        discipline = controls.discipline
        vel = store.velocities
        pos = store.positions

        amplitude = jitter_amplitude(innovation, cfg)
        if amplitude > 0:
            vel += (self.rng.random((n, 2)) - 0.5) * amplitude

        if caps.gravity_enabled and discipline > cfg.gravity_threshold:
            offset = center - pos
            dist = np.hypot(offset[:, 0], offset[:, 1])
            pulled = dist > CENTER_EPSILON
            vel[pulled] += offset[pulled] * (discipline * cfg.gravity_strength)

        vel *= cfg.friction
        pos += vel * speed_multiplier(innovation, cfg)

        return store.average_speed()
