"""
Boundary collision resolver.

Two regimes, selected by the containment capability:
- Containment: circular wall around the canvas center. Penetrating
  particles are snapped back onto the wall along the radial direction and
  their velocity is scaled by a negative restitution (inelastic bounce).
  Bounces faster than `impact_threshold` count as collisions.
- Void: toroidal wraparound with a margin, so the space has no edges.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from structsim.core.particles import ParticleStore
    from structsim.core.levels import Capabilities


@dataclass
class BoundaryConfig:
    """Container geometry and bounce constants."""

    width: float = 600.0  # Canvas width
    height: float = 400.0  # Canvas height
    base_radius: float = 110.0  # Container radius at discipline 100
    radius_scale: float = 0.5  # Extra radius per point of missing discipline
    containment_threshold: float = 15.0  # Discipline needed to close the wall
    restitution: float = -0.85  # Velocity factor on bounce (negative)
    impact_threshold: float = 2.0  # Post-bounce speed that counts as a collision
    wrap_margin: float = 20.0  # Off-canvas margin before wrapping

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas must be positive, got {self.width}x{self.height}")

    @property
    def center(self) -> np.ndarray:
        return np.array([self.width / 2.0, self.height / 2.0])


def container_radius(discipline: float, config: BoundaryConfig) -> float:
    """Container radius: higher discipline means a tighter wall."""
    return config.base_radius + (100.0 - discipline) * config.radius_scale


class BoundaryResolver:
    """Applies the wall or the wraparound after integration."""

    def __init__(self, config: BoundaryConfig):
        self.config = config

    def resolve(
        self,
        store: "ParticleStore",
        caps: "Capabilities",
        discipline: float,
    ) -> int:
        """
        Apply boundary handling in place.

        Returns:
            Number of collisions above the impact threshold this tick
        """
        if len(store) == 0:
            return 0
        if caps.containment_enabled:
            return self.contain(store, container_radius(discipline, self.config))
        self.wrap(store)
        return 0

    def contain(self, store: "ParticleStore", radius: float) -> int:
        """Snap penetrating particles back onto the wall and bounce them."""
        cfg = self.config
        center = cfg.center

        offset = store.positions - center
        dist = np.hypot(offset[:, 0], offset[:, 1])
        hit = dist + store.radii > radius
        if not hit.any():
            return 0

        # atan2 gives a defined direction (+x) even at the exact center
        angle = np.arctan2(offset[hit, 1], offset[hit, 0])
        reach = radius - store.radii[hit]
        store.positions[hit, 0] = center[0] + np.cos(angle) * reach
        store.positions[hit, 1] = center[1] + np.sin(angle) * reach

        store.velocities[hit] *= cfg.restitution

        impact = np.hypot(store.velocities[hit, 0], store.velocities[hit, 1])
        return int(np.count_nonzero(impact > cfg.impact_threshold))

    def wrap(self, store: "ParticleStore"):
        """Teleport particles that left the canvas (plus margin) to the far side."""
        cfg = self.config
        m = cfg.wrap_margin
        for axis, extent in ((0, cfg.width), (1, cfg.height)):
            coord = store.positions[:, axis]
            coord[coord < -m] = extent + m
            coord[coord > extent + m] = -m
