"""
ParticleStore: the fixed-size collection of particle kinematic states.

The store holds ONLY primitives:
- positions and velocities (2D, floating point)
- radii (fixed at creation)
- visual tags (palette index, opaque to the physics)

It does NOT know about levels, meters or the container.
"""

from dataclasses import dataclass
import numpy as np


@dataclass
class ParticleStoreConfig:
    """Configuration for the particle batch."""

    n_particles: int = 60
    spawn_width: float = 400.0  # x drawn from [0, spawn_width)
    spawn_height: float = 400.0  # y drawn from [0, spawn_height)
    initial_speed: float = 4.0  # velocity components drawn from [-speed/2, speed/2)
    min_radius: float = 4.0
    radius_span: float = 6.0  # radius drawn from [min_radius, min_radius + span)
    n_tags: int = 5  # Palette size seen by the renderer

    def __post_init__(self):
        if self.n_particles <= 0:
            raise ValueError(f"n_particles must be positive, got {self.n_particles}")
        if self.min_radius <= 0:
            raise ValueError(f"min_radius must be positive, got {self.min_radius}")


class ParticleStore:
    """
    Exclusively owned buffer of particle states.

    Created empty; `initialize()` fills the whole batch at once. Particles
    are never added or removed individually.
    """

    def __init__(self, config: ParticleStoreConfig, rng: np.random.Generator | None = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

        self.positions = np.zeros((0, 2), dtype=np.float64)
        self.velocities = np.zeros((0, 2), dtype=np.float64)
        self.radii = np.zeros(0, dtype=np.float64)
        self.tags = np.zeros(0, dtype=np.int64)

    def __len__(self) -> int:
        return self.positions.shape[0]

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def initialize(self):
        """(Re)create the full batch with randomized states."""
        cfg = self.config
        n = cfg.n_particles
        rng = self.rng

        spawn = np.array([cfg.spawn_width, cfg.spawn_height])
        self.positions = rng.random((n, 2)) * spawn
        self.velocities = (rng.random((n, 2)) - 0.5) * cfg.initial_speed
        self.radii = rng.random(n) * cfg.radius_span + cfg.min_radius
        self.tags = rng.integers(0, cfg.n_tags, size=n)

    def speeds(self) -> np.ndarray:
        """Per-particle speed as |vx| + |vy|."""
        return np.abs(self.velocities).sum(axis=1)

    def average_speed(self) -> float:
        """Mean of |vx| + |vy| over the batch (0 for an empty store)."""
        if self.is_empty:
            return 0.0
        return float(self.speeds().mean())
