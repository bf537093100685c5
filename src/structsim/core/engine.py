"""
Simulation: one tick of the structure model.

Per tick:
    level gate + controls → Integrator (moves particles)
                          → BoundaryResolver (wall or wraparound, collisions)
                          → HealthMeters (stress, stagnation; level 3+)

Single-threaded by contract: `step()` and the setters are never called
concurrently. Pausing freezes everything; resuming continues from the
frozen state with no catch-up.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from structsim.core.particles import ParticleStore, ParticleStoreConfig
from structsim.core.controls import ControlInputs
from structsim.core.levels import LevelGate, Capabilities, PROTOCOLS
from structsim.core.integrator import Integrator, IntegratorConfig
from structsim.core.boundary import BoundaryResolver, BoundaryConfig, container_radius
from structsim.core.health import HealthMeters, HealthConfig

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Full configuration for a simulation."""

    particles: ParticleStoreConfig = field(default_factory=ParticleStoreConfig)
    integrator: IntegratorConfig = field(default_factory=IntegratorConfig)
    boundary: BoundaryConfig = field(default_factory=BoundaryConfig)
    health: HealthConfig = field(default_factory=HealthConfig)

    initial_innovation: float = 50.0
    level2_discipline: float = 40.0  # Discipline assigned when level 2 unlocks it


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the simulation for renderers and UIs."""

    tick: int
    level: int
    innovation: float
    discipline: float
    positions: np.ndarray
    velocities: np.ndarray
    radii: np.ndarray
    tags: np.ndarray
    stress: float
    stagnation: float
    container_radius: float
    center: tuple[float, float]
    capabilities: Capabilities
    collisions: int

    @property
    def n_particles(self) -> int:
        return self.positions.shape[0]


@dataclass
class Simulation:
    """
    The structure simulation engine.

    Owns the particle store, control inputs, level gate and health meters.
    A host driver calls `tick()` (or `step()`) once per frame.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    rng: np.random.Generator | None = None
    initialize: bool = True  # Fill the particle store on construction

    # Simulation state
    tick_count: int = field(default=0, init=False)
    is_running: bool = field(default=True, init=False)
    last_collisions: int = field(default=0, init=False)
    last_average_speed: float = field(default=0.0, init=False)

    def __post_init__(self):
        if self.rng is None:
            self.rng = np.random.default_rng()

        cfg = self.config
        self.store = ParticleStore(cfg.particles, rng=self.rng)
        self.controls = ControlInputs(innovation=cfg.initial_innovation)
        self.gate = LevelGate()
        self.integrator = Integrator(cfg.integrator, rng=self.rng)
        self.boundary = BoundaryResolver(cfg.boundary)
        self.health = HealthMeters(cfg.health)

        if self.initialize:
            self.store.initialize()

    # ═══════════════════════════════════════════════════════════════
    # DERIVED STATE
    # ═══════════════════════════════════════════════════════════════

    @property
    def level(self) -> int:
        return self.gate.level

    @property
    def innovation(self) -> float:
        return self.controls.innovation

    @property
    def discipline(self) -> float:
        return self.controls.discipline

    @property
    def stress(self) -> float:
        return self.health.stress

    @property
    def stagnation(self) -> float:
        return self.health.stagnation

    @property
    def center(self) -> np.ndarray:
        return self.config.boundary.center

    @property
    def container_radius(self) -> float:
        return container_radius(self.controls.discipline, self.config.boundary)

    @property
    def capabilities(self) -> Capabilities:
        return self.gate.capabilities(
            self.controls.discipline,
            self.config.boundary.containment_threshold,
        )

    # ═══════════════════════════════════════════════════════════════
    # TICK
    # ═══════════════════════════════════════════════════════════════

    def step(self):
        """Advance by exactly one fixed timestep. No-op on an empty store."""
        if self.store.is_empty:
            return

        caps = self.capabilities
        avg_speed = self.integrator.step(self.store, self.controls, caps, self.center)
        collisions = self.boundary.resolve(self.store, caps, self.controls.discipline)

        if caps.health_tracking_enabled:
            self.health.update(collisions, avg_speed)

        self.last_collisions = collisions
        self.last_average_speed = avg_speed
        self.tick_count += 1

    def tick(self) -> bool:
        """Host-driver entry point: step unless paused. Returns True if stepped."""
        if not self.is_running:
            return False
        self.step()
        return True

    def run(self, n_ticks: int) -> dict:
        """
        Drive `n_ticks` frames through `tick()`.

        Returns:
            Statistics dictionary
        """
        steps = 0
        collisions = 0
        speeds = []
        for _ in range(n_ticks):
            if self.tick() and not self.store.is_empty:
                steps += 1
                collisions += self.last_collisions
                speeds.append(self.last_average_speed)

        stats = {
            "n_ticks": n_ticks,
            "steps": steps,
            "collisions": collisions,
            "mean_speed": float(np.mean(speeds)) if speeds else 0.0,
            "stress": self.health.stress,
            "stagnation": self.health.stagnation,
        }
        logger.debug("Run finished: %s", stats)
        return stats

    def pause(self):
        self.is_running = False

    def resume(self):
        self.is_running = True

    def toggle_running(self) -> bool:
        self.is_running = not self.is_running
        return self.is_running

    # ═══════════════════════════════════════════════════════════════
    # COMMANDS
    # ═══════════════════════════════════════════════════════════════

    def advance_level(self) -> bool:
        """
        Move the level gate forward by one and run its entry action.

        - level 2: discipline unlocked with a non-zero default
        - level 3: both health meters reset to 0
        - level 4: protocols become available

        Returns False (and changes nothing) at level 4.
        """
        if not self.gate.advance():
            return False

        level = self.gate.level
        if level == 2:
            self.controls.unlock_discipline(self.config.level2_discipline)
        elif level == 3:
            self.health.reset()
        return True

    def reset_simulation(self):
        """Re-randomize every particle and zero the meters. Level is kept."""
        self.store.initialize()
        self.health.reset()
        self.tick_count = 0
        self.last_collisions = 0
        self.last_average_speed = 0.0
        logger.info("Simulation reset (%d particles, level %d)", len(self.store), self.level)

    def set_innovation(self, value: float) -> float:
        return self.controls.set_innovation(value)

    def set_discipline(self, value: float) -> float:
        return self.controls.set_discipline(value)

    def apply_protocol(self, name: str) -> bool:
        """
        Apply a named (innovation, discipline) preset in one call.

        Raises:
            ValueError: unknown protocol name

        Returns:
            False if protocols are still locked (level < 4)
        """
        if name not in PROTOCOLS:
            raise ValueError(f"Unknown protocol: {name}")
        if not self.capabilities.protocols_enabled:
            logger.warning("Protocol %r requested at level %d; protocols unlock at level 4", name, self.level)
            return False

        protocol = PROTOCOLS[name]
        self.controls.apply(protocol.innovation, protocol.discipline)
        logger.info(
            "Applied protocol %r (innovation=%.0f, discipline=%.0f)",
            name, self.controls.innovation, self.controls.discipline,
        )
        return True

    # ═══════════════════════════════════════════════════════════════
    # OUTPUT
    # ═══════════════════════════════════════════════════════════════

    def snapshot(self) -> Snapshot:
        """Copy of the state a renderer needs."""
        cx, cy = self.center
        return Snapshot(
            tick=self.tick_count,
            level=self.level,
            innovation=self.controls.innovation,
            discipline=self.controls.discipline,
            positions=self.store.positions.copy(),
            velocities=self.store.velocities.copy(),
            radii=self.store.radii.copy(),
            tags=self.store.tags.copy(),
            stress=self.health.stress,
            stagnation=self.health.stagnation,
            container_radius=self.container_radius,
            center=(float(cx), float(cy)),
            capabilities=self.capabilities,
            collisions=self.last_collisions,
        )
