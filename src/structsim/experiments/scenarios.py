"""
Pre-built scenarios, one per stage of the level progression.

Each scenario builds a Simulation, drives it tick by tick while recording
a MeterHistory, and returns a ScenarioResult.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from structsim.core.engine import Simulation, SimulationConfig
from structsim.analysis.metrics import MeterHistory, containment_overshoot

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Outcome of a scenario run."""

    name: str
    sim: Simulation
    history: MeterHistory
    stats: dict = field(default_factory=dict)


def advance_to(sim: Simulation, level: int) -> Simulation:
    """Advance the level gate until it reaches `level`."""
    while sim.level < level:
        if not sim.advance_level():
            break
    return sim


def _drive(sim: Simulation, n_ticks: int, history: MeterHistory, on_tick=None):
    for _ in range(n_ticks):
        sim.step()
        history.record(sim)
        if on_tick is not None:
            on_tick(sim)


def run_void(
    n_ticks: int = 200,
    innovation: float = 50.0,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ScenarioResult:
    """Level 1: energy only, particles wrap around the canvas."""
    sim = Simulation(config=config or SimulationConfig(), rng=rng)
    sim.set_innovation(innovation)

    history = MeterHistory()
    _drive(sim, n_ticks, history)

    stats = {
        "mean_speed": float(np.mean(history.average_speed)) if len(history) else 0.0,
        "collisions": int(np.sum(history.collisions)),
    }
    logger.debug("void scenario: %s", stats)
    return ScenarioResult("void", sim, history, stats)


def run_container(
    n_ticks: int = 300,
    innovation: float = 50.0,
    discipline: float = 50.0,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ScenarioResult:
    """Level 2: the container closes; tracks the worst wall overshoot."""
    sim = advance_to(Simulation(config=config or SimulationConfig(), rng=rng), 2)
    sim.set_innovation(innovation)
    sim.set_discipline(discipline)

    overshoots = []
    history = MeterHistory()
    _drive(sim, n_ticks, history, on_tick=lambda s: overshoots.append(containment_overshoot(s.snapshot())))

    stats = {
        "max_overshoot": max(overshoots) if overshoots else 0.0,
        "collisions": int(np.sum(history.collisions)),
        "container_radius": sim.container_radius,
    }
    logger.debug("container scenario: %s", stats)
    return ScenarioResult("container", sim, history, stats)


def run_stress_recovery(
    n_ticks: int = 200,
    initial_stress: float = 50.0,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ScenarioResult:
    """
    Level 3 with the wall open (discipline below the containment
    threshold), so there are no collisions and stress can only recover.
    """
    sim = advance_to(Simulation(config=config or SimulationConfig(), rng=rng), 3)
    sim.set_discipline(10.0)
    sim.health.set(stress=initial_stress)

    history = MeterHistory()
    _drive(sim, n_ticks, history)

    stats = {
        "final_stress": sim.stress,
        "collisions": int(np.sum(history.collisions)),
    }
    return ScenarioResult("stress_recovery", sim, history, stats)


def run_stagnation(
    n_ticks: int = 250,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ScenarioResult:
    """
    Level 3 with every particle at rest and no energy input.

    With innovation 0 and discipline 0 nothing moves, so stagnation
    charges at the damage rate every tick until it saturates.
    """
    sim = advance_to(Simulation(config=config or SimulationConfig(), rng=rng), 3)
    sim.set_innovation(0.0)
    sim.set_discipline(0.0)
    sim.store.velocities.fill(0.0)

    history = MeterHistory()
    _drive(sim, n_ticks, history)

    stats = {
        "final_stagnation": sim.stagnation,
        "mean_speed": float(np.mean(history.average_speed)) if len(history) else 0.0,
    }
    return ScenarioResult("stagnation", sim, history, stats)


def run_protocol_pulse(
    cycles: int = 3,
    ticks_per_phase: int = 100,
    phases: tuple[str, ...] = ("focused", "exploratory"),
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ScenarioResult:
    """Level 4: alternate between protocols ("mastery is movement")."""
    sim = advance_to(Simulation(config=config or SimulationConfig(), rng=rng), 4)

    history = MeterHistory()
    applied = []
    for _ in range(cycles):
        for name in phases:
            sim.apply_protocol(name)
            applied.append((sim.tick_count, name))
            _drive(sim, ticks_per_phase, history)

    stats = {
        "applied": applied,
        "max_stress": max(history.stress) if len(history) else 0.0,
        "max_stagnation": max(history.stagnation) if len(history) else 0.0,
        "collisions": int(np.sum(history.collisions)),
    }
    return ScenarioResult("protocol_pulse", sim, history, stats)
