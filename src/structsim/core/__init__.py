"""
Core engine primitives.

This layer knows NOTHING about colors, canvases or sampling cadence.
It only knows:
- Particles with position, velocity, radius and an opaque tag
- Two clamped control inputs (innovation, discipline)
- A monotonic level gate and the capabilities it grants
- Integration, boundary response and collision counting
- Two bounded health meters (stress, stagnation)
"""

from structsim.core.particles import ParticleStore, ParticleStoreConfig
from structsim.core.controls import ControlInputs, clamp_input
from structsim.core.levels import (
    LevelGate,
    Capabilities,
    Protocol,
    PROTOCOLS,
    LEVEL_TITLES,
    derive_capabilities,
    unlocked_inputs,
)
from structsim.core.integrator import Integrator, IntegratorConfig, speed_multiplier, jitter_amplitude
from structsim.core.boundary import BoundaryResolver, BoundaryConfig, container_radius
from structsim.core.health import HealthMeters, HealthConfig
from structsim.core.engine import Simulation, SimulationConfig, Snapshot

__all__ = [
    "ParticleStore",
    "ParticleStoreConfig",
    "ControlInputs",
    "clamp_input",
    "LevelGate",
    "Capabilities",
    "Protocol",
    "PROTOCOLS",
    "LEVEL_TITLES",
    "derive_capabilities",
    "unlocked_inputs",
    "Integrator",
    "IntegratorConfig",
    "speed_multiplier",
    "jitter_amplitude",
    "BoundaryResolver",
    "BoundaryConfig",
    "container_radius",
    "HealthMeters",
    "HealthConfig",
    "Simulation",
    "SimulationConfig",
    "Snapshot",
]
