"""
Experiment harness: setup and run standard scenarios.

Pre-built scenarios for:
- The void (energy only, wraparound)
- The container (containment holds)
- Stress recovery
- Stagnation build-up
- Protocol pulsing
"""

from structsim.experiments.scenarios import (
    ScenarioResult,
    advance_to,
    run_void,
    run_container,
    run_stress_recovery,
    run_stagnation,
    run_protocol_pulse,
)

__all__ = [
    "ScenarioResult",
    "advance_to",
    "run_void",
    "run_container",
    "run_stress_recovery",
    "run_stagnation",
    "run_protocol_pulse",
]
