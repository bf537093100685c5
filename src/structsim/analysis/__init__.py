"""
Analysis layer: derived quantities for display and measurement.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- display: what a renderer should show for the current meters
- metrics: containment checks, meter histories, rate estimates
"""

from structsim.analysis.display import (
    STAGNATION_DISPLAY_THRESHOLD,
    STRESS_CRACK_THRESHOLD,
    is_stagnated,
    is_cracking,
    container_alpha,
    background_tints,
    MeterReading,
    MeterSampler,
)
from structsim.analysis.metrics import (
    radial_distances,
    containment_overshoot,
    MeterHistory,
    estimate_rate,
)

__all__ = [
    "STAGNATION_DISPLAY_THRESHOLD",
    "STRESS_CRACK_THRESHOLD",
    "is_stagnated",
    "is_cracking",
    "container_alpha",
    "background_tints",
    "MeterReading",
    "MeterSampler",
    "radial_distances",
    "containment_overshoot",
    "MeterHistory",
    "estimate_rate",
]
