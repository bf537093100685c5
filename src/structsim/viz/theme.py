"""
Colors used by the renderer.

Tags stored on particles are indices into PARTICLE_PALETTE.
"""

PARTICLE_PALETTE = ("#58CC02", "#1CB0F6", "#FFC800", "#FF9600", "#CE82FF")

BACKGROUND = "#F0F0F0"
STAGNATED_PARTICLE = "#CCCCCC"
CONTAINER_BASE = "#E0E0E0"
CONTAINER_ACTIVE = "#1CB0F6"  # Discipline blue
CONTAINER_CRACKING = "#FF4B4B"  # Danger red

STRESS_COLOR = "#FF4B4B"
STAGNATION_COLOR = "#4B4B4B"

# RGB for background tints; alpha comes from analysis.display.background_tints
TINT_RGB = {
    "stress": (1.0, 75 / 255, 75 / 255),
    "stagnation": (100 / 255, 100 / 255, 100 / 255),
}


def particle_color(tag: int, stagnated: bool) -> str:
    """Fill color for a particle."""
    if stagnated:
        return STAGNATED_PARTICLE
    return PARTICLE_PALETTE[int(tag) % len(PARTICLE_PALETTE)]
