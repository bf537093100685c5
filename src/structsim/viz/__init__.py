"""
Visualization utilities.

- Snapshot frames (container, particles, tints)
- Meter history plots
"""

from structsim.viz.canvas import plot_snapshot, particle_colors
from structsim.viz.meters import plot_meter_history, plot_activity, save_figure

__all__ = [
    "plot_snapshot",
    "particle_colors",
    "plot_meter_history",
    "plot_activity",
    "save_figure",
]
