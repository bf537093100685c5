"""
Meter history plots: stress and stagnation over time.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from structsim.analysis.display import STAGNATION_DISPLAY_THRESHOLD, STRESS_CRACK_THRESHOLD
from structsim.viz import theme

if TYPE_CHECKING:
    from structsim.analysis.metrics import MeterHistory


def plot_meter_history(
    history: "MeterHistory",
    title: str = "Health Meters",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 4),
    show_thresholds: bool = True,
) -> tuple[Figure, Axes]:
    """
    Plot stress and stagnation against tick.

    Args:
        history: Recorded meter values
        title: Plot title
        ax: Existing axes (creates new if None)
        show_thresholds: Draw the display thresholds as dashed lines

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    data = history.as_arrays()
    ax.plot(data["ticks"], data["stress"], color=theme.STRESS_COLOR, linewidth=2, label="Stress")
    ax.plot(data["ticks"], data["stagnation"], color=theme.STAGNATION_COLOR, linewidth=2, label="Stagnation")

    if show_thresholds:
        ax.axhline(y=STRESS_CRACK_THRESHOLD, color=theme.STRESS_COLOR, linestyle="--", alpha=0.5)
        ax.axhline(y=STAGNATION_DISPLAY_THRESHOLD, color=theme.STAGNATION_COLOR, linestyle="--", alpha=0.5)

    ax.set_ylim(-2, 102)
    ax.set_xlabel("Tick")
    ax.set_ylabel("Meter (%)")
    ax.set_title(title)
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_activity(
    history: "MeterHistory",
    title: str = "Activity",
    figsize: tuple[float, float] = (10, 6),
) -> Figure:
    """Two panels: average speed and collisions per tick."""
    fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)
    data = history.as_arrays()

    axes[0].plot(data["ticks"], data["average_speed"], linewidth=1.5)
    axes[0].set_ylabel("Average speed")
    axes[0].grid(True, alpha=0.3)

    axes[1].bar(data["ticks"], data["collisions"], width=1.0, color=theme.STRESS_COLOR)
    axes[1].set_ylabel("Collisions")
    axes[1].set_xlabel("Tick")
    axes[1].grid(True, alpha=0.3)

    if len(data["collisions"]):
        axes[1].set_ylim(0, max(1, int(np.max(data["collisions"]))) + 1)

    fig.suptitle(title)
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
