"""
Draw a simulation snapshot: background tints, container ring, particles.

The renderer reads a Snapshot only; it never touches the engine.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from structsim.core.levels import LEVEL_TITLES
from structsim.analysis.display import (
    is_stagnated,
    is_cracking,
    container_alpha,
    background_tints,
)
from structsim.viz import theme

if TYPE_CHECKING:
    from structsim.core.engine import Snapshot


def particle_colors(snapshot: "Snapshot") -> list[str]:
    """Fill color per particle, grey for everyone once stagnated."""
    stagnated = is_stagnated(snapshot.stagnation, snapshot.level)
    return [theme.particle_color(tag, stagnated) for tag in snapshot.tags]


def plot_snapshot(
    snapshot: "Snapshot",
    width: float = 600.0,
    height: float = 400.0,
    title: str | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (9, 6),
) -> tuple[Figure, Axes]:
    """
    Render one frame.

    Args:
        snapshot: State to draw
        width, height: Canvas size in simulation units
        title: Plot title (defaults to the level title)
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.set_facecolor(theme.BACKGROUND)

    for kind, alpha in background_tints(snapshot):
        ax.add_patch(Rectangle(
            (0, 0), width, height,
            facecolor=(*theme.TINT_RGB[kind], alpha),
            edgecolor="none", zorder=0,
        ))

    # Container (level 2+)
    if snapshot.level >= 2:
        ax.add_patch(Circle(
            snapshot.center, snapshot.container_radius,
            fill=False, linewidth=6, edgecolor=theme.CONTAINER_BASE, zorder=1,
        ))
        cracking = is_cracking(snapshot.stress, snapshot.level)
        ax.add_patch(Circle(
            snapshot.center, snapshot.container_radius,
            fill=False, linewidth=6, zorder=2,
            edgecolor=theme.CONTAINER_CRACKING if cracking else theme.CONTAINER_ACTIVE,
            linestyle=(0, (15, 10)) if cracking else "solid",
            alpha=container_alpha(snapshot.discipline),
        ))

    circles = [Circle((x, y), r) for (x, y), r in zip(snapshot.positions, snapshot.radii)]
    ax.add_collection(PatchCollection(
        circles, facecolors=particle_colors(snapshot), edgecolors="none", zorder=3,
    ))

    ax.set_xlim(0, width)
    # Screen coordinates: y grows downward
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    if title is None:
        title = f"Lvl {snapshot.level}: {LEVEL_TITLES[snapshot.level]}"
    ax.set_title(title)

    return fig, ax
