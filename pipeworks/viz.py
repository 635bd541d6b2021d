"""
Static preview of reconstructed trails.

Draws each pipe as a 3D polyline in its own color. Uses the Figure API
directly, so no GUI backend is needed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  registers the 3d projection

from pipeworks.simulation import RenderablePipe

logger = logging.getLogger(__name__)

BACKGROUND = "#1A1A2E"


def plot_trails(
    pipes: Sequence[RenderablePipe],
    output_path: Optional[Union[str, Path]] = None,
    title: str = "Pipe trails",
    dpi: int = 150,
) -> Figure:
    """
    Plot pipe trails.

    Args:
        pipes: Pipes to draw
        output_path: If given, the figure is saved there
        title: Figure title
        dpi: Resolution of the saved image

    Returns:
        The matplotlib Figure
    """
    fig = Figure(figsize=(8, 8), facecolor=BACKGROUND)
    ax = fig.add_subplot(projection="3d")
    ax.set_facecolor(BACKGROUND)

    for index, pipe in enumerate(pipes):
        points = np.array([p.as_tuple() for p in pipe.trail])
        color = pipe.color.as_tuple()
        ax.plot(points[:, 0], points[:, 1], points[:, 2], color=color, linewidth=2.5)
        ax.scatter(*points[0], color=color, s=40, marker="o", label=f"pipe {index}")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title, color="white")

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
        logger.info(f"Saved trail preview to {output_path}")

    return fig
