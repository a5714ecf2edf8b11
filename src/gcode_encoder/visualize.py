"""Visualization utilities for encoded toolpaths.

This module renders the preview geometry recorded by a GCodeEncoder: extrusion
ribbons as filled triangles and travel moves as dashed line segments.
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection, PolyCollection
from mpl_toolkits.mplot3d.art3d import Line3DCollection, Poly3DCollection

from gcode_encoder.encoder import GCodeEncoder
from gcode_encoder.geometry import as_ribbon_triangles, as_travel_segments

RIBBON_COLOR = "tab:orange"
TRAVEL_COLOR = "tab:blue"


def _toolpath_arrays(encoder: GCodeEncoder):
    """Extract triangle and segment arrays, rejecting an empty toolpath."""
    triangles = as_ribbon_triangles(encoder.extrusion_lines)
    segments = as_travel_segments(encoder.travel_lines)
    if len(triangles) == 0 and len(segments) == 0:
        raise ValueError("Cannot plot empty toolpath")
    return triangles, segments


def _default_title(encoder: GCodeEncoder) -> str:
    unit = "mm³" if encoder.volumetric else "mm"
    return f"Toolpath Preview\nExtruded: {encoder.extrusion_amount:.3f} {unit}"


def plot_toolpath(
    encoder: GCodeEncoder,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a top-down (XY) view of an encoder's toolpath.

    Args:
        encoder: Encoder whose moves should be drawn
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If the encoder has recorded no moves

    Example:
        >>> from gcode_encoder import Position
        >>> encoder = GCodeEncoder()
        >>> encoder.move(Position(x=10, y=10, absolute=True))
        >>> encoder.move(Position(x=20, y=10, absolute=True), extrude=True)
        >>> plot_toolpath(encoder)
    """
    triangles, segments = _toolpath_arrays(encoder)

    fig, ax = plt.subplots(figsize=(8, 8))

    if len(triangles):
        ribbons = PolyCollection(
            triangles[:, :, :2],
            facecolors=RIBBON_COLOR,
            edgecolors="none",
            label="Extrusion",
        )
        ax.add_collection(ribbons)

    if len(segments):
        travel = LineCollection(
            segments[:, :, :2],
            colors=TRAVEL_COLOR,
            linestyles="dashed",
            linewidths=0.8,
            alpha=0.6,
            label="Travel",
        )
        ax.add_collection(travel)

    ax.autoscale_view()
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("X (mm)")
    ax.set_ylabel("Y (mm)")
    ax.set_title(title if title is not None else _default_title(encoder))
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_toolpath_3d(
    encoder: GCodeEncoder,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a 3D view of an encoder's toolpath.

    Args:
        encoder: Encoder whose moves should be drawn
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    triangles, segments = _toolpath_arrays(encoder)

    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(projection="3d")

    points = []
    if len(triangles):
        ax.add_collection3d(
            Poly3DCollection(triangles[:, :, :3], facecolors=RIBBON_COLOR, edgecolors="none")
        )
        points.append(triangles[:, :, :3].reshape(-1, 3))
    if len(segments):
        ax.add_collection3d(
            Line3DCollection(segments, colors=TRAVEL_COLOR, linestyles="dashed", linewidths=0.8)
        )
        points.append(segments.reshape(-1, 3))

    # 3D collections do not update data limits
    all_points = np.concatenate(points)
    lower = all_points.min(axis=0)
    upper = all_points.max(axis=0)
    ax.set_xlim(lower[0], upper[0] if upper[0] > lower[0] else lower[0] + 1)
    ax.set_ylim(lower[1], upper[1] if upper[1] > lower[1] else lower[1] + 1)
    ax.set_zlim(lower[2], upper[2] if upper[2] > lower[2] else lower[2] + 1)

    ax.set_xlabel("X (mm)")
    ax.set_ylabel("Y (mm)")
    ax.set_zlabel("Z (mm)")
    fig.suptitle(title if title is not None else _default_title(encoder), fontweight="bold")

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
