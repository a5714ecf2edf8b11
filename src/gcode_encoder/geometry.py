"""Preview geometry for extruding and travel moves.

Extruding moves are recorded as ribbons: two triangles spanning the move,
offset to either side of the travel line by ``RIBBON_HALF_WIDTH``. Each vertex
is an ``(x, y, z, side)`` quadruple where ``side`` is 0.0 on the left edge and
1.0 on the right edge. Travel moves are recorded as plain line segments
``(x0, y0, z0, x1, y1, z1)``.

Both buffers are flat lists of floats so they can be handed to a renderer as
vertex buffers directly. The ``as_*`` helpers reshape them with numpy.
"""

import math
from typing import List, Tuple

import numpy as np

RIBBON_HALF_WIDTH = 0.2

# Side flag per ribbon vertex; this order fixes the triangle winding
RIBBON_SIDES = (0.0, 0.0, 1.0, 0.0, 1.0, 1.0)

RIBBON_VERTEX_SIZE = 4
RIBBON_VERTICES_PER_MOVE = 6
TRAVEL_SEGMENT_SIZE = 6

Point = Tuple[float, float, float]


def ribbon_normal(dx: float, dy: float) -> Tuple[float, float]:
    """
    Planar normal of a move, scaled to the ribbon half-width.

    A move with no planar travel (pure Z, or no movement at all) has no
    direction, so its normal is the zero vector and its ribbon collapses to a
    line with zero area.

    Args:
        dx: X travel of the move
        dy: Y travel of the move

    Returns:
        (nx, ny) pointing to the left of the travel direction
    """
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return 0.0, 0.0
    return dy / length * RIBBON_HALF_WIDTH, -dx / length * RIBBON_HALF_WIDTH


def extrusion_ribbon(start: Point, end: Point) -> List[float]:
    """
    Ribbon vertices for an extruding move from ``start`` to ``end``.

    Args:
        start: Position before the move
        end: Position after the move

    Returns:
        24 floats: six (x, y, z, side) vertices forming two triangles
    """
    x0, y0, z0 = start
    x1, y1, z1 = end
    nx, ny = ribbon_normal(x1 - x0, y1 - y0)

    corners = (
        (x0 + nx, y0 + ny, z0),
        (x1 + nx, y1 + ny, z1),
        (x0 - nx, y0 - ny, z0),
        (x1 + nx, y1 + ny, z1),
        (x0 - nx, y0 - ny, z0),
        (x1 - nx, y1 - ny, z1),
    )
    vertices: List[float] = []
    for (x, y, z), side in zip(corners, RIBBON_SIDES):
        vertices.extend((x, y, z, side))
    return vertices


def travel_segment(start: Point, end: Point) -> List[float]:
    """Line segment record for a travel move."""
    return [*start, *end]


def as_ribbon_vertices(buffer: List[float]) -> np.ndarray:
    """View an extrusion buffer as an (n, 4) array of vertices."""
    return np.asarray(buffer, dtype=float).reshape(-1, RIBBON_VERTEX_SIZE)


def as_ribbon_triangles(buffer: List[float]) -> np.ndarray:
    """View an extrusion buffer as an (n, 3, 4) array of triangles."""
    return as_ribbon_vertices(buffer).reshape(-1, 3, RIBBON_VERTEX_SIZE)


def as_travel_segments(buffer: List[float]) -> np.ndarray:
    """View a travel buffer as an (n, 2, 3) array of segment endpoints."""
    return np.asarray(buffer, dtype=float).reshape(-1, 2, 3)
