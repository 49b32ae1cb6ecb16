from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, TypeVar, TYPE_CHECKING

import numpy as np
from shapely.geometry import Point as ShapelyPoint, Polygon as ShapelyPolygon

from dialuxadapter.config import DISTANCE_TOLERANCE
from dialuxadapter.model.geometry_primitives import Cartesian, Line, Point, Polyline, Vector

if TYPE_CHECKING:
    from dialuxadapter.model.environment import Panel

Orientable = TypeVar("Orientable", Point, Polyline)


def orient(geometry: Orientable, from_cs: Cartesian, to_cs: Cartesian) -> Orientable:
    """
    Re-express geometry from one coordinate system into another.

    Coordinates measured in `from_cs` are placed at the same coordinates in
    `to_cs`. With `to_cs` set to the world frame this yields the geometry's
    coordinates local to `from_cs`; the reverse call maps them back.

    Args:
        geometry: A Point or Polyline.
        from_cs: The frame the geometry is currently expressed in.
        to_cs: The frame to express it in.

    Returns:
        A new Point or Polyline of the same type.
    """
    if isinstance(geometry, Point):
        return to_cs.to_global(from_cs.to_local(geometry))
    if isinstance(geometry, Polyline):
        return Polyline([to_cs.to_global(from_cs.to_local(p)) for p in geometry.control_points])
    raise TypeError(f"Cannot orient geometry of type {type(geometry).__name__}.")


def min_z(polyline: Polyline) -> float:
    return min(p.z for p in polyline.control_points)


def space_floor(panels: Iterable[Panel]) -> float:
    """Lowest control point elevation over every panel forming a space."""
    return min(min_z(panel.polyline()) for panel in panels)


def polyline_to_edges(polyline: Polyline) -> List[Line]:
    return polyline.close().edges()


def _plane_frame(polyline: Polyline) -> Cartesian:
    """A frame lying in the polygon's plane (x along the first non-degenerate edge)."""
    verts = polyline.vertices
    normal = polyline.normal
    origin = verts[0]
    for p in verts[1:]:
        direction = p - origin
        if direction.magnitude > DISTANCE_TOLERANCE:
            return Cartesian.from_vectors(origin, direction, normal.cross(direction))
    raise ValueError("Cannot build a plane from a degenerate polygon.")


def is_containing(
    panel: Panel,
    point: Point,
    *,
    accept_on_edges: bool = False,
    tolerance: float = DISTANCE_TOLERANCE
) -> bool:
    """
    Check whether a point lies on the panel plane and inside its boundary.

    The point must be within `tolerance` of the panel plane. It is then
    projected into plane coordinates and tested against the 2D outline.

    Args:
        panel: Host candidate.
        point: World-frame point.
        accept_on_edges: If True, points on the outline count as contained.
        tolerance: Maximum distance from the panel plane.
    """
    boundary = panel.polyline()
    if len(boundary.vertices) < 3:
        return False

    frame = _plane_frame(boundary)
    local = frame.to_local(point)
    if abs(local.z) > tolerance:
        return False

    outline = ShapelyPolygon([(p.x, p.y) for p in (frame.to_local(v) for v in boundary.vertices)])
    candidate = ShapelyPoint(local.x, local.y)
    if accept_on_edges:
        return outline.buffer(tolerance).covers(candidate)
    return outline.contains(candidate)


def _space_centroid(panels: Sequence[Panel]) -> Point:
    centres = np.array([panel.polyline().centroid.to_array() for panel in panels])
    return Point.from_array(centres.mean(axis=0))


def _panel_axes(panel: Panel, panels_as_space: Sequence[Panel]) -> Tuple[Vector, Vector]:
    """
    Right and up directions of a panel as seen from outside the space.

    The panel normal is flipped to point away from the space centroid. For
    walls "right" is Z × normal; horizontal panels fall back to world X.
    """
    boundary = panel.polyline()
    normal = boundary.normal
    if panels_as_space:
        outward = boundary.centroid - _space_centroid(panels_as_space)
        if outward.dot(normal) < 0:
            normal = -normal

    right = Vector.Z_AXIS.cross(normal)
    if right.magnitude < DISTANCE_TOLERANCE:
        right = Vector.X_AXIS
    right = right.normalize()
    up = normal.cross(right).normalize()
    return right, up


def _corner_candidates(
    panel: Panel,
    panels_as_space: Sequence[Panel],
    tolerance: float
) -> Tuple[List[Tuple[float, Point]], List[Tuple[float, Point]]]:
    """Vertices on the bottom and top edges, each paired with its 'right' coordinate."""
    right, up = _panel_axes(panel, panels_as_space)
    verts = panel.polyline().vertices
    heights = [Vector(p.x, p.y, p.z).dot(up) for p in verts]
    low, high = min(heights), max(heights)
    bottom = [(Vector(p.x, p.y, p.z).dot(right), p) for p, h in zip(verts, heights) if h - low <= tolerance]
    top = [(Vector(p.x, p.y, p.z).dot(right), p) for p, h in zip(verts, heights) if high - h <= tolerance]
    return bottom, top


def bottom_right(panel: Panel, panels_as_space: Sequence[Panel], tolerance: float = DISTANCE_TOLERANCE) -> Point:
    bottom, _ = _corner_candidates(panel, panels_as_space, tolerance)
    return max(bottom, key=lambda item: item[0])[1]


def bottom_left(panel: Panel, panels_as_space: Sequence[Panel], tolerance: float = DISTANCE_TOLERANCE) -> Point:
    bottom, _ = _corner_candidates(panel, panels_as_space, tolerance)
    return min(bottom, key=lambda item: item[0])[1]


def top_right(panel: Panel, panels_as_space: Sequence[Panel], tolerance: float = DISTANCE_TOLERANCE) -> Point:
    _, top = _corner_candidates(panel, panels_as_space, tolerance)
    return max(top, key=lambda item: item[0])[1]
