"""
Geometric Primitives for Openings and Panels.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, List, Sequence, Tuple, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    X_AXIS: ClassVar[Vector]
    Y_AXIS: ClassVar[Vector]
    Z_AXIS: ClassVar[Vector]

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def with_z(self, z: float) -> Vector:
        return Vector(self.x, self.y, z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @staticmethod
    def from_array(values: Sequence[float]) -> Vector:
        return Vector(float(values[0]), float(values[1]), float(values[2]))


Vector.X_AXIS = Vector(1.0, 0.0, 0.0)
Vector.Y_AXIS = Vector(0.0, 1.0, 0.0)
Vector.Z_AXIS = Vector(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Point:
    """A geometric point in 3D space. Adjustments return new points."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector or Point to a Point.")

    def with_z(self, z: float) -> Point:
        return Point(self.x, self.y, z)

    def translate_z(self, dz: float) -> Point:
        return Point(self.x, self.y, self.z + dz)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @staticmethod
    def from_array(values: Sequence[float]) -> Point:
        return Point(float(values[0]), float(values[1]), float(values[2]))

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]


ORIGIN = Point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Line:
    """A straight edge between two points."""
    start: Point
    end: Point

    def reverse(self) -> Line:
        return Line(start=self.end, end=self.start)

    def to_vector(self) -> Vector:
        return self.end - self.start

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class Polyline:
    """
    An ordered sequence of points. Closed when the first point equals the last.

    Derived quantities follow the conventions of building-geometry tools:
    height is the vertical extent, width is the plan diagonal of the bounding box.
    """
    control_points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "control_points", tuple(self.control_points))

    @property
    def is_closed(self) -> bool:
        return len(self.control_points) > 2 and self.control_points[0] == self.control_points[-1]

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Control points without the repeated closing point."""
        if self.is_closed:
            return self.control_points[:-1]
        return self.control_points

    def close(self) -> Polyline:
        if self.is_closed or not self.control_points:
            return self
        return Polyline(self.control_points + (self.control_points[0],))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([p.to_array() for p in self.control_points]).reshape(-1, 3)

    def bounds(self) -> Tuple[Point, Point]:
        """Axis-aligned bounding box as (min, max) corners."""
        pts = self.to_array()
        return Point.from_array(pts.min(axis=0)), Point.from_array(pts.max(axis=0))

    @property
    def height(self) -> float:
        low, high = self.bounds()
        return abs(high.z - low.z)

    @property
    def width(self) -> float:
        low, high = self.bounds()
        return math.hypot(high.x - low.x, high.y - low.y)

    @property
    def normal(self) -> Vector:
        """Unit normal of the polygon using Newell's method."""
        verts = self.vertices
        nx = ny = nz = 0.0
        for i, v1 in enumerate(verts):
            v2 = verts[(i + 1) % len(verts)]
            nx += (v1.y - v2.y) * (v1.z + v2.z)
            ny += (v1.z - v2.z) * (v1.x + v2.x)
            nz += (v1.x - v2.x) * (v1.y + v2.y)
        return Vector(nx, ny, nz).normalize()

    @property
    def centroid(self) -> Point:
        """
        Area centroid of a planar polygon.

        The polygon is fanned into triangles from its first vertex; each
        triangle contributes its centroid weighted by its signed area along the
        polygon normal. Falls back to the vertex mean for zero-area outlines.
        """
        pts = np.array([p.to_array() for p in self.vertices]).reshape(-1, 3)
        if len(pts) < 3:
            return Point.from_array(pts.mean(axis=0))

        normal = self.normal.to_array()
        v0 = pts[0]
        weighted = np.zeros(3)
        total_area = 0.0
        for v1, v2 in zip(pts[1:-1], pts[2:]):
            area = 0.5 * float(np.dot(np.cross(v1 - v0, v2 - v0), normal))
            weighted += area * (v0 + v1 + v2) / 3.0
            total_area += area

        if abs(total_area) < 1e-12:
            return Point.from_array(pts.mean(axis=0))
        return Point.from_array(weighted / total_area)

    def edges(self) -> List[Line]:
        pts = self.control_points
        return [Line(start=p1, end=p2) for p1, p2 in zip(pts[:-1], pts[1:])]

    @staticmethod
    def from_edges(edges: Sequence[Line]) -> Polyline:
        """Rebuild the outline from connected edges (start of each edge, then end of the last)."""
        if not edges:
            return Polyline()
        points = [edge.start for edge in edges]
        points.append(edges[-1].end)
        return Polyline(points)


@dataclass(frozen=True)
class Cartesian:
    """
    A right-handed orthonormal coordinate system.

    Built like CAD kernels do from an origin and two basis vectors: x is
    normalised, z = x × y, and y is recomputed as z × x so the frame stays
    orthogonal even when the input y is skewed.
    """
    origin: Point
    x: Vector
    y: Vector
    z: Vector

    @staticmethod
    def from_vectors(origin: Point, x: Vector, y: Vector) -> Cartesian:
        x_axis = x.normalize()
        z_axis = x_axis.cross(y).normalize()
        if z_axis.magnitude == 0.0:
            raise ValueError(f"Cannot build a coordinate system from parallel vectors {x} and {y}.")
        y_axis = z_axis.cross(x_axis).normalize()
        return Cartesian(origin=origin, x=x_axis, y=y_axis, z=z_axis)

    def basis(self) -> npt.NDArray[np.float64]:
        """3x3 matrix whose rows are the frame axes."""
        return np.array([self.x.to_array(), self.y.to_array(), self.z.to_array()])

    def to_local(self, point: Point) -> Point:
        """World coordinates -> coordinates expressed in this frame."""
        return Point.from_array(self.basis() @ (point.to_array() - self.origin.to_array()))

    def to_global(self, point: Point) -> Point:
        """Coordinates expressed in this frame -> world coordinates."""
        return Point.from_array(self.origin.to_array() + self.basis().T @ point.to_array())


WORLD = Cartesian(origin=ORIGIN, x=Vector.X_AXIS, y=Vector.Y_AXIS, z=Vector.Z_AXIS)
