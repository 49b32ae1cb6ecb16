from __future__ import annotations

import math
from typing import Callable, List

import pytest

from dialuxadapter.model.environment import Panel
from dialuxadapter.model.geometry_primitives import Point, Polyline


def rotate_z(x: float, y: float, z: float, angle_deg: float) -> Point:
    a = math.radians(angle_deg)
    return Point(x * math.cos(a) - y * math.sin(a), x * math.sin(a) + y * math.cos(a), z)


def make_room(
    length: float = 4.0,
    depth: float = 5.0,
    height: float = 3.0,
    floor_z: float = 0.0,
    angle_deg: float = 0.0,
    walls_only: bool = False,
) -> List[Panel]:
    """
    A box room with its south wall along local x, rotated about the vertical axis.
    Panel order: floor, south, east, north, west, ceiling.
    """
    plan = [(0.0, 0.0), (length, 0.0), (length, depth), (0.0, depth)]

    def at(i: int, z: float) -> Point:
        x, y = plan[i % 4]
        return rotate_z(x, y, z, angle_deg)

    top = floor_z + height
    walls = [
        Panel(name=name, outline=Polyline([at(i, floor_z), at(i + 1, floor_z), at(i + 1, top), at(i, top)]).close(), type="Wall")
        for i, name in enumerate(["south", "east", "north", "west"])
    ]
    if walls_only:
        return walls

    floor = Panel(name="floor", outline=Polyline([at(i, floor_z) for i in range(4)]).close(), type="Floor")
    ceiling = Panel(name="ceiling", outline=Polyline([at(i, top) for i in range(4)]).close(), type="Ceiling")
    return [floor, *walls, ceiling]


def wall_rectangle(s_min: float, s_max: float, z_min: float, z_max: float, angle_deg: float = 0.0) -> Polyline:
    """Closed rectangle lying on the south wall of a room from `make_room`."""
    return Polyline([
        rotate_z(s_min, 0.0, z_min, angle_deg),
        rotate_z(s_max, 0.0, z_min, angle_deg),
        rotate_z(s_max, 0.0, z_max, angle_deg),
        rotate_z(s_min, 0.0, z_max, angle_deg),
    ]).close()


@pytest.fixture
def room() -> List[Panel]:
    return make_room()


@pytest.fixture
def room_factory() -> Callable[..., List[Panel]]:
    return make_room


@pytest.fixture
def wall_rectangle_factory() -> Callable[..., Polyline]:
    return wall_rectangle
