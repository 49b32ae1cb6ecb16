"""
Environment Elements
====================
Defines the BIM-side objects: Panels (walls, floors, roofs) and the Openings
cut into them.

Classes:
    OpeningType: Semantic category of an opening.
    Opening: A void in a panel, described by its edges.
    Panel: A planar host surface owning a list of openings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, List, Optional

from dialuxadapter.model.geometry_primitives import Line, Point, Polyline


class OpeningType(StrEnum):
    DOOR = "Door"
    WINDOW = "Window"
    WINDOW_WITH_FRAME = "WindowWithFrame"
    GLAZING = "Glazing"
    CURTAIN_WALL = "CurtainWall"
    ROOFLIGHT = "Rooflight"
    ROOFLIGHT_WITH_FRAME = "RooflightWithFrame"
    FRAME = "Frame"
    HOLE = "Hole"
    UNDEFINED = "Undefined"


def _points_to_list(points: List[Point]) -> List[List[float]]:
    return [p.to_list() for p in points]


def _points_from_list(data: List[List[float]]) -> List[Point]:
    return [Point(*map(float, coords)) for coords in data]


@dataclass
class Opening:
    """
    A sub-boundary of a Panel. An Opening without edges is the empty result
    returned when no host could be found for it.
    """
    name: str = ""
    type: OpeningType = OpeningType.UNDEFINED
    edges: List[Line] = field(default_factory=list)

    def polyline(self) -> Polyline:
        return Polyline.from_edges(self.edges)

    @property
    def is_empty(self) -> bool:
        return not self.edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "outline": _points_to_list(list(self.polyline().control_points)),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Opening:
        outline = Polyline(_points_from_list(data.get("outline", [])))
        return Opening(
            name=data.get("name", ""),
            type=OpeningType(data.get("type", OpeningType.UNDEFINED)),
            edges=outline.edges(),
        )


@dataclass
class Panel:
    """
    A planar boundary hosting openings. The openings list only ever grows:
    converters append newly resolved openings to it.
    """
    name: str
    outline: Polyline
    openings: List[Opening] = field(default_factory=list)
    type: Optional[str] = None

    def polyline(self) -> Polyline:
        return self.outline

    def add_opening(self, opening: Opening) -> None:
        self.openings.append(opening)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "outline": _points_to_list(list(self.outline.control_points)),
            "openings": [o.to_dict() for o in self.openings],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Panel:
        return Panel(
            name=data["name"],
            outline=Polyline(_points_from_list(data["outline"])),
            openings=[Opening.from_dict(o) for o in data.get("openings", [])],
            type=data.get("type"),
        )
