"""
Opening <-> Furnishing Converter
================================
Places openings between the BIM representation (an Opening hosted on a
Panel) and DIALux furnishings.

Forward: the furnishing position is the opening centroid dropped to the
bottom edge of the opening and measured from the bottom of the host panel.

Reverse: the furnishing position is lifted back to the opening centre, the
host panel is found by containment, and the rectangle is built in the host's
local frame so that rotated or tilted panels get a correctly oriented outline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, List, Optional, Sequence

from dialuxadapter.config import ROUNDING_DECIMALS
from dialuxadapter.model.environment import Opening, Panel
from dialuxadapter.model.furnishing import Furnishing, FurnishingRecord
from dialuxadapter.model.geometry_primitives import WORLD, Cartesian, Point, Polyline
from dialuxadapter.model.geometry_utils import (
    bottom_left, bottom_right, is_containing, min_z, orient, polyline_to_edges, space_floor, top_right,
)
from dialuxadapter.model.type_mapping import opening_type_from_dialux, opening_type_to_dialux

logger = logging.getLogger(__name__)


@dataclass
class OpeningPlacement:
    """
    Result of a reverse conversion.

    `host` is the panel object that contains the opening, or None when no host
    was found. Panel names need not be unique, so the host is kept by identity.
    """
    opening: Opening = field(default_factory=Opening)
    host: Optional[Panel] = field(default=None, compare=False)

    @property
    def is_resolved(self) -> bool:
        return self.host is not None


def to_furnishing(opening: Opening, host_panel: Panel) -> Furnishing:
    """
    Convert an Opening into a DIALux furnishing.

    Args:
        opening: The opening to convert. Its outline must be non-degenerate.
        host_panel: The panel bounding the opening (not validated).

    Returns:
        A furnishing positioned at the bottom-centre of the opening, relative
        to the bottom of the host panel. Rotations and depth are always zero.
    """
    outline = opening.polyline()
    height = outline.height

    centre = outline.centroid
    centre = centre.translate_z(-height / 2)
    centre = centre.translate_z(-min_z(host_panel.polyline()))

    return Furnishing(
        type=opening_type_to_dialux(opening.type),
        reference="",
        position=centre,
        rotation_x=0.0,
        rotation_y=0.0,
        rotation_z=0.0,
        height=round(height, ROUNDING_DECIMALS),
        width=round(outline.width, ROUNDING_DECIMALS),
        depth=0.0,
    )


def find_host(point: Point, panels_in_space: Iterable[Panel]) -> Optional[Panel]:
    """First panel whose outline contains the point."""
    return next((panel for panel in panels_in_space if is_containing(panel, point)), None)


def host_cartesian(host: Panel, panels_in_space: Sequence[Panel]) -> Cartesian:
    """
    Local frame of a host panel.

    Origin at the bottom-right corner, x towards the bottom-left corner
    flattened onto the horizontal plane, y towards the top-right corner.
    """
    br = bottom_right(host, panels_in_space)
    bl = bottom_left(host, panels_in_space)
    tr = top_right(host, panels_in_space)

    x_vector = (bl - br).with_z(0.0)
    y_vector = tr - br
    return Cartesian.from_vectors(br, x_vector, y_vector)


def from_furnishing_record(record: FurnishingRecord, panels_in_space: Sequence[Panel]) -> OpeningPlacement:
    """
    Convert a DIALux furnishing into an Opening placed on its host panel.

    Nothing is attached to the host; pass the result to `attach_opening`.

    Args:
        record: The parsed furnishing fields.
        panels_in_space: Every panel forming the space around the furnishing.

    Returns:
        The placement. If no panel contains the furnishing an error is logged
        and an empty placement (no edges, no host) is returned.
    """
    width, height = record.width, record.height

    centre = record.position.translate_z(height / 2)

    floor = space_floor(panels_in_space)
    centre = centre.translate_z(floor)

    host = find_host(centre, panels_in_space)
    if host is None:
        logger.error(
            f"A suitable host panel could not be found for opening reference {record.reference}"
            f" - opening may not have been correctly pulled."
        )
        return OpeningPlacement()

    # Only panels sitting above the space floor need their own floor added
    host_floor = min_z(host.polyline())
    if host_floor != floor:
        centre = centre.translate_z(host_floor)

    local_cs = host_cartesian(host, panels_in_space)
    c = orient(centre, local_cs, WORLD)

    half_w, half_h = width / 2, height / 2
    rectangle = Polyline([
        Point(c.x - half_w, c.y - half_h, c.z),
        Point(c.x - half_w, c.y + half_h, c.z),
        Point(c.x + half_w, c.y + half_h, c.z),
        Point(c.x + half_w, c.y - half_h, c.z),
    ]).close()

    outline = orient(rectangle, WORLD, local_cs)

    opening = Opening(
        name=record.reference,
        type=opening_type_from_dialux(record.type_token),
        edges=polyline_to_edges(outline),
    )
    logger.debug(f"Opening '{record.reference}' placed on panel '{host.name}'.")
    return OpeningPlacement(opening=opening, host=host)


def from_furnishing_fields(fields: Sequence[str], panels_in_space: Sequence[Panel]) -> OpeningPlacement:
    """Parse the ordered DIALux text fields and convert them."""
    return from_furnishing_record(FurnishingRecord.from_fields(fields), panels_in_space)


def attach_opening(placement: OpeningPlacement, panels: Optional[Iterable[Panel]] = None) -> Optional[Panel]:
    """
    Append a resolved opening to its host panel.

    Args:
        placement: Result of `from_furnishing_record`.
        panels: If given, the host must be one of these panel objects.

    Returns:
        The host panel, or None for an unresolved placement.

    Raises:
        ValueError: If the host is not among `panels`.
    """
    host = placement.host
    if host is None:
        return None
    if panels is not None and not any(panel is host for panel in panels):
        raise ValueError(f"Host panel '{host.name}' is not part of the given panels.")
    host.add_opening(placement.opening)
    return host


def openings_to_furnishings(panels: Iterable[Panel]) -> List[Furnishing]:
    """Forward-convert every opening of every panel, each hosted by its owning panel."""
    furnishings = []
    for panel in panels:
        for opening in panel.openings:
            furnishing = to_furnishing(opening, panel)
            furnishing.reference = opening.name
            furnishings.append(furnishing)
    logger.info(f"Converted {len(furnishings)} openings to furnishings.")
    return furnishings


def furnishings_to_openings(
    records: Iterable[Sequence[str]],
    panels_in_space: Sequence[Panel],
    *,
    skip_invalid: bool = False
) -> List[OpeningPlacement]:
    """
    Reverse-convert a batch of raw furnishing records and attach each resolved opening.

    Args:
        records: Ordered text fields of each furnishing.
        panels_in_space: Every panel forming the space.
        skip_invalid: If True, a record with malformed tokens or an unknown
            type is logged and skipped instead of aborting the batch.

    Returns:
        One placement per converted record, unresolved ones included.
    """
    placements = []
    for fields in records:
        try:
            placement = from_furnishing_fields(fields, panels_in_space)
        except ValueError:
            if not skip_invalid:
                raise
            logger.exception(f"Skipping invalid furnishing record: {list(fields)}")
            continue
        attach_opening(placement, panels_in_space)
        placements.append(placement)

    resolved = sum(1 for p in placements if p.is_resolved)
    logger.info(f"Placed {resolved} of {len(placements)} furnishings on host panels.")
    return placements
