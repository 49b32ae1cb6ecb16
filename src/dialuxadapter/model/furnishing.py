"""
DIALux Furnishings
==================
DIALux stores doors, windows and skylights as "furnishings": a type code,
a free-text reference, a position, three rotations and a size.

Classes:
    Furnishing: The forward-conversion result.
    FurnishingRecord: A typed view of the ordered text fields exported by DIALux.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Sequence, Tuple

from dialuxadapter.config import (
    POSITION_FIELD, POSITION_LABEL, RECORD_FIELD_COUNT, REFERENCE_FIELD, REFERENCE_LABEL,
    ROTATION_FIELD, ROTATION_LABEL, SIZE_FIELD, SIZE_LABEL, TYPE_FIELD, TYPE_LABEL,
)
from dialuxadapter.model.geometry_primitives import ORIGIN, Point

logger = logging.getLogger(__name__)


def _field_value(text: str) -> str:
    """Return the part after the first '=' (or the whole token if there is none)."""
    if "=" in text:
        return text.split("=", 1)[1]
    return text


def _format_number(value: float) -> str:
    return repr(float(value))


def parse_dialux_point(token: str) -> Point:
    """
    Decode a DIALux position token, e.g. ``"Pos=1.0 2.0 0.5"``.

    Raises:
        ValueError: If the token does not hold three numbers.
    """
    values = _field_value(token).split()
    if len(values) != 3:
        raise ValueError(f"Expected three coordinates in position token '{token}'.")
    x, y, z = (float(v) for v in values)
    return Point(x, y, z)


def parse_dialux_size(token: str) -> Tuple[float, float]:
    """
    Decode a DIALux size token ``"<label>=<width> <height>"``.

    Any further value (such as a depth) is ignored.

    Raises:
        ValueError: If the token is missing '=' or does not hold two numbers.
    """
    if "=" not in token:
        raise ValueError(f"Size token '{token}' has no '=' separator.")
    values = token.split("=", 1)[1].split()
    if len(values) < 2:
        raise ValueError(f"Expected width and height in size token '{token}'.")
    return float(values[0]), float(values[1])


@dataclass
class Furnishing:
    type: str
    reference: str = ""
    position: Point = ORIGIN
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0

    def to_fields(self) -> List[str]:
        """Write the furnishing in the ordered field layout read back by FurnishingRecord."""
        fields = [""] * RECORD_FIELD_COUNT
        fields[TYPE_FIELD] = f"{TYPE_LABEL}={self.type}"
        fields[REFERENCE_FIELD] = f"{REFERENCE_LABEL}={self.reference}"
        fields[ROTATION_FIELD] = f"{ROTATION_LABEL}=" + " ".join(
            _format_number(v) for v in (self.rotation_x, self.rotation_y, self.rotation_z)
        )
        fields[POSITION_FIELD] = f"{POSITION_LABEL}=" + " ".join(
            _format_number(v) for v in (self.position.x, self.position.y, self.position.z)
        )
        fields[SIZE_FIELD] = f"{SIZE_LABEL}=" + " ".join(
            _format_number(v) for v in (self.width, self.height, self.depth)
        )
        return fields


@dataclass(frozen=True)
class FurnishingRecord:
    """
    Parsed furnishing fields as consumed by the reverse conversion.
    The raw fields are kept for diagnostics.
    """
    type_token: str
    reference: str
    position: Point
    width: float
    height: float
    raw_fields: Tuple[str, ...] = field(default_factory=tuple, compare=False)

    @staticmethod
    def from_fields(fields: Sequence[str]) -> FurnishingRecord:
        """
        Build a record from the ordered DIALux text fields.

        Layout: 0 ``"<label>=<type>"``, 1 reference, 3 position, 4 ``"<label>=<width> <height>"``.

        Raises:
            ValueError: On a short record or a malformed type, position or size token.
        """
        if len(fields) < RECORD_FIELD_COUNT:
            raise ValueError(
                f"Furnishing record needs {RECORD_FIELD_COUNT} fields, got {len(fields)}: {list(fields)}"
            )
        type_field = fields[TYPE_FIELD]
        if "=" not in type_field:
            raise ValueError(f"Type field '{type_field}' has no '=' separator.")

        width, height = parse_dialux_size(fields[SIZE_FIELD])
        record = FurnishingRecord(
            type_token=type_field.split("=", 1)[1].strip(),
            reference=_field_value(fields[REFERENCE_FIELD]).strip(),
            position=parse_dialux_point(fields[POSITION_FIELD]),
            width=width,
            height=height,
            raw_fields=tuple(fields),
        )
        logger.debug(f"Parsed furnishing record '{record.reference}' ({record.type_token}).")
        return record
