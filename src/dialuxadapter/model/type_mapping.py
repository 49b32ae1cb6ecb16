"""Mapping between semantic opening types and DIALux furnishing type codes."""
from typing import Dict

from dialuxadapter.model.environment import OpeningType

DIALUX_DOOR = "Door"
DIALUX_WINDOW = "Window"
DIALUX_SKYLIGHT = "Skylight"

_TO_DIALUX: Dict[OpeningType, str] = {
    OpeningType.DOOR: DIALUX_DOOR,
    OpeningType.WINDOW: DIALUX_WINDOW,
    OpeningType.WINDOW_WITH_FRAME: DIALUX_WINDOW,
    OpeningType.GLAZING: DIALUX_WINDOW,
    OpeningType.CURTAIN_WALL: DIALUX_WINDOW,
    OpeningType.ROOFLIGHT: DIALUX_SKYLIGHT,
    OpeningType.ROOFLIGHT_WITH_FRAME: DIALUX_SKYLIGHT,
}

# Several opening types collapse onto one code; the reverse lookup picks the plain one
_FROM_DIALUX: Dict[str, OpeningType] = {
    DIALUX_DOOR.lower(): OpeningType.DOOR,
    DIALUX_WINDOW.lower(): OpeningType.WINDOW,
    DIALUX_SKYLIGHT.lower(): OpeningType.ROOFLIGHT,
}


def opening_type_to_dialux(opening_type: OpeningType) -> str:
    """Return the DIALux type code for an opening type."""
    try:
        return _TO_DIALUX[opening_type]
    except KeyError:
        raise ValueError(f"Opening type '{opening_type}' has no DIALux equivalent.") from None


def opening_type_from_dialux(type_code: str) -> OpeningType:
    """Return the opening type for a DIALux type code (case-insensitive)."""
    try:
        return _FROM_DIALUX[type_code.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown DIALux opening type '{type_code}'.") from None
