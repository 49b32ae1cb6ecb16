from __future__ import annotations

import pytest

from dialuxadapter.model.environment import OpeningType
from dialuxadapter.model.furnishing import Furnishing, FurnishingRecord, parse_dialux_point, parse_dialux_size
from dialuxadapter.model.geometry_primitives import Point
from dialuxadapter.model.type_mapping import opening_type_from_dialux, opening_type_to_dialux


def test_parse_size() -> None:
    assert parse_dialux_size("Size=1.5 2.0") == (1.5, 2.0)


def test_parse_size_ignores_depth() -> None:
    assert parse_dialux_size("Size=0.9 2.1 0.0") == (0.9, 2.1)


@pytest.mark.parametrize("token", ["1.5 2.0", "Size=1.5", "Size=wide 2.0"])
def test_parse_size_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(ValueError):
        parse_dialux_size(token)


def test_parse_point() -> None:
    assert parse_dialux_point("Pos=1.0 -2.5 0.25") == Point(1.0, -2.5, 0.25)
    assert parse_dialux_point("3 4 5") == Point(3.0, 4.0, 5.0)


def test_parse_point_needs_three_coordinates() -> None:
    with pytest.raises(ValueError):
        parse_dialux_point("Pos=1.0 2.0")


def test_record_from_fields() -> None:
    record = FurnishingRecord.from_fields(["Type=Window", "Ref=W-12", "Rot=0 0 0", "Pos=1 2 3", "Size=1.5 2.0"])

    assert record.type_token == "Window"
    assert record.reference == "W-12"
    assert record.position == Point(1.0, 2.0, 3.0)
    assert (record.width, record.height) == (1.5, 2.0)


def test_record_keeps_unlabelled_reference() -> None:
    record = FurnishingRecord.from_fields(["Type=Door", "D1", "", "Pos=0 0 0", "Size=1 2"])
    assert record.reference == "D1"


def test_record_rejects_short_field_list() -> None:
    with pytest.raises(ValueError):
        FurnishingRecord.from_fields(["Type=Window", "Ref=W", "Rot=0 0 0", "Pos=0 0 0"])


def test_furnishing_fields_read_back() -> None:
    furnishing = Furnishing(type="Door", reference="D7", position=Point(0.1, 2.0, 0.0), height=2.1, width=0.9)

    record = FurnishingRecord.from_fields(furnishing.to_fields())

    assert record.type_token == "Door"
    assert record.reference == "D7"
    assert record.position == Point(0.1, 2.0, 0.0)
    assert (record.width, record.height) == (0.9, 2.1)


def test_type_mapping() -> None:
    assert opening_type_to_dialux(OpeningType.WINDOW_WITH_FRAME) == "Window"
    assert opening_type_to_dialux(OpeningType.ROOFLIGHT) == "Skylight"
    assert opening_type_from_dialux("door") == OpeningType.DOOR
    assert opening_type_from_dialux("Skylight") == OpeningType.ROOFLIGHT


def test_type_mapping_rejects_unknown_types() -> None:
    with pytest.raises(ValueError):
        opening_type_to_dialux(OpeningType.HOLE)
    with pytest.raises(ValueError):
        opening_type_from_dialux("Chair")
