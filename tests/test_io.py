from __future__ import annotations

import json
import logging

import pytest

from dialuxadapter.__main__ import main
from dialuxadapter.model.environment import Opening, OpeningType
from dialuxadapter.model.furnishing import parse_dialux_point
from dialuxadapter.model.io import IOManager


def test_panels_json_round_trip(tmp_path, room, wall_rectangle_factory) -> None:
    room[1].add_opening(Opening(name="W1", type=OpeningType.WINDOW, edges=wall_rectangle_factory(1.0, 2.0, 1.0, 2.0).edges()))
    path = tmp_path / "panels.json"

    IOManager.save_panels(room, str(path))
    loaded = IOManager.load_panels(str(path))

    assert [p.name for p in loaded] == [p.name for p in room]
    assert loaded[1].outline == room[1].outline
    assert loaded[1].openings[0].type == OpeningType.WINDOW
    assert loaded[1].openings[0].edges == room[1].openings[0].edges


def test_load_panels_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        IOManager.load_panels(str(tmp_path / "nope.json"))


def test_records_file_round_trip(tmp_path) -> None:
    records = [
        ["Type=Window", "Ref=W1", "Rot=0.0 0.0 0.0", "Pos=2.0 0.0 1.0", "Size=1.0 1.2 0.0"],
        ["Type=Door", "Ref=D1", "Rot=0.0 0.0 0.0", "Pos=1.0 5.0 0.0", "Size=0.9 2.1 0.0"],
    ]
    path = tmp_path / "records.txt"

    IOManager.save_records(records, str(path))

    assert IOManager.load_records(str(path)) == records


def test_cli_import_then_export(tmp_path, room) -> None:
    panels_path = tmp_path / "panels.json"
    records_path = tmp_path / "records.txt"
    placed_path = tmp_path / "placed.json"
    exported_path = tmp_path / "exported.txt"
    IOManager.save_panels(room, str(panels_path))
    IOManager.save_records(
        [["Type=Window", "Ref=W1", "Rot=0 0 0", "Pos=2.0 0.0 1.0", "Size=1.0 1.2"]],
        str(records_path),
    )

    assert main(["import", str(panels_path), str(records_path), "-o", str(placed_path)]) == 0
    placed = json.loads(placed_path.read_text(encoding="utf-8"))
    south = next(p for p in placed["panels"] if p["name"] == "south")
    assert [o["name"] for o in south["openings"]] == ["W1"]

    assert main(["export", str(placed_path), "-o", str(exported_path)]) == 0
    exported = IOManager.load_records(str(exported_path))
    assert len(exported) == 1
    assert exported[0][0] == "Type=Window"
    assert exported[0][1] == "Ref=W1"
    position = parse_dialux_point(exported[0][3])
    assert (position.x, position.y, position.z) == pytest.approx((2.0, 0.0, 1.0))


def test_load_records_missing_file_logs_and_raises(tmp_path, caplog) -> None:
    path = tmp_path / "missing.txt"

    with caplog.at_level(logging.ERROR, logger="dialuxadapter"):
        with pytest.raises(FileNotFoundError):
            IOManager.load_records(str(path))

    assert any(r.levelno == logging.ERROR and "missing.txt" in r.getMessage() for r in caplog.records)


def test_save_records_unwritable_path_logs_and_raises(tmp_path, caplog) -> None:
    path = tmp_path / "no_such_dir" / "records.txt"

    with caplog.at_level(logging.ERROR, logger="dialuxadapter"):
        with pytest.raises(OSError):
            IOManager.save_records([["Type=Window"]], str(path))

    assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)
