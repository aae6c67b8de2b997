import json

import pytest

from trailguide.logger import Logger
from trailguide.models import GeoPoint, Location, Path, TraceEntry, UpdateResult


def test_geopoint_is_immutable_value():
    a = GeoPoint(45.0, -121.0)
    assert a == GeoPoint(45.0, -121.0)
    assert len({a, GeoPoint(45.0, -121.0)}) == 1
    assert GeoPoint.from_dict(a.to_dict()) == a


def test_location_point():
    fix = Location(lat=1.5, lon=2.5, accuracy=4.0, timestamp=10.0)
    assert fix.point == GeoPoint(1.5, 2.5)


def test_path_bounds_and_center():
    path = Path.from_points([(45.0, -121.0), (45.2, -121.4), (44.9, -121.1)], name="loop")
    assert path.southwest == GeoPoint(44.9, -121.4)
    assert path.northeast == GeoPoint(45.2, -121.0)
    assert path.center.lat == (44.9 + 45.2) / 2
    assert path.center.lon == (-121.4 + -121.0) / 2


def test_empty_path_has_no_bounds():
    path = Path()
    assert len(path) == 0
    assert path.southwest is None
    assert path.northeast is None
    assert path.center is None


def test_logger_writes_header_and_data(tmp_path, capsys):
    log_file = tmp_path / "trail.log"
    received = []
    logger = Logger(str(log_file), callback=lambda m, d: received.append((m, d)))
    logger.log("OFF TRAIL", {"distance": 42})
    logger.close()

    text = log_file.read_text()
    assert "# Trailguide session log, opened" in text
    assert 'OFF TRAIL | {"distance": 42}' in text
    assert "OFF TRAIL" in capsys.readouterr().out
    assert received == [("OFF TRAIL", {"distance": 42})]


def test_location_from_dict_converts_numbers():
    fix = Location.from_dict({"lat": "45.5", "lon": -121, "accuracy": 3})
    assert fix == Location(lat=45.5, lon=-121.0, accuracy=3.0, timestamp=None)


@pytest.mark.parametrize("bad", [{"lat": 1.0}, ["lat", "lon"], {"lat": None, "lon": 2.0}])
def test_location_from_dict_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        Location.from_dict(bad)


def test_trace_entry_from_dict():
    entry = TraceEntry.from_dict({"elapsed": 4, "location": {"lat": 1, "lon": 2}})
    assert entry.elapsed == 4.0
    assert entry.location.point == GeoPoint(1.0, 2.0)
    assert TraceEntry.from_dict({"elapsed": 7, "location": None}).location is None
    with pytest.raises(ValueError):
        TraceEntry.from_dict("not an entry")


def test_logger_serialises_fixes_and_results(tmp_path):
    log_file = tmp_path / "trail.log"
    logger = Logger(str(log_file), echo=False)
    result = UpdateResult(on_path=True, distance_to_path_meters=42.04,
                          bearing_to_path_degrees=180.0, nearest=GeoPoint(0.0, 0.005))
    logger.log_off_trail(Location(lat=0.0004, lon=0.005), result, "Trail 42 m S", None)
    logger.log_on_trail(Location(lat=0.0, lon=0.005))
    logger.close()

    lines = log_file.read_text().splitlines()
    off_trail = json.loads(lines[1].split(" | ", 1)[1])
    assert off_trail["distance"] == 42.0
    assert off_trail["nearest"] == {"lat": 0.0, "lon": 0.005}
    assert off_trail["location"]["lat"] == 0.0004
    assert off_trail["reference_bearing"] is None
    assert "Back on trail" in lines[2]
