import pytest

from trailguide.hints import correction_angle, correction_hint
from trailguide.models import UpdateResult


def off_path(distance, to_path, reference=None):
    return UpdateResult(
        on_path=True,
        distance_to_path_meters=distance,
        bearing_to_path_degrees=to_path,
        reference_line_valid=reference is not None,
        reference_bearing_degrees=reference if reference is not None else 0.0,
        reference_distance_meters=25.0 if reference is not None else 0.0,
    )


def test_no_hint_when_within_threshold():
    assert correction_hint(UpdateResult()) is None
    assert correction_angle(UpdateResult()) is None


def test_hint_without_reference_heading():
    assert correction_hint(off_path(120.4, 225)) == "Trail 120 m SW"
    assert correction_angle(off_path(120.4, 225)) is None


def test_hint_turn_right():
    result = off_path(80, 225, reference=135)
    assert correction_angle(result) == pytest.approx(90)
    assert correction_hint(result) == "Trail 80 m SW, right 90 degrees"


def test_hint_turn_left_across_north():
    result = off_path(35.6, 300, reference=10)
    assert correction_angle(result) == pytest.approx(-70)
    assert correction_hint(result) == "Trail 36 m NW, left 70 degrees"


def test_hint_straight_ahead():
    result = off_path(50, 225, reference=230)
    assert correction_hint(result) == "Trail 50 m SW, straight ahead"


def test_hint_walking_away_from_trail():
    result = off_path(200, 180, reference=0)
    assert correction_hint(result) == "Trail 200 m S, u-turn 180 degrees"


def test_hint_skips_turn_when_anchor_is_the_fix():
    result = off_path(60, 90, reference=0)
    result.reference_distance_meters = 0.0
    assert correction_angle(result) is None
    assert correction_hint(result) == "Trail 60 m E"


def test_hint_skips_turn_for_short_reference_line():
    result = off_path(203, 180, reference=0)
    result.reference_distance_meters = 3.0
    assert correction_angle(result, min_reference_distance=10) is None
    assert correction_hint(result, min_reference_distance=10) == "Trail 203 m S"

    result.reference_distance_meters = 10.5
    assert correction_angle(result, min_reference_distance=10) == pytest.approx(180)
    assert correction_hint(result, min_reference_distance=10) == "Trail 203 m S, u-turn 180 degrees"
