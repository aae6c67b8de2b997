"""Correction hints for getting back onto the trail."""

from typing import Optional

from .geo import bearing_to_compass, relative_direction, turn_angle
from .models import UpdateResult


def correction_angle(result: UpdateResult, min_reference_distance: float = 0.0) -> Optional[float]:
    """Signed turn from the direction of travel to the trail bearing.

    Positive turns right. None when there is no reference heading, or when the
    fix is no more than min_reference_distance from the anchor, since a
    heading over that short a line is mostly fix jitter.
    """
    if not result.on_path or not result.reference_line_valid:
        return None
    if result.reference_distance_meters <= max(min_reference_distance, 0.0):
        return None
    return turn_angle(result.reference_bearing_degrees, result.bearing_to_path_degrees)


def correction_hint(result: UpdateResult, min_reference_distance: float = 0.0) -> Optional[str]:
    """Short hint like 'Trail 120 m SW, right 85 degrees'"""
    if not result.on_path:
        return None

    compass = bearing_to_compass(result.bearing_to_path_degrees)
    hint = f"Trail {int(round(result.distance_to_path_meters))} m {compass}"

    angle = correction_angle(result, min_reference_distance)
    if angle is not None:
        turn = relative_direction(result.reference_bearing_degrees,
                                  result.bearing_to_path_degrees)
        if turn == "straight":
            hint += ", straight ahead"
        else:
            hint += f", {turn} {int(round(abs(angle)))} degrees"
    return hint
