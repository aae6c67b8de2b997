"""Off-trail tracking with a hysteresis anchor."""

from typing import Optional

from .config import CONFIG
from .geo import bearing, distance
from .models import GeoPoint, Path, TrackerState, UpdateResult
from .projector import PathProjector


class OffPathTracker:
    """Reports how far and which way the observer is off a path.

    Keeps the last location that moved more than proximity_threshold_meters as
    an anchor, so the reference heading (anchor -> current location) reflects
    the direction of travel rather than fix jitter. One tracker per session;
    calls to update() must not overlap.

    Threshold comparisons are strict (>). A negative off-path threshold reports
    every non-empty path as off-path, and a negative proximity threshold moves
    the anchor on every call.
    """

    def __init__(self, proximity_threshold: Optional[float] = None):
        if proximity_threshold is None:
            proximity_threshold = CONFIG["proximity_threshold"]
        self.state = TrackerState(proximity_threshold_meters=float(proximity_threshold))
        # Whether a view is currently showing off-path figures for this tracker
        self.showing_off_path = False

    @property
    def previous_location(self) -> Optional[GeoPoint]:
        return self.state.previous_location

    @property
    def is_anchored(self) -> bool:
        return self.state.previous_location is not None

    def update(self, path: Path, location: GeoPoint,
               off_path_threshold: float) -> UpdateResult:
        """Process one location sample against path"""
        state = self.state
        result = UpdateResult()

        was_unanchored = state.previous_location is None
        if was_unanchored:
            state.previous_location = location

        moved = distance(location, state.previous_location)
        moved_enough = moved > state.proximity_threshold_meters

        nearest = PathProjector.nearest(path, location)
        if nearest and nearest.distance_meters > off_path_threshold:
            result.on_path = True
            result.distance_to_path_meters = nearest.distance_meters
            result.bearing_to_path_degrees = bearing(location, nearest.point)
            result.nearest = nearest.point
            # Anchor is the old value whether or not it gets replaced below
            result.reference_bearing_degrees = bearing(state.previous_location, location)
            result.reference_distance_meters = moved
            result.reference_line_valid = not was_unanchored
            self.showing_off_path = True

        if moved_enough:
            state.previous_location = location
        state.has_previous_update = True

        return result

    def clear(self):
        """Forget that off-path figures are shown. The anchor is kept."""
        self.showing_off_path = False
