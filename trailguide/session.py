"""Trail session: feeds location fixes into an off-path tracker."""

import time
from typing import Optional

from .audio import Audio
from .config import CONFIG
from .gps import GPS
from .hints import correction_angle, correction_hint
from .logger import Logger
from .models import Location, Path, UpdateResult
from .projector import PathProjector
from .tracker import OffPathTracker


class TrailSession:
    """Polls a location source and reports off-trail corrections"""

    def __init__(self, path: Path, off_path_threshold: Optional[float] = None,
                 proximity_threshold: Optional[float] = None,
                 log_path: Optional[str] = None, speak: bool = True,
                 logger: Optional[Logger] = None, audio: Optional[Audio] = None):
        self.path = path
        self.off_path_threshold = (CONFIG["off_path_threshold"]
                                   if off_path_threshold is None else off_path_threshold)
        self.tracker = OffPathTracker(proximity_threshold)
        self.logger = logger or Logger(log_path)
        self.audio = audio or Audio(enabled=speak)

        self.gps_source = GPS()
        self.current_location: Optional[Location] = None
        self.last_result: Optional[UpdateResult] = None

        self.fixes = 0
        self.failed_fixes = 0
        self.off_path_fixes = 0
        self.max_distance_off = 0.0
        self.last_log_update = 0.0
        self.start_time = 0.0

    def set_gps_source(self, source):
        """Set location source (GPS, GPSPlayback or FixedLocation)"""
        self.gps_source = source

    def get_state(self) -> dict:
        """Get current state as dict for logging"""
        state = {
            "path": self.path.name,
            "path_points": len(self.path),
            "fixes": self.fixes,
            "off_path_fixes": self.off_path_fixes,
            "gps_status": self.gps_source.get_status() if hasattr(self.gps_source, "get_status") else "unknown",
        }
        if self.current_location:
            state["location"] = self.current_location
        anchor = self.tracker.previous_location
        if anchor:
            state["anchor"] = anchor
        return state

    def periodic_update(self):
        """Log state every log_interval seconds"""
        now = time.time()
        if now - self.last_log_update >= CONFIG["log_interval"]:
            self.logger.log("STATE", self.get_state())
            self.last_log_update = now

    def process_location(self, location: Location) -> UpdateResult:
        """Run one fix through the tracker and report the outcome"""
        self.current_location = location
        self.fixes += 1

        was_showing = self.tracker.showing_off_path
        result = self.tracker.update(self.path, location.point, self.off_path_threshold)
        self.last_result = result

        if result.on_path:
            self.off_path_fixes += 1
            self.max_distance_off = max(self.max_distance_off, result.distance_to_path_meters)
            # Headings over less than the anchor move threshold are jitter
            min_reference = self.tracker.state.proximity_threshold_meters
            hint = correction_hint(result, min_reference)
            self.logger.log_off_trail(location, result, hint,
                                      correction_angle(result, min_reference))
            if not was_showing:
                self.audio.reset()
            self.audio.announce(hint)
        elif was_showing:
            self.tracker.clear()
            self.audio.reset()
            self.logger.log_on_trail(location)
            self.audio.announce("Back on trail")

        return result

    def describe_last_fix(self) -> str:
        """One line on where the last fix stands relative to the trail"""
        if self.current_location is None or self.last_result is None:
            return "No fix"
        if self.last_result.on_path:
            min_reference = self.tracker.state.proximity_threshold_meters
            return f"Off trail: {correction_hint(self.last_result, min_reference)}"
        nearest = PathProjector.nearest(self.path, self.current_location.point)
        if nearest is None:
            return "No trail points to check against"
        return (f"On trail: {nearest.distance_meters:.0f} m from the path "
                f"(off-trail threshold {self.off_path_threshold:g} m)")

    def update(self) -> bool:
        """Poll one fix. Returns False when the source has nothing more to give."""
        self.periodic_update()

        location = self.gps_source.get_location()
        if not location:
            self.failed_fixes += 1
            status = self.gps_source.get_status() if hasattr(self.gps_source, "get_status") else "unknown"
            self.logger.log("GPS fix failed", {"status": status})
            return not self.is_source_finished()

        self.process_location(location)
        return True

    def get_poll_interval(self) -> float:
        """Get poll interval, respecting playback timing if the source has it"""
        if hasattr(self.gps_source, "get_poll_interval"):
            return self.gps_source.get_poll_interval()
        return CONFIG["gps_poll_interval"]

    def is_source_finished(self) -> bool:
        """True once a finite source (playback, fixed point) is exhausted"""
        if hasattr(self.gps_source, "is_finished"):
            return self.gps_source.is_finished()
        return False

    def summary(self) -> dict:
        return {
            "fixes": self.fixes,
            "failed_fixes": self.failed_fixes,
            "off_path_fixes": self.off_path_fixes,
            "max_distance_off": round(self.max_distance_off, 1),
            "duration": time.time() - self.start_time if self.start_time else 0,
        }

    def run(self):
        """Track until the source is exhausted or the user interrupts"""
        print("\n=== Trailguide ===")
        print(f"Trail: {self.path.name or 'unnamed'} ({len(self.path)} points)")
        print(f"Off-trail threshold: {self.off_path_threshold}m")
        print("Press Ctrl+C to stop\n")

        self.start_time = time.time()
        self.logger.log("Session started", {
            "path": self.path.name,
            "path_points": len(self.path),
            "off_path_threshold": self.off_path_threshold,
            "proximity_threshold": self.tracker.state.proximity_threshold_meters,
        })

        try:
            while self.update():
                if self.is_source_finished():
                    print("\nSource finished")
                    self.logger.log("Source finished")
                    break
                time.sleep(self.get_poll_interval())
        except KeyboardInterrupt:
            print("\nSession interrupted")
            self.logger.log("Session interrupted by user")
        finally:
            summary = self.summary()
            self.logger.log("Session summary", summary)

            print("\nSession summary:")
            print(f"  Fixes: {summary['fixes']} ({summary['failed_fixes']} failed)")
            print(f"  Off trail: {summary['off_path_fixes']} fixes, max {summary['max_distance_off']:.0f}m")
            print(f"  Duration: {summary['duration']/60:.1f} minutes")

            self.logger.close()
