"""Location sources for a trail session: live GPS, trace playback and a fixed point.

Every source hands out `Location` fixes through get_location(), returning None
for a failed fix, and reports a one-line status for the session log.
"""

import json
import subprocess
import time
from typing import Optional

from .config import CONFIG
from .models import Location, TraceEntry


class LocationSource:
    """Fix bookkeeping shared by the sources"""

    def __init__(self):
        self.last_location: Optional[Location] = None
        self.consecutive_failures = 0

    def _got_fix(self, location: Location) -> Location:
        self.last_location = location
        self.consecutive_failures = 0
        return location

    def _no_fix(self) -> None:
        self.consecutive_failures += 1
        return None

    def is_finished(self) -> bool:
        return False

    def get_poll_interval(self) -> float:
        return CONFIG["gps_poll_interval"]


def parse_termux_fix(output: str) -> Location:
    """Turn termux-location JSON output into a Location. ValueError if unusable."""
    try:
        data = json.loads(output)
        return Location(lat=float(data["latitude"]), lon=float(data["longitude"]),
                        accuracy=data.get("accuracy"), timestamp=time.time())
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Unusable termux-location output: {e}") from e


class GPS(LocationSource):
    """Live fixes from the Termux API"""

    def __init__(self, provider: str = "gps"):
        super().__init__()
        self.provider = provider

    def get_location(self, timeout: Optional[int] = None) -> Optional[Location]:
        command = ["termux-location", "-p", self.provider, "-r", "once"]
        try:
            result = subprocess.run(command, capture_output=True, text=True,
                                    timeout=timeout or CONFIG["gps_timeout"])
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return self._no_fix()
        if result.returncode != 0:
            return self._no_fix()
        try:
            return self._got_fix(parse_termux_fix(result.stdout))
        except ValueError:
            return self._no_fix()

    def get_status(self) -> str:
        if self.consecutive_failures:
            return f"GPS: {self.consecutive_failures} consecutive failures"
        if self.last_location and self.last_location.accuracy:
            return f"GPS OK, accuracy {self.last_location.accuracy:.0f}m"
        return "GPS OK"


class GPSPlayback(LocationSource):
    """Replays a recorded walk of the trail.

    Trace format: {"trace": [{"elapsed": s, "location": {"lat", "lon", ...} or null}, ...]}.
    The whole trace is checked when loaded so a bad entry is reported before
    the session starts. Null locations replay as failed fixes.
    """

    def __init__(self, playback_path: str, speed: float = 1.0):
        super().__init__()
        if speed <= 0:
            raise ValueError("Playback speed must be positive")
        self.playback_path = playback_path
        self.speed = speed
        self.index = 0
        self.trace = self.load(playback_path)

    @staticmethod
    def load(playback_path: str) -> list[TraceEntry]:
        try:
            with open(playback_path) as f:
                entries = json.load(f)["trace"]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise ValueError(f"Invalid GPS trace {playback_path}: {e}") from e
        if not isinstance(entries, list):
            raise ValueError(f"Invalid GPS trace {playback_path}: 'trace' must be a list")

        trace = []
        for number, entry in enumerate(entries, 1):
            try:
                trace.append(TraceEntry.from_dict(entry))
            except ValueError as e:
                raise ValueError(f"Invalid GPS trace {playback_path}, entry {number}: {e}") from e
        return trace

    def get_location(self, timeout: Optional[int] = None) -> Optional[Location]:
        if self.is_finished():
            return None
        entry = self.trace[self.index]
        self.index += 1
        if entry.location is None:
            return self._no_fix()
        return self._got_fix(entry.location)

    def get_poll_interval(self) -> float:
        """Recorded gap to the next fix scaled by speed, kept within the playback limits"""
        if self.index <= 0 or self.is_finished():
            return CONFIG["gps_poll_interval"] / self.speed
        gap = (self.trace[self.index].elapsed - self.trace[self.index - 1].elapsed) / self.speed
        return max(CONFIG["playback_min_interval"], min(gap, CONFIG["playback_max_interval"]))

    def is_finished(self) -> bool:
        return self.index >= len(self.trace)

    def get_status(self) -> str:
        progress = f"{self.index}/{len(self.trace)}"
        if self.consecutive_failures:
            return f"Playback: {self.consecutive_failures} failures ({progress})"
        return f"Playback OK ({progress})"


class FixedLocation(LocationSource):
    """A single fix at a given point, for checking one position against the trail"""

    def __init__(self, lat: float, lon: float):
        super().__init__()
        self.location = Location(lat=lat, lon=lon, accuracy=0, timestamp=time.time())
        self.used = False

    def get_location(self, timeout: Optional[int] = None) -> Optional[Location]:
        if self.used:
            return None
        self.used = True
        return self._got_fix(self.location)

    def is_finished(self) -> bool:
        return self.used

    def get_status(self) -> str:
        return f"Fixed location ({self.location.lat:.5f}, {self.location.lon:.5f})"
