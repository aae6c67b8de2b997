"""Session log for Trailguide.

Each event is one line, `[time] message | {json}`, echoed to stdout and
appended to the log file. Fixes, tracker results and trail points can be
passed as they are; anything with a to_dict() is written as that dict.
"""

import json
from datetime import datetime
from typing import Optional, Callable

from .models import Location, UpdateResult


def _encode(value):
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Cannot log {type(value).__name__}")


class Logger:
    """Writes timestamped session events to stdout, an optional file and a callback"""

    def __init__(self, log_path: Optional[str] = None, callback: Optional[Callable] = None,
                 echo: bool = True):
        self.log_path = log_path
        self.callback = callback
        self.echo = echo
        self.file = open(log_path, "a") if log_path else None
        if self.file:
            self._emit(f"# Trailguide session log, opened {datetime.now().isoformat()}")

    def _emit(self, line: str):
        if self.echo:
            print(line)
        if self.file:
            self.file.write(line + "\n")
            self.file.flush()

    def log(self, message: str, data: Optional[dict] = None):
        line = f"[{datetime.now().isoformat()}] {message}"
        if data:
            line += f" | {json.dumps(data, default=_encode)}"
        self._emit(line)
        if self.callback:
            self.callback(message, data)

    def log_off_trail(self, location: Location, result: UpdateResult, hint: str,
                      correction: Optional[float]):
        """Record an off-trail fix with the tracker's figures and the suggested turn"""
        self.log(f"OFF TRAIL: {hint}", {
            "location": location,
            "distance": round(result.distance_to_path_meters, 1),
            "bearing": round(result.bearing_to_path_degrees, 1),
            "nearest": result.nearest,
            "reference_bearing": (round(result.reference_bearing_degrees, 1)
                                  if result.reference_line_valid else None),
            "reference_distance": round(result.reference_distance_meters, 1),
            "correction": None if correction is None else round(correction, 1),
        })

    def log_on_trail(self, location: Location, message: str = "Back on trail"):
        self.log(message, {"location": location})

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
