"""Data classes for Trailguide."""

from dataclasses import dataclass, asdict, field
from functools import cached_property
from typing import Iterable, Optional


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "GeoPoint":
        return cls(lat=float(d["lat"]), lon=float(d["lon"]))


@dataclass
class Location:
    """A single positioning fix"""
    lat: float
    lon: float
    accuracy: Optional[float] = None
    timestamp: Optional[float] = None

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "Location":
        """Build a fix from a logged or recorded dict. ValueError if it is not one."""
        try:
            accuracy, timestamp = d.get("accuracy"), d.get("timestamp")
            return cls(lat=float(d["lat"]), lon=float(d["lon"]),
                       accuracy=None if accuracy is None else float(accuracy),
                       timestamp=None if timestamp is None else float(timestamp))
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Not a location: {d!r}") from e


@dataclass(frozen=True)
class TraceEntry:
    """One recorded poll: seconds since the recording started and the fix, if any"""
    elapsed: float
    location: Optional[Location] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TraceEntry":
        if not isinstance(d, dict):
            raise ValueError(f"Not a trace entry: {d!r}")
        location = d.get("location")
        try:
            elapsed = float(d.get("elapsed", 0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Bad elapsed time: {d.get('elapsed')!r}") from e
        return cls(elapsed=elapsed,
                   location=Location.from_dict(location) if location else None)


@dataclass(frozen=True)
class Path:
    """An ordered trail. Point order defines the segments and trail direction."""
    points: tuple[GeoPoint, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_points(cls, pairs: Iterable, name: Optional[str] = None) -> "Path":
        """Build a path from (lat, lon) pairs"""
        return cls(points=tuple(GeoPoint(float(lat), float(lon)) for lat, lon in pairs),
                   name=name)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    # Bounding box and center are only used for framing a view of the trail.
    @cached_property
    def southwest(self) -> Optional[GeoPoint]:
        if not self.points:
            return None
        return GeoPoint(min(p.lat for p in self.points), min(p.lon for p in self.points))

    @cached_property
    def northeast(self) -> Optional[GeoPoint]:
        if not self.points:
            return None
        return GeoPoint(max(p.lat for p in self.points), max(p.lon for p in self.points))

    @cached_property
    def center(self) -> Optional[GeoPoint]:
        """Midpoint of the bounding box"""
        if not self.points:
            return None
        sw, ne = self.southwest, self.northeast
        return GeoPoint((sw.lat + ne.lat) / 2, (sw.lon + ne.lon) / 2)


@dataclass(frozen=True)
class NearestPoint:
    """Closest point found on a path and its distance from the query"""
    point: GeoPoint
    distance_meters: float


@dataclass
class TrackerState:
    """Hysteresis anchor for one tracking session"""
    previous_location: Optional[GeoPoint] = None
    has_previous_update: bool = False
    proximity_threshold_meters: float = 10.0


@dataclass
class UpdateResult:
    """Outcome of one tracker update.

    on_path is True when a correction vector back onto the path is reported,
    i.e. the observer is further from the trail than the off-path threshold.
    The distance/bearing fields are only meaningful when on_path is True, and
    reference_bearing_degrees only when reference_line_valid is True.
    """
    on_path: bool = False
    distance_to_path_meters: float = 0.0
    bearing_to_path_degrees: float = 0.0
    reference_line_valid: bool = False
    reference_bearing_degrees: float = 0.0
    # Distance from the anchor to the fix; the reference bearing has no
    # direction when this is zero
    reference_distance_meters: float = 0.0
    nearest: Optional[GeoPoint] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        return asdict(self)
