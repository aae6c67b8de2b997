"""Trailguide - Off-trail warnings and heading corrections for hikers."""

from .config import CONFIG
from .models import GeoPoint, Location, TraceEntry, Path, NearestPoint, TrackerState, UpdateResult
from .logger import Logger
from .gps import GPS, GPSPlayback, FixedLocation
from .geo import (
    haversine_distance,
    bearing_between,
    distance,
    bearing,
    bearing_to_compass,
    compass_word,
    relative_direction,
    turn_angle,
    interpolate,
)
from .projector import PathProjector
from .tracker import OffPathTracker
from .hints import correction_hint, correction_angle
from .audio import Audio
from .session import TrailSession
from .__main__ import main

__all__ = [
    "CONFIG",
    "GeoPoint",
    "Location",
    "TraceEntry",
    "Path",
    "NearestPoint",
    "TrackerState",
    "UpdateResult",
    "Logger",
    "GPS",
    "GPSPlayback",
    "FixedLocation",
    "haversine_distance",
    "bearing_between",
    "distance",
    "bearing",
    "bearing_to_compass",
    "compass_word",
    "relative_direction",
    "turn_angle",
    "interpolate",
    "PathProjector",
    "OffPathTracker",
    "correction_hint",
    "correction_angle",
    "Audio",
    "TrailSession",
    "main",
]
