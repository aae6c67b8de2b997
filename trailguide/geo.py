"""Geographic utility functions."""

from __future__ import annotations

import math

from .models import GeoPoint

EARTH_RADIUS = 6371000  # meters


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points in meters using Haversine formula"""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (math.sin(delta_phi / 2) ** 2 +
         math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2)
    # Rounding can push a just past 1 for near-antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS * c


def bearing_between(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate bearing from point 1 to point 2 in degrees (0-360, 0=North).

    Coincident points give 0.0, which carries no directional meaning.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)

    x = math.sin(delta_lambda) * math.cos(phi2)
    y = (math.cos(phi1) * math.sin(phi2) -
         math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda))

    bearing = math.degrees(math.atan2(x, y))
    return (bearing + 360) % 360


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in meters between two points"""
    return haversine_distance(a.lat, a.lon, b.lat, b.lon)


def bearing(a: GeoPoint, b: GeoPoint) -> float:
    """Bearing in degrees from a to b"""
    return bearing_between(a.lat, a.lon, b.lat, b.lon)


# Checked in order, first match wins. Edges are inclusive on both sides,
# so e.g. exactly 22 is N and exactly 67 is NE.
_COMPASS_SECTORS = [
    ("N", lambda b: b >= 337 or b <= 22),
    ("NE", lambda b: 22 <= b <= 67),
    ("E", lambda b: 67 <= b <= 112),
    ("SE", lambda b: 112 <= b <= 157),
    ("S", lambda b: 157 <= b <= 202),
    ("SW", lambda b: 202 <= b <= 247),
    ("W", lambda b: 247 <= b <= 292),
    ("NW", lambda b: 292 <= b <= 337),
]


def bearing_to_compass(bearing: float) -> str:
    """Convert bearing to an abbreviated compass direction (N, NE, ... NW)"""
    for word, matches in _COMPASS_SECTORS:
        if matches(bearing):
            return word
    # Only reachable for NaN
    return "N"


compass_word = bearing_to_compass

def turn_angle(from_bearing: float, to_bearing: float) -> float:
    """Signed turn in degrees from one heading to another, in (-180, 180].

    Positive is clockwise (right).
    """
    diff = (to_bearing - from_bearing) % 360
    if diff > 180:
        diff -= 360
    return diff


def relative_direction(from_bearing: float, to_bearing: float) -> str:
    """Get relative direction (left, right, straight, etc.)"""
    diff = (to_bearing - from_bearing + 360) % 360

    if diff < 30 or diff > 330:
        return "straight"
    elif 30 <= diff < 60:
        return "slight right"
    elif 60 <= diff < 120:
        return "right"
    elif 120 <= diff < 150:
        return "sharp right"
    elif 150 <= diff < 210:
        return "u-turn"
    elif 210 <= diff < 240:
        return "sharp left"
    elif 240 <= diff < 300:
        return "left"
    else:
        return "slight left"


def interpolate(a: GeoPoint, b: GeoPoint, fraction: float) -> GeoPoint:
    """Point at fraction along a->b, interpolating lat and lon independently.

    This is a planar approximation, not a great-circle interpolation. Error is
    negligible at trail-segment lengths.
    """
    return GeoPoint(a.lat + fraction * (b.lat - a.lat),
                    a.lon + fraction * (b.lon - a.lon))
