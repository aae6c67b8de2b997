"""Nearest-point search along a trail."""

import math
from typing import Optional

from .geo import bearing, distance, interpolate
from .models import GeoPoint, NearestPoint, Path


class PathProjector:
    """Projects a location onto the closest point of a path"""

    @staticmethod
    def locate_on_segment(query: GeoPoint, seg0: GeoPoint, seg1: GeoPoint) -> NearestPoint:
        """Find the point on segment seg0->seg1 closest to query.

        The segment is treated as locally planar: the query is projected along
        the segment heading using the angle between the two bearings out of
        seg0, then clamped to the segment ends.
        """
        heading_to_query = bearing(seg0, query)
        dist_to_query = distance(seg0, query)
        heading_of_segment = bearing(seg0, seg1)
        seg_length = distance(seg0, seg1)

        phi = math.radians(abs(heading_of_segment - heading_to_query))
        along = dist_to_query * math.cos(phi)

        if along < 0 or seg_length == 0:
            at = seg0
        elif along > seg_length:
            at = seg1
        else:
            at = interpolate(seg0, seg1, along / seg_length)

        return NearestPoint(point=at, distance_meters=distance(query, at))

    @classmethod
    def nearest(cls, path: Path, query: GeoPoint) -> Optional[NearestPoint]:
        """Find the closest point on any segment of path.

        Returns None for an empty path. Ties go to the earliest segment.
        """
        points = path.points
        if not points:
            return None
        if len(points) == 1:
            return NearestPoint(point=points[0], distance_meters=distance(points[0], query))

        best: Optional[NearestPoint] = None
        for seg0, seg1 in zip(points, points[1:]):
            candidate = cls.locate_on_segment(query, seg0, seg1)
            if best is None or candidate.distance_meters < best.distance_meters:
                best = candidate
        return best
