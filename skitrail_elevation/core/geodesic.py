"""Geodesic primitive: distances, path lengths and line splitting.

The elevation engine only depends on three operations:
- point-to-point distance in meters
- total length of a path in meters
- splitting a path into consecutive pieces of a target arc length

Two Earth models implement them:
- SphericalGeodesic: Haversine on a sphere (R = 6,371 km), the default
- EllipsoidalGeodesic: pyproj.Geod on the WGS84 ellipsoid

Line splitting is shared by both models and is only approximately exact:
the number of pieces is derived from a floating point ratio, and boundary
points are computed by walking from the previous vertex. A ratio that lands
just above an integer produces a near-zero last piece, and a computed
boundary may differ from the true endpoint in the last bits. The line
chunker compensates for both.
"""

import logging
from abc import ABC, abstractmethod
from math import asin, atan2, cos, degrees, floor, radians, sin, sqrt
from typing import Optional, Sequence

import pyproj

from skitrail_elevation.constants import GeodesicConfig
from skitrail_elevation.model.path_point import PathPoint

logger = logging.getLogger(__name__)


class Geodesic(ABC):
    """Earth model providing distances and line splitting.

    Coordinates are in decimal degrees (WGS84), distances in meters,
    bearings in degrees clockwise from North.
    """

    name: str = ""

    @abstractmethod
    def distance_m(self, a: PathPoint, b: PathPoint) -> float:
        """Horizontal distance between two points in meters."""

    @abstractmethod
    def point_along(self, a: PathPoint, b: PathPoint, distance_m: float) -> PathPoint:
        """Point at distance_m from a, heading towards b (without elevation)."""

    def length_m(self, path: Sequence[PathPoint]) -> float:
        """Total horizontal length of a path in meters."""
        return sum(self.distance_m(a=path[i], b=path[i + 1]) for i in range(len(path) - 1))

    def slice_along(self, path: Sequence[PathPoint], start_m: float, stop_m: float) -> list[PathPoint]:
        """Sub-path between two distances measured along the path.

        Vertices inside the slice are kept as they are, the boundaries are
        interpolated when they fall inside a segment. A slice starting at or
        beyond the end of the path collapses to the last vertex twice.

        Args:
            path: Path to slice (at least one point)
            start_m: Start distance along the path
            stop_m: Stop distance along the path

        Returns:
            List of points forming the slice.
        """
        result: list[PathPoint] = []
        travelled = 0.0

        for i in range(len(path) - 1):
            a, b = path[i], path[i + 1]
            segment_m = self.distance_m(a=a, b=b)
            segment_end_m = travelled + segment_m

            if not result:
                if start_m <= travelled:
                    result.append(a)
                elif start_m < segment_end_m:
                    result.append(self.point_along(a=a, b=b, distance_m=start_m - travelled))

            if result:
                if stop_m < segment_end_m:
                    result.append(self.point_along(a=a, b=b, distance_m=stop_m - travelled))
                    return result
                result.append(b)
                if stop_m == segment_end_m:
                    return result

            travelled = segment_end_m

        if not result:
            last = path[-1]
            return [last, last]
        return result

    def line_chunk(self, path: Sequence[PathPoint], segment_length_m: float) -> list[list[PathPoint]]:
        """Split a path into consecutive pieces of segment_length_m.

        The last piece holds whatever remains. Paths not longer than the
        segment length (or a non-positive segment length) give one piece.

        Args:
            path: Path to split
            segment_length_m: Target arc length of each piece

        Returns:
            List of pieces, each a list of points.
        """
        total_m = self.length_m(path)
        if segment_length_m <= 0 or total_m <= segment_length_m:
            return [list(path)]

        ratio = total_m / segment_length_m
        n_chunks = int(ratio) if ratio.is_integer() else floor(ratio) + 1

        return [
            self.slice_along(path, start_m=segment_length_m * i, stop_m=segment_length_m * (i + 1))
            for i in range(n_chunks)
        ]


class SphericalGeodesic(Geodesic):
    """Haversine geometry on a spherical Earth (R = 6,371 km).

    Example:
        geodesic = SphericalGeodesic()
        d = geodesic.distance_m(a=PathPoint(lon=10.0, lat=46.0), b=PathPoint(lon=10.0, lat=47.0))
    """

    name = "spherical"

    def __init__(self, radius_m: float = GeodesicConfig.EARTH_RADIUS_M):
        self.radius_m = radius_m

    def distance_m(self, a: PathPoint, b: PathPoint) -> float:
        """Great-circle distance using the Haversine formula."""
        dlat = radians(b.lat - a.lat)
        dlon = radians(b.lon - a.lon)
        h = sin(dlat / 2) ** 2 + cos(radians(a.lat)) * cos(radians(b.lat)) * sin(dlon / 2) ** 2
        return self.radius_m * 2 * atan2(sqrt(h), sqrt(1 - h))

    @staticmethod
    def initial_bearing_deg(a: PathPoint, b: PathPoint) -> float:
        """Initial bearing from a to b in degrees (0-360, clockwise from North)."""
        lon1, lat1 = radians(a.lon), radians(a.lat)
        lon2, lat2 = radians(b.lon), radians(b.lat)
        dlon = lon2 - lon1
        y = sin(dlon) * cos(lat2)
        x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
        return (degrees(atan2(y, x)) + 360) % 360

    def destination(self, origin: PathPoint, bearing_deg: float, distance_m: float) -> PathPoint:
        """Point reached from origin after distance_m along bearing_deg."""
        brng = radians(bearing_deg)
        lat1 = radians(origin.lat)
        lon1 = radians(origin.lon)
        d_r = distance_m / self.radius_m

        lat2 = asin(sin(lat1) * cos(d_r) + cos(lat1) * sin(d_r) * cos(brng))
        lon2 = lon1 + atan2(
            sin(brng) * sin(d_r) * cos(lat1),
            cos(d_r) - sin(lat1) * sin(lat2),
        )
        return PathPoint(lon=degrees(lon2), lat=degrees(lat2))

    def point_along(self, a: PathPoint, b: PathPoint, distance_m: float) -> PathPoint:
        bearing = self.initial_bearing_deg(a=a, b=b)
        return self.destination(origin=a, bearing_deg=bearing, distance_m=distance_m)


class EllipsoidalGeodesic(Geodesic):
    """Geodesics on an ellipsoid, backed by pyproj.Geod."""

    name = "ellipsoidal"

    def __init__(self, ellps: str = GeodesicConfig.ELLIPSOID):
        self._geod = pyproj.Geod(ellps=ellps)

    def distance_m(self, a: PathPoint, b: PathPoint) -> float:
        _, _, dist = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        return float(dist)

    def length_m(self, path: Sequence[PathPoint]) -> float:
        if len(path) < 2:
            return 0.0
        return float(self._geod.line_length([p.lon for p in path], [p.lat for p in path]))

    def point_along(self, a: PathPoint, b: PathPoint, distance_m: float) -> PathPoint:
        azimuth, _, _ = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        lon, lat, _ = self._geod.fwd(a.lon, a.lat, azimuth, distance_m)
        return PathPoint(lon=float(lon), lat=float(lat))


_MODELS: dict[str, type[Geodesic]] = {
    SphericalGeodesic.name: SphericalGeodesic,
    EllipsoidalGeodesic.name: EllipsoidalGeodesic,
}
assert set(_MODELS) == set(GeodesicConfig.MODELS)

_instances: dict[str, Geodesic] = {}


def get_geodesic(name: Optional[str] = None) -> Geodesic:
    """Return the shared Geodesic for a model name.

    Args:
        name: "spherical" or "ellipsoidal" (GeodesicConfig.DEFAULT_MODEL if not provided)

    Returns:
        Geodesic instance (stateless, safe to share).
    """
    name = name or GeodesicConfig.DEFAULT_MODEL
    if name not in _MODELS:
        raise ValueError(f"Unknown geodesic model '{name}', expected one of {GeodesicConfig.MODELS}")
    if name not in _instances:
        logger.debug(f"Creating {name} geodesic")
        _instances[name] = _MODELS[name]()
    return _instances[name]
