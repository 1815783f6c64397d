"""PathPoint - The geometry atom of trail and lift paths.

A PathPoint is a single WGS84 coordinate with an optional elevation.
Points without elevation are either 2-D input vertices or synthetic
vertices created while splitting a path into chunks.

A path is a plain ordered list of PathPoints (not closed).
"""

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from skitrail_elevation.core.geodesic import Geodesic

Coordinates = Sequence[float]


@dataclass(frozen=True)
class PathPoint:
    """A point on a path with GPS coordinates and optional elevation.

    Attributes:
        lon: Longitude in decimal degrees (WGS84)
        lat: Latitude in decimal degrees (WGS84)
        elevation: Elevation in meters above sea level, None if unknown

    Example:
        point = PathPoint(lon=10.295, lat=46.985, elevation=2400.0)
    """

    lon: float
    lat: float
    elevation: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.elevation is not None and math.isnan(self.elevation):
            raise ValueError(f"PathPoint cannot have NaN elevation at ({self.lon}, {self.lat})")

    @classmethod
    def from_coords(cls, coords: Coordinates) -> "PathPoint":
        """Create from a GeoJSON position (lon, lat) or (lon, lat, elevation)."""
        if len(coords) < 2:
            raise ValueError(f"Position needs at least longitude and latitude, got {list(coords)}")
        elevation = float(coords[2]) if len(coords) >= 3 else None
        return cls(lon=float(coords[0]), lat=float(coords[1]), elevation=elevation)

    def to_coords(self) -> tuple[float, ...]:
        """Return a GeoJSON position, 3-D only when elevation is known."""
        if self.elevation is None:
            return (self.lon, self.lat)
        return (self.lon, self.lat, self.elevation)

    @property
    def has_elevation(self) -> bool:
        return self.elevation is not None

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    @property
    def horizontal_key(self) -> tuple[float, float]:
        """Exact horizontal identity, used to recognize original vertices."""
        return (self.lon, self.lat)

    def with_elevation(self, elevation: float) -> "PathPoint":
        return replace(self, elevation=float(elevation))

    def without_elevation(self) -> "PathPoint":
        if self.elevation is None:
            return self
        return replace(self, elevation=None)

    def distance_to(self, other: "PathPoint", geodesic: Optional["Geodesic"] = None) -> float:
        """Calculate horizontal distance to another point in meters.

        Args:
            other: Another PathPoint to measure distance to
            geodesic: Earth model to use (default model if not provided)

        Returns:
            Distance in meters.
        """
        from skitrail_elevation.core.geodesic import get_geodesic

        return (geodesic or get_geodesic()).distance_m(a=self, b=other)

    def __repr__(self) -> str:
        elev = "None" if self.elevation is None else f"{self.elevation:.1f}m"
        return f"PathPoint(lon={self.lon:.6f}, lat={self.lat:.6f}, elev={elev})"


def to_path_points(path: Sequence) -> list[PathPoint]:
    """Normalize a path given as PathPoints or GeoJSON positions into PathPoints."""
    return [p if isinstance(p, PathPoint) else PathPoint.from_coords(p) for p in path]


def to_coordinates(path: Sequence[PathPoint]) -> list[tuple[float, ...]]:
    """Convert PathPoints back into GeoJSON positions."""
    return [p.to_coords() for p in path]
