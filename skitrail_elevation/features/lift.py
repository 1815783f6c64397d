"""LiftFeature - Ski lift whose geometry carries elevation directly.

Lift lines are short and straight, so their elevation is stored on the
geometry vertices instead of in a separate profile. Ride speeds are
derived from the inclined length when the ride duration is known.
"""

from dataclasses import dataclass
from typing import Any, Optional

from skitrail_elevation.core.elevation_analyzer import get_elevation_data
from skitrail_elevation.core.geodesic import Geodesic
from skitrail_elevation.features.geometry import as_line_path
from skitrail_elevation.model.elevation_data import LiftElevationData


@dataclass
class LiftFeature:
    """A ski lift.

    Attributes:
        id: Unique identifier
        name: Display name, None if unnamed
        geometry: GeoJSON geometry, a 3-D LineString for analyzable lifts
        duration_in_seconds: Ride duration, None if unknown
    """

    id: str
    name: Optional[str]
    geometry: dict[str, Any]
    duration_in_seconds: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LiftFeature":
        """Create LiftFeature from a GeoJSON feature."""
        properties = data.get("properties", {})
        return cls(
            id=properties["id"],
            name=properties.get("name"),
            geometry=data["geometry"],
            duration_in_seconds=properties.get("duration"),
        )


def get_lift_elevation_data(lift: LiftFeature, geodesic: Optional[Geodesic] = None) -> Optional[LiftElevationData]:
    """Elevation data and ride speeds of a lift.

    Args:
        lift: Lift with a 3-D LineString geometry
        geodesic: Earth model (default model if not provided)

    Returns:
        LiftElevationData, or None for non-line or 2-D geometries.
    """
    path = as_line_path(lift.geometry)
    if path is None or not path[0].has_elevation:
        return None

    data = get_elevation_data(path, geodesic=geodesic)
    duration = lift.duration_in_seconds

    return LiftElevationData(
        **{name: getattr(data, name) for name in data.__dataclass_fields__},
        speed_in_meters_per_second=data.inclined_length_in_meters / duration if duration else None,
        vertical_speed_in_meters_per_second=data.vertical_in_meters / duration if duration else None,
    )
