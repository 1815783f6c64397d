"""RunFeature - Ski run with an optional stored elevation profile.

Runs store their 2-D geometry plus an ElevationProfile captured when the
run was processed. Elevation data is derived on demand from both.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from skitrail_elevation.core.elevation_analyzer import get_elevation_data
from skitrail_elevation.core.geodesic import Geodesic
from skitrail_elevation.core.profile_geometry import get_profile_geometry
from skitrail_elevation.features.geometry import as_line_path
from skitrail_elevation.model.elevation_data import ElevationData
from skitrail_elevation.model.elevation_profile import ElevationProfile
from skitrail_elevation.model.errors import ProfileMismatchError

logger = logging.getLogger(__name__)


@dataclass
class RunFeature:
    """A ski run.

    Attributes:
        id: Unique identifier
        name: Display name, None if unnamed
        geometry: GeoJSON geometry (LineString for most runs, Polygon for areas)
        elevation_profile: Stored height samples, only for LineString runs
    """

    id: str
    name: Optional[str]
    geometry: dict[str, Any]
    elevation_profile: Optional[ElevationProfile] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunFeature":
        """Create RunFeature from a GeoJSON feature."""
        properties = data.get("properties", {})
        profile = properties.get("elevationProfile")
        return cls(
            id=properties["id"],
            name=properties.get("name"),
            geometry=data["geometry"],
            elevation_profile=ElevationProfile.from_dict(profile) if profile else None,
        )


def get_run_elevation_data(run: RunFeature, geodesic: Optional[Geodesic] = None) -> Optional[ElevationData]:
    """Elevation data of a run, None when it cannot be derived.

    Args:
        run: Run with a LineString geometry and a stored elevation profile
        geodesic: Earth model (default model if not provided)

    Returns:
        ElevationData, or None for non-line geometries, missing or stale profiles.
    """
    path = as_line_path(run.geometry)
    if path is None or run.elevation_profile is None:
        return None

    try:
        profile_geometry = get_profile_geometry(path, profile=run.elevation_profile, geodesic=geodesic)
    except ProfileMismatchError as e:
        logger.warning(f"Ignoring stale elevation profile of run {run.id}: {e}")
        return None

    return get_elevation_data(profile_geometry, geodesic=geodesic)
