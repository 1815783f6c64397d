"""Conversion between 2-D path geometry and stored elevation profiles.

- sample_elevation_profile: geometry + elevation source -> ElevationProfile
- get_profile_geometry: geometry + ElevationProfile -> fully elevated path

Sample points are never stored. Both directions recompute them with
extract_points_for_elevation_profile at the profile's target resolution,
so a profile only stays valid while its geometry is unchanged.
"""

import logging
from typing import Optional, Protocol, Sequence

from skitrail_elevation.constants import ProfileConfig
from skitrail_elevation.core.geodesic import Geodesic
from skitrail_elevation.core.line_chunker import extract_points_for_elevation_profile
from skitrail_elevation.model.elevation_profile import ElevationProfile
from skitrail_elevation.model.errors import ProfileMismatchError
from skitrail_elevation.model.path_point import PathPoint

logger = logging.getLogger(__name__)


class ElevationSource(Protocol):
    """Anything that can look up terrain elevation (e.g. DEMService)."""

    def get_elevation(self, lon: float, lat: float) -> Optional[float]: ...


def sample_elevation_profile(
    path: Sequence,
    elevation_source: ElevationSource,
    target_resolution_m: float = ProfileConfig.PROFILE_RESOLUTION_M,
    geodesic: Optional[Geodesic] = None,
) -> Optional[ElevationProfile]:
    """Sample terrain heights at evenly spaced points along a path.

    Args:
        path: PathPoints or GeoJSON positions (elevation is ignored)
        elevation_source: Elevation lookup
        target_resolution_m: Maximum spacing between samples
        geodesic: Earth model (default model if not provided)

    Returns:
        ElevationProfile, or None if any sample point has no elevation.
    """
    resolution_m, points = extract_points_for_elevation_profile(
        path,
        min_resolution_m=target_resolution_m,
        geodesic=geodesic,
    )

    heights: list[float] = []
    for point in points:
        elevation = elevation_source.get_elevation(lon=point.lon, lat=point.lat)
        if elevation is None:
            logger.warning(f"No elevation at ({point.lon:.6f}, {point.lat:.6f}), skipping profile")
            return None
        heights.append(float(elevation))

    logger.debug(f"Sampled {len(heights)} heights at {resolution_m:.2f}m resolution")
    return ElevationProfile(heights=heights, resolution=resolution_m, target_resolution=target_resolution_m)


def get_profile_geometry(
    path: Sequence,
    profile: ElevationProfile,
    geodesic: Optional[Geodesic] = None,
    tolerance: float = ProfileConfig.RESOLUTION_MATCH_TOLERANCE,
) -> list[PathPoint]:
    """Rebuild the elevated sample path from a geometry and its stored profile.

    Args:
        path: The 2-D (or 3-D) geometry the profile was sampled from
        profile: Stored elevation profile
        geodesic: Earth model (default model if not provided)
        tolerance: Allowed relative difference between stored and recomputed resolution

    Returns:
        Sample points carrying the stored heights, in path order.

    Raises:
        ProfileMismatchError: If the profile no longer matches the geometry.
    """
    resolution_m, points = extract_points_for_elevation_profile(
        path,
        min_resolution_m=profile.target_resolution,
        geodesic=geodesic,
    )

    if len(points) != len(profile.heights):
        raise ProfileMismatchError(
            f"Mismatch of points ({len(points)}) and elevation profile heights ({len(profile.heights)})"
        )

    if abs(resolution_m - profile.resolution) > profile.resolution * tolerance:
        raise ProfileMismatchError(
            f"Resolution mismatch between profile geometry ({resolution_m}) "
            f"and elevation profile ({profile.resolution})"
        )

    return [point.with_elevation(height) for point, height in zip(points, profile.heights)]
