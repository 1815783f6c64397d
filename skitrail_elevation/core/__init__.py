"""Core elevation profile engine.

- geodesic: Earth models (distance, length, line splitting)
- line_chunker: Resolution fitting and evenly spaced chunking
- elevation_interpolator: Distance-based elevation interpolation
- elevation_analyzer: Ascent/descent and pitch metrics
- profile_geometry: Sampling and reconstructing stored elevation profiles
- dem_service: GeoTIFF elevation source
"""

from skitrail_elevation.core.dem_service import DEMService
from skitrail_elevation.core.elevation_analyzer import (
    get_ascent_and_descent,
    get_elevation_data,
    get_pitch_data,
)
from skitrail_elevation.core.elevation_interpolator import interpolate_elevation
from skitrail_elevation.core.geodesic import (
    EllipsoidalGeodesic,
    Geodesic,
    SphericalGeodesic,
    get_geodesic,
)
from skitrail_elevation.core.line_chunker import (
    ChunkedLine,
    chunk_line,
    extract_points_for_elevation_profile,
    fit_resolution,
)
from skitrail_elevation.core.profile_geometry import (
    ElevationSource,
    get_profile_geometry,
    sample_elevation_profile,
)

__all__ = [
    # Geodesic
    "Geodesic",
    "SphericalGeodesic",
    "EllipsoidalGeodesic",
    "get_geodesic",
    # Line chunker
    "ChunkedLine",
    "fit_resolution",
    "chunk_line",
    "extract_points_for_elevation_profile",
    # Interpolation
    "interpolate_elevation",
    # Metrics
    "get_ascent_and_descent",
    "get_pitch_data",
    "get_elevation_data",
    # Profiles
    "ElevationSource",
    "sample_elevation_profile",
    "get_profile_geometry",
    "DEMService",
]
