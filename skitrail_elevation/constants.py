"""Configuration constants for skitrail_elevation.

All tunable parameters are centralized here.

Classes:
    GeodesicConfig: Earth model used for distances and line splitting
    ProfileConfig: Sampling resolutions and empirical tolerances
    DEMConfig: Raster elevation source defaults
"""

from pathlib import Path

# Package root directory (where skitrail_elevation/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of skitrail_elevation/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Data directory outside package (rasters are not shipped with the package)
DATA_DIR = PROJECT_ROOT / "data"


class GeodesicConfig:
    """Earth model used by the geodesic primitive."""

    # Earth's radius in meters (WGS84 spherical approximation)
    EARTH_RADIUS_M = 6_371_000

    # Ellipsoid for pyproj.Geod when the ellipsoidal model is selected
    ELLIPSOID = "WGS84"

    MODELS = ("spherical", "ellipsoidal")
    DEFAULT_MODEL = "spherical"
    assert DEFAULT_MODEL in MODELS


class ProfileConfig:
    """Elevation profile sampling and pitch calculation parameters."""

    # Maximum chunk length for max pitch calculation (meters).
    # Shorter paths than half of this have no pitch values.
    PITCH_RESOLUTION_M = 25

    # Requested spacing between stored elevation profile samples (meters)
    PROFILE_RESOLUTION_M = 10

    # Empirical tolerances, tuned against the spherical line splitting.
    # A final chunk shorter than this fraction of the resolution is a floating point artifact.
    SHORT_LAST_CHUNK_FRACTION = 0.01
    # Relative difference allowed between a stored and a recomputed profile resolution
    RESOLUTION_MATCH_TOLERANCE = 0.001


class DEMConfig:
    """Raster elevation source defaults."""

    # Single band GeoTIFF with elevations in meters
    DEFAULT_DEM_PATH = DATA_DIR / "dem.tif"

    # CRS of all path coordinates
    WGS84_CRS = "EPSG:4326"
