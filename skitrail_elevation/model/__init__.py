"""Data model classes for elevation profiles.

- PathPoint: Geometry atom (lon, lat, optional elevation)
- ElevationProfile: Persisted height samples of a path
- AscentDescentData, PitchData, ElevationData, LiftElevationData: Derived metrics
- errors: Error taxonomy of the engine
"""

from skitrail_elevation.model.elevation_data import (
    AscentDescentData,
    ElevationData,
    LiftElevationData,
    PitchData,
)
from skitrail_elevation.model.elevation_profile import ElevationProfile
from skitrail_elevation.model.errors import (
    AlreadyElevatedError,
    ElevationProfileError,
    EmptyPathError,
    InsufficientReferenceDataError,
    InvalidGeometryError,
    MissingElevationError,
    ProfileMismatchError,
    SequenceViolationError,
)
from skitrail_elevation.model.path_point import PathPoint, to_coordinates, to_path_points

__all__ = [
    "PathPoint",
    "to_path_points",
    "to_coordinates",
    "ElevationProfile",
    "AscentDescentData",
    "PitchData",
    "ElevationData",
    "LiftElevationData",
    "ElevationProfileError",
    "InvalidGeometryError",
    "EmptyPathError",
    "MissingElevationError",
    "InsufficientReferenceDataError",
    "SequenceViolationError",
    "AlreadyElevatedError",
    "ProfileMismatchError",
]
