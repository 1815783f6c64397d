"""Terrain metrics of fully elevated trail and lift paths.

Provides:
- Ascent/descent accumulation (cumulative gain, loss and extrema)
- Pitch analysis (average, maximum and overall slope, inclined length)

Per-segment pitch is unreliable when the elevation source is coarser than
the path's vertex spacing: a 1m jump over a 1m segment reads as a 100%
grade. The average pitch therefore uses the original segments (noise
cancels out when summed), while the maximum pitch is measured over
evenly sized chunks of about PITCH_RESOLUTION_M. Paths shorter than half
that resolution get no pitch values at all.
"""

import logging
from math import sqrt
from typing import Optional, Sequence

import numpy as np

from skitrail_elevation.constants import ProfileConfig
from skitrail_elevation.core.elevation_interpolator import interpolate_elevation
from skitrail_elevation.core.geodesic import Geodesic, get_geodesic
from skitrail_elevation.core.line_chunker import chunk_line
from skitrail_elevation.model.elevation_data import AscentDescentData, ElevationData, PitchData
from skitrail_elevation.model.errors import EmptyPathError, MissingElevationError
from skitrail_elevation.model.path_point import PathPoint, to_path_points

logger = logging.getLogger(__name__)


def _require_elevated(points: list[PathPoint], purpose: str) -> np.ndarray:
    """Elevations of all points, failing if the path is empty or 2-D."""
    if not points:
        raise EmptyPathError(f"Empty paths are not supported for {purpose}")
    if not points[0].has_elevation:
        raise MissingElevationError(f"Elevation data is required for {purpose}")
    missing = [i for i, p in enumerate(points) if not p.has_elevation]
    if missing:
        raise MissingElevationError(f"Elevation data is required for {purpose}, missing at points {missing}")
    return np.array([p.elevation for p in points], dtype=float)


def get_ascent_and_descent(path: Sequence) -> AscentDescentData:
    """Accumulate elevation gain, loss and extrema along a path.

    Args:
        path: Fully elevated PathPoints or 3-D GeoJSON positions

    Returns:
        AscentDescentData for the path.

    Raises:
        EmptyPathError: If the path has no points.
        MissingElevationError: If the path has points without elevation.
    """
    elevations = _require_elevated(to_path_points(path), purpose="ascent and descent")

    diffs = np.diff(elevations)
    min_elev = float(elevations.min())
    max_elev = float(elevations.max())

    return AscentDescentData(
        ascent_in_meters=float(diffs[diffs > 0].sum()),
        descent_in_meters=float(-diffs[diffs < 0].sum()),
        min_elevation_in_meters=min_elev,
        max_elevation_in_meters=max_elev,
        vertical_in_meters=max_elev - min_elev,
    )


def get_max_pitch(
    points: list[PathPoint],
    min_resolution_m: float,
    geodesic: Geodesic,
) -> tuple[float, float]:
    """Steepest pitch over evenly sized chunks of an elevated path.

    Args:
        points: Fully elevated path
        min_resolution_m: Maximum chunk length
        geodesic: Earth model

    Returns:
        Tuple (max_pitch, resolution_m) with the fitted chunk length.
    """
    chunked = chunk_line(points, min_resolution_m=min_resolution_m, geodesic=geodesic)
    chunks = interpolate_elevation(chunked.chunks, geodesic=geodesic)

    max_pitch = 0.0
    for chunk in chunks:
        chunk_length_m = geodesic.length_m(chunk)
        if chunk_length_m == 0:
            continue
        pitch = abs((chunk[-1].elevation - chunk[0].elevation) / chunk_length_m)
        max_pitch = max(max_pitch, pitch)

    return max_pitch, chunked.resolution_m


def get_pitch_data(
    path: Sequence,
    min_resolution_m: float = ProfileConfig.PITCH_RESOLUTION_M,
    geodesic: Optional[Geodesic] = None,
) -> PitchData:
    """Calculate pitch statistics and inclined length of an elevated path.

    Args:
        path: Fully elevated PathPoints or 3-D GeoJSON positions
        min_resolution_m: Maximum chunk length for the max pitch calculation
        geodesic: Earth model (default model if not provided)

    Returns:
        PitchData. Pitch values are None when the path is shorter than
        half of min_resolution_m.

    Raises:
        EmptyPathError: If the path has no points.
        MissingElevationError: If the path has points without elevation.
    """
    geodesic = geodesic or get_geodesic()
    points = to_path_points(path)
    elevations = _require_elevated(points, purpose="slope analysis")

    total_length_m = 0.0
    total_inclined_m = 0.0
    total_elevation_change_m = 0.0
    for i in range(len(points) - 1):
        length_m = geodesic.distance_m(a=points[i], b=points[i + 1])
        rise_m = elevations[i + 1] - elevations[i]
        total_length_m += length_m
        total_inclined_m += sqrt(length_m**2 + rise_m**2)
        total_elevation_change_m += abs(rise_m)

    # Elevation noise dominates on very short paths
    if total_length_m < min_resolution_m / 2:
        logger.debug(f"Path of {total_length_m:.1f}m is too short for pitch at {min_resolution_m}m resolution")
        return PitchData(
            average_pitch_in_percent=None,
            max_pitch_in_percent=None,
            overall_pitch_in_percent=None,
            inclined_length_in_meters=float(total_inclined_m),
            pitch_calculation_resolution_in_meters=total_length_m,
        )

    max_pitch, resolution_m = get_max_pitch(points, min_resolution_m=min_resolution_m, geodesic=geodesic)
    overall_change_m = abs(elevations[-1] - elevations[0])

    return PitchData(
        average_pitch_in_percent=float(total_elevation_change_m / total_length_m),
        max_pitch_in_percent=float(max_pitch),
        overall_pitch_in_percent=float(overall_change_m / total_length_m),
        inclined_length_in_meters=float(total_inclined_m),
        pitch_calculation_resolution_in_meters=resolution_m,
    )


def get_elevation_data(
    path: Sequence,
    min_resolution_m: float = ProfileConfig.PITCH_RESOLUTION_M,
    geodesic: Optional[Geodesic] = None,
) -> ElevationData:
    """Derive all elevation metrics of a fully elevated path.

    Args:
        path: Fully elevated PathPoints or 3-D GeoJSON positions
        min_resolution_m: Maximum chunk length for the max pitch calculation
        geodesic: Earth model (default model if not provided)

    Returns:
        ElevationData combining ascent/descent and pitch metrics.
    """
    points = to_path_points(path)
    ascent_descent = get_ascent_and_descent(points)
    pitch = get_pitch_data(points, min_resolution_m=min_resolution_m, geodesic=geodesic)

    return ElevationData(
        ascent_in_meters=ascent_descent.ascent_in_meters,
        descent_in_meters=ascent_descent.descent_in_meters,
        min_elevation_in_meters=ascent_descent.min_elevation_in_meters,
        max_elevation_in_meters=ascent_descent.max_elevation_in_meters,
        vertical_in_meters=ascent_descent.vertical_in_meters,
        average_pitch_in_percent=pitch.average_pitch_in_percent,
        max_pitch_in_percent=pitch.max_pitch_in_percent,
        overall_pitch_in_percent=pitch.overall_pitch_in_percent,
        inclined_length_in_meters=pitch.inclined_length_in_meters,
        pitch_calculation_resolution_in_meters=pitch.pitch_calculation_resolution_in_meters,
        profile_geometry=tuple(points),
    )
