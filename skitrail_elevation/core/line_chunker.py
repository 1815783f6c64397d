"""Evenly spaced path chunking for elevation profiles and pitch analysis.

Splitting a path with the geodesic primitive alone has several problems:
- it keeps the requested spacing, leaving an odd-sized last piece
  fix: fit a resolution that divides the path into an integer number of pieces
- a ratio just above an integer produces a near-zero last piece
  fix: drop a last piece shorter than a small fraction of the resolution
- the computed end point can be very close to, but not exactly, the original endpoint
  fix: pin the last point to the original endpoint
- synthetic points may carry elevations copied from segment endpoints
  fix: strip elevation from every point that is not an original vertex

The corrections are idempotent, so they are safe with any Geodesic.
"""

import logging
from dataclasses import dataclass
from math import ceil
from typing import Optional, Sequence

from skitrail_elevation.constants import ProfileConfig
from skitrail_elevation.core.geodesic import Geodesic, get_geodesic
from skitrail_elevation.model.errors import EmptyPathError
from skitrail_elevation.model.path_point import PathPoint, to_path_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkedLine:
    """Result of splitting a path into evenly sized chunks.

    Attributes:
        resolution_m: Fitted chunk length in meters
        chunks: Consecutive sub-paths; each chunk starts where the previous one ends
    """

    resolution_m: float
    chunks: list[list[PathPoint]]


def fit_resolution(
    path: Sequence[PathPoint],
    min_resolution_m: float,
    geodesic: Optional[Geodesic] = None,
) -> float:
    """Largest resolution <= min_resolution_m dividing the path into whole segments.

    Args:
        path: Path to fit
        min_resolution_m: Maximum allowed spacing in meters
        geodesic: Earth model (default model if not provided)

    Returns:
        Resolution in meters, 0 for a zero-length path.
    """
    if min_resolution_m <= 0:
        raise ValueError(f"Resolution must be positive, got {min_resolution_m}")

    geodesic = geodesic or get_geodesic()
    total_length_m = geodesic.length_m(to_path_points(path))
    if total_length_m == 0:
        return 0.0

    n_segments = ceil(total_length_m / min_resolution_m)
    return total_length_m / n_segments


def split_path_into_chunks(
    path: list[PathPoint],
    resolution_m: float,
    geodesic: Geodesic,
    short_chunk_fraction: float = ProfileConfig.SHORT_LAST_CHUNK_FRACTION,
) -> list[list[PathPoint]]:
    """Split a path with the geodesic primitive and correct its known artifacts.

    Args:
        path: Non-empty path
        resolution_m: Fitted chunk length
        geodesic: Earth model providing the raw split
        short_chunk_fraction: Last chunks shorter than this fraction of resolution_m are dropped

    Returns:
        Corrected chunks (new lists, input untouched).
    """
    chunks = [list(chunk) for chunk in geodesic.line_chunk(path, segment_length_m=resolution_m)]

    if len(chunks) > 1:
        last_length_m = geodesic.length_m(chunks[-1])
        if last_length_m < resolution_m * short_chunk_fraction:
            logger.debug(
                f"Dropping {last_length_m:.3g}m last chunk (resolution {resolution_m:.3f}m, {len(chunks)} chunks)"
            )
            chunks.pop()

    # Pin the endpoint so original-vertex checks by equality hold
    chunks[-1][-1] = path[-1]

    original_keys = {p.horizontal_key for p in path}
    return [[p if p.horizontal_key in original_keys else p.without_elevation() for p in chunk] for chunk in chunks]


def chunk_line(
    path: Sequence,
    min_resolution_m: float,
    geodesic: Optional[Geodesic] = None,
    short_chunk_fraction: float = ProfileConfig.SHORT_LAST_CHUNK_FRACTION,
) -> ChunkedLine:
    """Split a path into an integer number of equally long chunks.

    Args:
        path: PathPoints or GeoJSON positions
        min_resolution_m: Maximum chunk length in meters
        geodesic: Earth model (default model if not provided)
        short_chunk_fraction: Tolerance for dropping a floating point last chunk

    Returns:
        ChunkedLine with the fitted resolution and the chunks.
        A zero-length path gives a single degenerate chunk.

    Raises:
        EmptyPathError: If the path has no points.
    """
    points = to_path_points(path)
    if not points:
        raise EmptyPathError("Cannot chunk an empty path")

    geodesic = geodesic or get_geodesic()
    resolution_m = fit_resolution(points, min_resolution_m=min_resolution_m, geodesic=geodesic)
    chunks = split_path_into_chunks(
        points,
        resolution_m=resolution_m,
        geodesic=geodesic,
        short_chunk_fraction=short_chunk_fraction,
    )
    return ChunkedLine(resolution_m=resolution_m, chunks=chunks)


def extract_points_for_elevation_profile(
    path: Sequence,
    min_resolution_m: float,
    geodesic: Optional[Geodesic] = None,
) -> tuple[float, list[PathPoint]]:
    """Evenly spaced sampling points of a path, as stored in an elevation profile.

    One point per chunk start plus the final endpoint, horizontal coordinates only.

    Args:
        path: PathPoints or GeoJSON positions
        min_resolution_m: Maximum spacing between samples in meters
        geodesic: Earth model (default model if not provided)

    Returns:
        Tuple (resolution_m, points).
    """
    chunked = chunk_line(path, min_resolution_m=min_resolution_m, geodesic=geodesic)

    points = [chunk[0].without_elevation() for chunk in chunked.chunks]
    last_chunk = chunked.chunks[-1]
    if len(last_chunk) > 1:
        points.append(last_chunk[-1].without_elevation())

    return chunked.resolution_m, points
