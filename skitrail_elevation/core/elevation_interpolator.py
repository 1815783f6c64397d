"""Distance-based elevation interpolation along chunked paths.

Vertices that already carry elevation are reference points. Every vertex
between two consecutive reference points gets an elevation linearly
interpolated by distance along the path:

    elevation = start + (end - start) * (d - d_start) / (d_end - d_start)

Reference points at the same distance give their start elevation to
everything in between. Reference elevations are never overwritten.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from skitrail_elevation.core.geodesic import Geodesic, get_geodesic
from skitrail_elevation.model.errors import (
    AlreadyElevatedError,
    InsufficientReferenceDataError,
    SequenceViolationError,
)
from skitrail_elevation.model.path_point import PathPoint

logger = logging.getLogger(__name__)


def cumulative_distances_m(points: Sequence[PathPoint], geodesic: Geodesic) -> np.ndarray:
    """Distance from the first point to every point along the path."""
    if not points:
        return np.zeros(0)
    steps = [geodesic.distance_m(a=points[i], b=points[i + 1]) for i in range(len(points) - 1)]
    return np.concatenate(([0.0], np.cumsum(steps)))


def interpolate_elevation(
    chunks: Sequence[Sequence[PathPoint]],
    geodesic: Optional[Geodesic] = None,
) -> list[list[PathPoint]]:
    """Fill in missing elevations of chunk vertices.

    Chunks are treated as one continuous path in order; shared boundary
    vertices appear twice at the same distance and get the same elevation.

    Args:
        chunks: Consecutive sub-paths, at least two vertices overall with elevation
        geodesic: Earth model (default model if not provided)

    Returns:
        New chunks with the same shape as the input.

    Raises:
        InsufficientReferenceDataError: If fewer than two vertices have elevation.
        AlreadyElevatedError: If a vertex to interpolate already has elevation.
    """
    if not chunks:
        return []

    geodesic = geodesic or get_geodesic()
    flat = [p for chunk in chunks for p in chunk]
    distances = cumulative_distances_m(flat, geodesic=geodesic)

    has_elevation = np.array([p.has_elevation for p in flat], dtype=bool)
    reference_idx = np.flatnonzero(has_elevation)
    if len(reference_idx) < 2:
        raise InsufficientReferenceDataError(
            f"At least two points with elevation are required, got {len(reference_idx)} of {len(flat)}"
        )

    elevations = np.array([p.elevation if p.has_elevation else np.nan for p in flat], dtype=float)

    for start, end in zip(reference_idx[:-1], reference_idx[1:]):
        if end <= start:
            raise SequenceViolationError(f"Reference points out of sequence: {start} -> {end}")
        if end == start + 1:
            continue

        span = slice(start + 1, end)
        if has_elevation[span].any():
            raise AlreadyElevatedError(f"Cannot interpolate over elevated points between {start} and {end}")

        start_elev = elevations[start]
        span_m = distances[end] - distances[start]
        if span_m > 0:
            factor = (distances[span] - distances[start]) / span_m
            elevations[span] = start_elev + (elevations[end] - start_elev) * factor
        else:
            elevations[span] = start_elev

    logger.debug(f"Interpolated {len(flat) - len(reference_idx)} of {len(flat)} points")

    result: list[list[PathPoint]] = []
    i = 0
    for chunk in chunks:
        new_chunk = []
        for p in chunk:
            if not p.has_elevation and not np.isnan(elevations[i]):
                p = p.with_elevation(float(elevations[i]))
            new_chunk.append(p)
            i += 1
        result.append(new_chunk)
    return result
