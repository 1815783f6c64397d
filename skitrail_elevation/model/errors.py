"""Errors raised by the elevation profile engine.

All errors are local to a single function call and are never retried:
the engine is pure, so the same input always fails the same way.

- InvalidGeometryError: the path cannot be analyzed (empty, or no elevation where required)
- InsufficientReferenceDataError: fewer than two elevated vertices to interpolate between
- SequenceViolationError: an internal invariant was broken (a defect, not a runtime condition)
- ProfileMismatchError: a stored ElevationProfile no longer matches its geometry
"""


class ElevationProfileError(Exception):
    """Base class for all elevation profile engine errors."""


class InvalidGeometryError(ElevationProfileError, ValueError):
    """Path geometry is unsuitable for the requested computation."""


class EmptyPathError(InvalidGeometryError):
    """Path has no vertices."""


class MissingElevationError(InvalidGeometryError):
    """A vertex that must carry elevation does not."""


class InsufficientReferenceDataError(ElevationProfileError, ValueError):
    """Fewer than two vertices carry elevation, so nothing can be interpolated."""


class SequenceViolationError(ElevationProfileError, RuntimeError):
    """Internal invariant broken while walking a path.

    Callers should let this propagate: it indicates a logic defect.
    """


class AlreadyElevatedError(SequenceViolationError):
    """A vertex selected for interpolation already has an elevation."""


class ProfileMismatchError(ElevationProfileError, ValueError):
    """Stored elevation profile does not correspond to the current geometry."""
