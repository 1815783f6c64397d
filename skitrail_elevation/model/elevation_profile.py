"""ElevationProfile - Persisted height samples of a path.

Heights are sampled at evenly spaced points along the 2-D path geometry.
The sample points are not stored: they are recomputed from the geometry by
chunking it at target_resolution, which must reproduce resolution.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ElevationProfile:
    """Height samples along a path.

    Attributes:
        heights: Elevations in meters, in path order, one per sample point
        resolution: Actual spacing between samples in meters (fitted, <= target_resolution)
        target_resolution: Requested maximum spacing in meters

    Example:
        profile = ElevationProfile(heights=[2400.0, 2390.5, 2381.0], resolution=9.8, target_resolution=10.0)
    """

    heights: list[float]
    resolution: float
    target_resolution: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.target_resolution <= 0:
            raise ValueError(f"target_resolution must be positive, got {self.target_resolution}")
        if self.resolution < 0:
            raise ValueError(f"resolution must not be negative, got {self.resolution}")
        # Fitted resolutions are computed as length / n, allow for rounding
        if self.resolution > self.target_resolution * (1 + 1e-9):
            raise ValueError(
                f"resolution {self.resolution} exceeds target_resolution {self.target_resolution}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted record keys."""
        return {
            "heights": list(self.heights),
            "resolution": self.resolution,
            "targetResolution": self.target_resolution,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ElevationProfile":
        """Create ElevationProfile from a persisted record."""
        return cls(
            heights=[float(h) for h in data["heights"]],
            resolution=float(data["resolution"]),
            target_resolution=float(data["targetResolution"]),
        )

    def __repr__(self) -> str:
        return (
            f"ElevationProfile({len(self.heights)} heights, "
            f"{self.resolution:.2f}m of {self.target_resolution:.2f}m target)"
        )
