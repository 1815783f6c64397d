"""Elevation metrics derived on demand from a fully elevated path.

None of these records are persisted. Pitch values are slope ratios
(elevation change / horizontal distance). A pitch of None means the path
is too short for a meaningful estimate and must not be read as flat.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from skitrail_elevation.model.path_point import PathPoint


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class AscentDescentData:
    """Cumulative climbing and extrema of an elevated path.

    Attributes:
        ascent_in_meters: Sum of all elevation gains
        descent_in_meters: Sum of all elevation losses (positive)
        min_elevation_in_meters: Lowest elevation
        max_elevation_in_meters: Highest elevation
        vertical_in_meters: max - min
    """

    ascent_in_meters: float
    descent_in_meters: float
    min_elevation_in_meters: float
    max_elevation_in_meters: float
    vertical_in_meters: float


@dataclass(frozen=True)
class PitchData:
    """Slope statistics of an elevated path.

    Attributes:
        average_pitch_in_percent: Sum of |elevation change| per original segment / horizontal length
        max_pitch_in_percent: Steepest fixed-length chunk
        overall_pitch_in_percent: |last - first elevation| / horizontal length
        inclined_length_in_meters: 3-D length over the original segments
        pitch_calculation_resolution_in_meters: Chunk length used for max pitch
    """

    average_pitch_in_percent: Optional[float]
    max_pitch_in_percent: Optional[float]
    overall_pitch_in_percent: Optional[float]
    inclined_length_in_meters: float
    pitch_calculation_resolution_in_meters: float

    @property
    def has_pitch(self) -> bool:
        """Whether pitch values are known (False for paths too short to estimate)."""
        return self.max_pitch_in_percent is not None


@dataclass(frozen=True)
class ElevationData(AscentDescentData, PitchData):
    """All elevation metrics of a path, plus the elevated geometry they came from."""

    profile_geometry: tuple[PathPoint, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys; profile geometry as GeoJSON positions."""
        data = {_camel(k): v for k, v in asdict(self).items() if k != "profile_geometry"}
        data["profileGeometry"] = {
            "type": "LineString",
            "coordinates": [list(p.to_coords()) for p in self.profile_geometry],
        }
        return data


@dataclass(frozen=True)
class LiftElevationData(ElevationData):
    """Elevation metrics of a lift with speeds derived from its ride duration.

    Attributes:
        speed_in_meters_per_second: Inclined length / duration, None without duration
        vertical_speed_in_meters_per_second: Vertical / duration, None without duration
    """

    speed_in_meters_per_second: Optional[float] = None
    vertical_speed_in_meters_per_second: Optional[float] = None
