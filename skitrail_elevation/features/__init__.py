"""Adapters from run and lift features to elevation data.

- RunFeature: 2-D geometry plus stored ElevationProfile
- LiftFeature: 3-D geometry plus optional ride duration

Both return None when their geometry is not a single continuous line.
"""

from skitrail_elevation.features.lift import LiftFeature, get_lift_elevation_data
from skitrail_elevation.features.run import RunFeature, get_run_elevation_data

__all__ = [
    "RunFeature",
    "get_run_elevation_data",
    "LiftFeature",
    "get_lift_elevation_data",
]
