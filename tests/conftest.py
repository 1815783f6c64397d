"""Shared pytest fixtures for skitrail_elevation tests.

Provides MockElevationSource and reusable test paths.

COORDINATE SYSTEM:
    Most tests use coordinates near the equator (lat~0) and prime meridian (lon~0)
    where the math is simple: 1 degree ≈ 111,195 meters in both directions
    on the 6,371 km sphere.
"""

from typing import Optional

import pytest

from skitrail_elevation.model.path_point import PathPoint

METERS_PER_DEGREE = 111_195.0


# =============================================================================
# MOCK ELEVATION SOURCE
# =============================================================================


class MockElevationSource:
    """Elevation source returning synthetic elevation from a linear formula.

    Elevation formula:
        elevation = base_elev + lat * METERS_PER_DEGREE * slope_ns_pct / 100

    Going south (negative lat) elevation drops when slope_ns_pct > 0.
    Points south of no_data_below_lat have no elevation.
    """

    def __init__(
        self,
        base_elevation: float,
        slope_ns_pct: float,
        no_data_below_lat: Optional[float] = None,
    ) -> None:
        self.base_elevation = base_elevation
        self.slope_ns_pct = slope_ns_pct
        self.no_data_below_lat = no_data_below_lat
        self.queries: list[tuple[float, float]] = []

    def get_elevation(self, lon: float, lat: float) -> Optional[float]:
        self.queries.append((lon, lat))
        if self.no_data_below_lat is not None and lat < self.no_data_below_lat:
            return None
        return self.base_elevation + lat * METERS_PER_DEGREE * (self.slope_ns_pct / 100)


@pytest.fixture
def mock_source_blue_slope_south() -> MockElevationSource:
    """20% slope going south: 2500m at lat=0, 2300m 1000m south."""
    return MockElevationSource(base_elevation=2500.0, slope_ns_pct=20.0)


# =============================================================================
# PATH FIXTURES
# =============================================================================


@pytest.fixture
def path_2d_1km_south() -> list[PathPoint]:
    """Straight 2-D path from origin ~1000m south (0.009°), 5 vertices."""
    return [PathPoint(lon=0.0, lat=-0.00225 * i) for i in range(5)]


@pytest.fixture
def path_2d_bent_600m() -> list[PathPoint]:
    """2-D path with turns: ~300m south, ~200m east, ~100m south."""
    return [
        PathPoint(lon=0.0, lat=0.0),
        PathPoint(lon=0.0, lat=-0.0027),
        PathPoint(lon=0.0018, lat=-0.0027),
        PathPoint(lon=0.0018, lat=-0.0036),
    ]


@pytest.fixture
def path_3d_undulating() -> list[PathPoint]:
    """3-D path along the equator, ~100m segments: climb, dip, climb."""
    return [
        PathPoint(lon=0.0, lat=0.0, elevation=100.0),
        PathPoint(lon=0.0009, lat=0.0, elevation=150.0),
        PathPoint(lon=0.0018, lat=0.0, elevation=130.0),
        PathPoint(lon=0.0027, lat=0.0, elevation=180.0),
    ]


@pytest.fixture
def run_line_real_coords() -> list[tuple[float, float, float]]:
    """Short run in the Alps: 10m rise over ~20.45m, then 5m fall over ~39.99m."""
    return [
        (11.177425600412874, 47.31265682344346, 100.0),
        (11.177224899122194, 47.312533118812354, 110.0),
        (11.176823496540862, 47.31229807921545, 105.0),
    ]


@pytest.fixture
def mock_source_no_data_south() -> MockElevationSource:
    """Same 20% slope, but no coverage south of ~556m below the origin."""
    return MockElevationSource(base_elevation=2500.0, slope_ns_pct=20.0, no_data_below_lat=-0.005)
