"""Tests for sampling and reconstructing elevation profiles.

Tests: sample_elevation_profile, get_profile_geometry
Focus: Round trip through stored profiles, stale profile detection,
consistency with metrics computed from interpolated chunks

Note: MockElevationSource is defined in conftest.py.
"""

from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from skitrail_elevation.core.elevation_analyzer import get_elevation_data
from skitrail_elevation.core.elevation_interpolator import interpolate_elevation
from skitrail_elevation.core.line_chunker import chunk_line, extract_points_for_elevation_profile
from skitrail_elevation.core.profile_geometry import get_profile_geometry, sample_elevation_profile
from skitrail_elevation.model.elevation_profile import ElevationProfile
from skitrail_elevation.model.errors import ProfileMismatchError
from skitrail_elevation.model.path_point import PathPoint

if TYPE_CHECKING:
    from conftest import MockElevationSource


class TestSampleElevationProfile:
    """sample_elevation_profile - capture heights at even spacing."""

    def test_samples_every_profile_point(
        self,
        path_2d_1km_south: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(path_2d_1km_south, elevation_source=mock_source_blue_slope_south)

        assert profile is not None
        assert profile.target_resolution == 10
        assert profile.resolution <= 10
        # ~1000.75m at 10m: 101 segments, 102 samples
        assert len(profile.heights) == 102
        assert len(mock_source_blue_slope_south.queries) == 102
        assert profile.heights[0] == pytest.approx(2500.0)
        assert profile.heights[-1] == pytest.approx(2300.0, abs=0.5)

    def test_heights_follow_path_order(
        self,
        path_2d_bent_600m: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(
            path_2d_bent_600m,
            elevation_source=mock_source_blue_slope_south,
            target_resolution_m=25,
        )
        assert profile is not None
        assert all(b <= a + 1e-6 for a, b in zip(profile.heights, profile.heights[1:]))

    def test_missing_elevation_gives_none(
        self,
        path_2d_1km_south: list[PathPoint],
        mock_source_no_data_south: "MockElevationSource",
    ) -> None:
        assert sample_elevation_profile(path_2d_1km_south, elevation_source=mock_source_no_data_south) is None


class TestGetProfileGeometry:
    """get_profile_geometry - rebuild the elevated path from a stored profile."""

    def test_round_trip(
        self,
        path_2d_bent_600m: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(
            path_2d_bent_600m,
            elevation_source=mock_source_blue_slope_south,
            target_resolution_m=20,
        )
        assert profile is not None

        elevated = get_profile_geometry(path_2d_bent_600m, profile=profile)

        assert [p.elevation for p in elevated] == profile.heights
        assert elevated[0].horizontal_key == path_2d_bent_600m[0].horizontal_key
        assert elevated[-1].horizontal_key == path_2d_bent_600m[-1].horizontal_key

    def test_survives_persistence(
        self,
        path_2d_bent_600m: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(path_2d_bent_600m, elevation_source=mock_source_blue_slope_south)
        assert profile is not None

        restored = ElevationProfile.from_dict(profile.to_dict())
        elevated = get_profile_geometry([p.to_coords() for p in path_2d_bent_600m], profile=restored)
        assert len(elevated) == len(profile.heights)

    def test_height_count_mismatch_raises(self, path_2d_1km_south: list[PathPoint]) -> None:
        profile = ElevationProfile(heights=[2500.0, 2400.0, 2300.0], resolution=9.9, target_resolution=10.0)
        with pytest.raises(ProfileMismatchError, match="Mismatch of points"):
            get_profile_geometry(path_2d_1km_south, profile=profile)

    def test_resolution_mismatch_raises(
        self,
        path_2d_1km_south: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(path_2d_1km_south, elevation_source=mock_source_blue_slope_south)
        assert profile is not None

        stale = replace(profile, resolution=profile.resolution * 0.99)
        with pytest.raises(ProfileMismatchError, match="Resolution mismatch"):
            get_profile_geometry(path_2d_1km_south, profile=stale)

    def test_edited_geometry_is_detected(
        self,
        path_2d_1km_south: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        """Extending the path by ~50m invalidates the stored profile."""
        profile = sample_elevation_profile(path_2d_1km_south, elevation_source=mock_source_blue_slope_south)
        assert profile is not None

        edited = [*path_2d_1km_south, PathPoint(lon=0.0, lat=-0.00945)]
        with pytest.raises(ProfileMismatchError):
            get_profile_geometry(edited, profile=profile)

    def test_small_resolution_drift_is_tolerated(
        self,
        path_2d_1km_south: list[PathPoint],
        mock_source_blue_slope_south: "MockElevationSource",
    ) -> None:
        profile = sample_elevation_profile(path_2d_1km_south, elevation_source=mock_source_blue_slope_south)
        assert profile is not None

        drifted = replace(profile, resolution=profile.resolution * 0.9995)
        assert len(get_profile_geometry(path_2d_1km_south, profile=drifted)) == len(profile.heights)


class TestReconstructionConsistency:
    """Metrics from a reconstructed profile match metrics from interpolated chunks."""

    def test_matches_interpolated_chunking(self) -> None:
        # Elevation linear in latitude along every segment, as the mock source reports it
        def elevation_at(lat: float) -> float:
            return 2500.0 + lat * 111_195.0 * 0.3

        class _LatitudeSource:
            def get_elevation(self, lon: float, lat: float) -> float:
                return elevation_at(lat)

        path_3d = [
            PathPoint(lon=0.0, lat=0.0, elevation=elevation_at(0.0)),
            PathPoint(lon=0.0005, lat=-0.002, elevation=elevation_at(-0.002)),
            PathPoint(lon=0.0, lat=-0.0035, elevation=elevation_at(-0.0035)),
        ]
        path_2d = [p.without_elevation() for p in path_3d]

        profile = sample_elevation_profile(path_2d, elevation_source=_LatitudeSource(), target_resolution_m=10)
        assert profile is not None
        reconstructed = get_elevation_data(get_profile_geometry(path_2d, profile=profile))

        chunked = chunk_line(path_3d, min_resolution_m=10)
        chunks = interpolate_elevation(chunked.chunks)
        direct_path = [chunk[0] for chunk in chunks] + [chunks[-1][-1]]
        direct = get_elevation_data(direct_path)

        _, sample_points = extract_points_for_elevation_profile(path_2d, min_resolution_m=10)
        assert len(direct_path) == len(sample_points)

        assert reconstructed.ascent_in_meters == pytest.approx(direct.ascent_in_meters, abs=1e-3)
        assert reconstructed.descent_in_meters == pytest.approx(direct.descent_in_meters, abs=1e-3)
        assert reconstructed.vertical_in_meters == pytest.approx(direct.vertical_in_meters, abs=1e-3)
        assert reconstructed.max_pitch_in_percent == pytest.approx(direct.max_pitch_in_percent, abs=1e-4)
        assert reconstructed.average_pitch_in_percent == pytest.approx(direct.average_pitch_in_percent, abs=1e-4)
        assert reconstructed.inclined_length_in_meters == pytest.approx(direct.inclined_length_in_meters, abs=1e-3)
