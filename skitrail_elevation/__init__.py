"""Ski Trail Elevation - Elevation profiles and terrain metrics for ski runs and lifts.

Reconstructs fully elevated paths from sparse, evenly spaced height samples
and derives the metrics used to classify and render runs and lifts:
- Ascent, descent, min/max elevation and vertical
- Average, maximum and overall pitch
- Inclined (3-D) length

Modules:
    core: Geodesic primitive, chunking, interpolation, metrics, profile sampling
    model: Data structures (PathPoint, ElevationProfile, ElevationData, errors)
    features: Run and lift adapters

Example:
    from skitrail_elevation.core import get_elevation_data, get_profile_geometry
    from skitrail_elevation.model import ElevationProfile
"""
