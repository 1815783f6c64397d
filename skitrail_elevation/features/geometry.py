"""GeoJSON geometry helpers shared by run and lift features."""

from typing import Any, Optional

from shapely.geometry import LineString, shape

from skitrail_elevation.model.path_point import PathPoint, to_path_points


def as_line_path(geometry: Optional[dict[str, Any]]) -> Optional[list[PathPoint]]:
    """Path of a GeoJSON LineString geometry, None for any other geometry.

    Args:
        geometry: GeoJSON geometry mapping (Point, LineString, Polygon, ...)

    Returns:
        PathPoints of the line (3-D when the coordinates carry elevation), or None.
    """
    if not geometry or geometry.get("type") != "LineString" or len(geometry.get("coordinates", [])) < 2:
        return None

    line = shape(geometry)
    if not isinstance(line, LineString) or line.is_empty:
        return None

    return to_path_points(line.coords)
