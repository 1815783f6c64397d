"""Digital Elevation Model (DEM) service for terrain elevation queries.

Provides lazily loaded access to a single-band elevation GeoTIFF:
- Fast O(1) elevation lookup using a pre-loaded NumPy array
- Automatic coordinate transformation from WGS84 to the DEM's native CRS
- Thread-safe loading on first access

Used as the elevation source when sampling elevation profiles.
"""

import logging
import threading
import time
from pathlib import Path
from typing import Optional

import numpy as np
import rasterio
from rasterio.warp import transform

from skitrail_elevation.constants import DEMConfig

logger = logging.getLogger(__name__)


class DEMService:
    """Elevation sampling from a GeoTIFF.

    The raster is read into memory on first access and cached for fast
    subsequent queries.

    Example:
        dem = DEMService(dem_path=Path("data/dem.tif"))
        elevation = dem.get_elevation(lon=10.295, lat=46.985)
    """

    def __init__(self, dem_path: Optional[Path] = None):
        """Initialize with optional DEM path.

        Args:
            dem_path: Path to a GeoTIFF (DEMConfig.DEFAULT_DEM_PATH if not provided)
        """
        self._dem_path = Path(dem_path or DEMConfig.DEFAULT_DEM_PATH)
        self._load_lock = threading.Lock()
        self._dem_crs: Optional[str] = None
        self._dem_array: Optional[np.ndarray] = None
        self._dem_bounds = None
        self._dem_transform = None
        self._dem_nodata = None

    @property
    def dem_path(self) -> Path:
        return self._dem_path

    @property
    def is_loaded(self) -> bool:
        """Check if DEM data has been fully loaded into memory."""
        return self._dem_transform is not None

    def _ensure_loaded(self) -> None:
        """Load DEM into memory on first access (thread-safe)."""
        if self.is_loaded:
            return

        with self._load_lock:
            # Double-check after acquiring lock
            if self.is_loaded:
                return

            if not self._dem_path.exists():
                raise FileNotFoundError(f"DEM file not found at {self._dem_path}")

            logger.info(f"Loading DEM from {self._dem_path}...")
            start_time = time.time()

            with rasterio.open(self._dem_path) as dem:
                self._dem_crs = dem.crs.to_string() if dem.crs else DEMConfig.WGS84_CRS
                self._dem_array = dem.read(1)
                self._dem_nodata = dem.nodata
                self._dem_bounds = dem.bounds
                # Set _dem_transform LAST - this is what is_loaded checks
                self._dem_transform = dem.transform

            elapsed = time.time() - start_time
            logger.info(f"DEM loaded in {elapsed:.2f}s (shape: {self._dem_array.shape}, CRS: {self._dem_crs})")

    def get_elevation(self, lon: float, lat: float) -> Optional[float]:
        """Get elevation at a single point using direct NumPy array lookup.

        Args:
            lon: Longitude in decimal degrees (WGS84)
            lat: Latitude in decimal degrees (WGS84)

        Returns:
            Elevation in meters, or None if outside coverage or invalid.
        """
        self._ensure_loaded()

        if self._dem_crs != DEMConfig.WGS84_CRS:
            xs, ys = transform(DEMConfig.WGS84_CRS, self._dem_crs, [lon], [lat])
            x, y = xs[0], ys[0]
        else:
            x, y = lon, lat

        col, row = ~self._dem_transform * (x, y)
        col, row = int(np.floor(col)), int(np.floor(row))

        if row < 0 or row >= self._dem_array.shape[0] or col < 0 or col >= self._dem_array.shape[1]:
            logger.warning(f"Coordinates outside DEM bounds: lon={lon}, lat={lat} (row={row}, col={col})")
            return None

        elev = self._dem_array[row, col]

        if self._dem_nodata is not None and elev == self._dem_nodata:
            logger.warning(f"No-data value at coordinates: lon={lon}, lat={lat} (nodata={self._dem_nodata})")
            return None
        if np.isnan(elev):
            logger.warning(f"NaN elevation at coordinates: lon={lon}, lat={lat}")
            return None

        return float(elev)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_lon, min_lat, max_lon, max_lat) bounds in WGS84."""
        self._ensure_loaded()
        b = self._dem_bounds

        if self._dem_crs != DEMConfig.WGS84_CRS:
            corners_x = [b.left, b.right, b.left, b.right]
            corners_y = [b.bottom, b.bottom, b.top, b.top]
            lons, lats = transform(self._dem_crs, DEMConfig.WGS84_CRS, corners_x, corners_y)
            return min(lons), min(lats), max(lons), max(lats)

        return b.left, b.bottom, b.right, b.top
