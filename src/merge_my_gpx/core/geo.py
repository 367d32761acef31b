"""
Geographic utility functions.

Scalar versions work on a pair of points; the array versions compute the
same quantities over a whole segment at once.
"""

import math
from typing import Sequence

import numpy as np

from merge_my_gpx.models import GpxPoint

# Mean Earth radius in meters
EARTH_RADIUS_M = 6_371_000.0


def distance(a: GpxPoint, b: GpxPoint) -> float:
    """
    Great-circle distance between two points (haversine).

    Args:
        a, b: Points with coordinates in degrees

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lon = math.radians(b.lon - a.lon)

    h = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c


def elevation_delta(a: GpxPoint, b: GpxPoint) -> tuple[float, float]:
    """Return (gain, loss) going from a to b; (0, 0) if either has no elevation."""
    if a.elevation is None or b.elevation is None:
        return 0.0, 0.0
    diff = b.elevation - a.elevation
    return max(0.0, diff), max(0.0, -diff)


def haversine_array(
    lats1: np.ndarray, lons1: np.ndarray,
    lats2: np.ndarray, lons2: np.ndarray,
) -> np.ndarray:
    """Element-wise haversine distance in meters between two arrays of coordinates."""
    lat1_rad = np.radians(lats1)
    lat2_rad = np.radians(lats2)
    delta_lat = np.radians(lats2 - lats1)
    delta_lon = np.radians(lons2 - lons1)

    h = (
        np.sin(delta_lat / 2) ** 2 +
        np.cos(lat1_rad) * np.cos(lat2_rad) *
        np.sin(delta_lon / 2) ** 2
    )
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = np.clip(h, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))

    return EARTH_RADIUS_M * c


def segment_distance(points: Sequence[GpxPoint]) -> float:
    """Total path length in meters along consecutive points."""
    if len(points) < 2:
        return 0.0
    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)
    return float(haversine_array(lats[:-1], lons[:-1], lats[1:], lons[1:]).sum())


def segment_elevation_change(points: Sequence[GpxPoint]) -> tuple[float, float]:
    """Total (gain, loss) in meters along consecutive points.

    Pairs where either point lacks elevation contribute nothing.
    """
    if len(points) < 2:
        return 0.0, 0.0
    elevations = np.array(
        [np.nan if p.elevation is None else p.elevation for p in points],
        dtype=float,
    )
    diffs = np.diff(elevations)
    # NaN compares False, so pairs with a missing elevation drop out here
    gain = float(diffs[diffs > 0].sum())
    loss = float(-diffs[diffs < 0].sum())
    return gain, loss
