"""Distance, elevation and slope computations over point sequences."""

import math
from typing import Sequence

import numpy as np

from gpx_parser.models import ElevationStats, Point, RouteDistance

# Mean Earth radius in meters
EARTH_RADIUS_M = 6_371_000


def haversine(p1: Point, p2: Point) -> float:
    """Great-circle distance between two points, in meters."""
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    sin_dlat = math.sin(math.radians(p2.lat - p1.lat) / 2)
    sin_dlon = math.sin(math.radians(p2.lon - p1.lon) / 2)
    a = sin_dlat * sin_dlat + math.cos(lat1) * math.cos(lat2) * sin_dlon * sin_dlon
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def calc_route_distance(points: Sequence[Point]) -> RouteDistance:
    """Total and cumulative distance along ``points``.

    ``cumul[i]`` is the distance travelled once segment i -> i+1 is done;
    the last entry repeats the total so that ``len(cumul) == len(points)``.
    """
    total = 0.0
    cumul: list[float] = []
    for current, following in zip(points, points[1:]):
        total += haversine(current, following)
        cumul.append(total)
    if points:
        cumul.append(total)
    return RouteDistance(total=total, cumul=cumul)


def calc_elevation_stats(points: Sequence[Point]) -> ElevationStats:
    """Elevation gain/loss, extremes and mean.

    Missing elevations count as 0 when computing gain/loss. A zero result
    (no data, or a genuine 0) is reported as None.
    """
    dp = 0.0
    dm = 0.0
    for current, following in zip(points, points[1:]):
        diff = (following.ele or 0) - (current.ele or 0)
        if diff < 0:
            dm += diff
        elif diff > 0:
            dp += diff

    elevations: list[float] = []
    total = 0.0
    for point in points:
        if point.ele is not None:
            elevations.append(point.ele)
            total += point.ele

    if not elevations:
        return ElevationStats(pos=abs(dp) or None, neg=abs(dm) or None)

    return ElevationStats(
        max=max(elevations) or None,
        min=min(elevations) or None,
        pos=abs(dp) or None,
        neg=abs(dm) or None,
        avg=total / len(elevations) or None,
    )


def calc_slope(points: Sequence[Point], cumul: Sequence[float]) -> list[float]:
    """Percentage grade between consecutive points.

    Zero-length segments give inf/nan rather than raising.
    """
    if len(points) < 2:
        return []
    ele = np.array([p.ele or 0 for p in points], dtype=float)
    dist = np.asarray(cumul[:len(points)], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        slopes = (np.diff(ele) * 100) / np.diff(dist)
    return slopes.tolist()
