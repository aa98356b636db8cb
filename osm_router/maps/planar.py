"""Planar tools: projecting WGS84 positions onto a drawing canvas and
measuring in degree space.

No geodesic correction is applied anywhere in this module. At city scale
the flat-earth approximation is good enough for drawing and for guiding the search."""
from typing import Dict, NamedTuple, Optional, Tuple
from openlr import Coordinates
import numpy as np


class BoundingBox(NamedTuple):
    "The extent of a set of WGS84 positions, in degrees"
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def corners(self) -> Tuple[Coordinates, ...]:
        "Returns the corners as (lon, lat) coordinates, counterclockwise from the south-west"
        return (
            Coordinates(self.min_lon, self.min_lat),
            Coordinates(self.max_lon, self.min_lat),
            Coordinates(self.max_lon, self.max_lat),
            Coordinates(self.min_lon, self.max_lat),
        )


def degree_distance(point_a: Coordinates, point_b: Coordinates) -> float:
    "Returns the straight-line distance of two coordinates, treating degrees as cartesian units"
    dist = np.sqrt((point_a.lat - point_b.lat) ** 2 + (point_a.lon - point_b.lon) ** 2)
    return float(dist)


def _normalize(value: float, lower: float, upper: float, size: float) -> float:
    span = upper - lower
    if span == 0:
        return 0.0
    return (value - lower) / span * size


def project(coord: Coordinates, bbox: BoundingBox, width: float, height: float) -> Tuple[float, float]:
    """Maps a coordinate into a `width` x `height` canvas using min-max normalization

    The south-west corner of `bbox` becomes (0, 0), the north-east corner becomes
    (width, height). An axis on which the box has no extent maps to 0."""
    x = _normalize(coord.lon, bbox.min_lon, bbox.max_lon, width)
    y = _normalize(coord.lat, bbox.min_lat, bbox.max_lat, height)
    return (x, y)


def closest_point(position: Tuple[float, float], points: Dict[int, Tuple[float, float]]) -> Optional[int]:
    """Returns the key of the point nearest to `position`

    Returns None if there are no points. On equal distance, the first point wins."""
    if not points:
        return None
    keys = list(points.keys())
    xy = np.array([points[key] for key in keys], dtype=float)
    dists = np.hypot(xy[:, 0] - position[0], xy[:, 1] - position[1])
    return keys[int(np.argmin(dists))]
