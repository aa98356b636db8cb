"Some geo coordinates related tools"
from itertools import tee
from typing import Sequence
from geographiclib.geodesic import Geodesic
from openlr import Coordinates


def distance(point_a: Coordinates, point_b: Coordinates) -> float:
    "Returns the distance of two WGS84 coordinates on our planet, in meters"
    geod = Geodesic.WGS84
    (lon1, lat1) = point_a.lon, point_a.lat
    (lon2, lat2) = point_b.lon, point_b.lat
    line = geod.Inverse(lat1, lon1, lat2, lon2, Geodesic.DISTANCE)
    # According to https://geographiclib.sourceforge.io/1.50/python/, the distance between
    # point 1 and 2 is stored in the attribute `s12`.
    return line["s12"]


def pairwise(iterable):
    "s -> (s0,s1), (s1,s2), (s2, s3), ..."
    first, second = tee(iterable)
    next(second, None)
    return zip(first, second)


def path_length(path: Sequence[Coordinates]) -> float:
    """Returns the length of a coordinate sequence in meters

    A path with less than two coordinates has length 0."""
    return sum(distance(coord_a, coord_b) for (coord_a, coord_b) in pairwise(path))
