"Helper functions for A*"

from ..graph import Node
from ..planar import degree_distance


class PathNotFoundError(Exception):
    "No path was found through the graph"


class SearchTimeoutError(Exception):
    "The search was cancelled because it took longer than allowed"


def heuristic(current: Node, target: Node) -> float:
    """Estimated cost from current to target.

    We use the straight-line distance of the lat/lon pairs in degrees here. Note that
    the real cost is counted in hops, so the two values are not in the same unit."""
    return degree_distance(current.coordinates, target.coordinates)
