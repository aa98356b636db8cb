"""
This module describes the road graph and the geometry helpers around it.
It provides the A* search through which routes are found.
"""

from .graph import Graph, Node
from .planar import BoundingBox, project, degree_distance, closest_point
from .a_star import shortest_path, PathNotFoundError, SearchTimeoutError
