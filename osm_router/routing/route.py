"Defines the route type returned by find_route"

from typing import List, NamedTuple, Optional
from openlr import Coordinates
from shapely.geometry import LineString
from ..maps.wgs84 import path_length
from ..network import RoadNetwork


class Route(NamedTuple):
    "A path found through a road network"
    #: The network in which the path was found
    network: RoadNetwork
    #: The node IDs from start to goal, both included
    path: List[int]

    @property
    def start_id(self) -> int:
        return self.path[0]

    @property
    def goal_id(self) -> int:
        return self.path[-1]

    @property
    def hop_count(self) -> int:
        "Number of edges along the route"
        return len(self.path) - 1

    def coordinates(self) -> List[Coordinates]:
        "Returns the WGS84 coordinates of all nodes on the route"
        return [self.network.graph.get_node(node_id).coordinates for node_id in self.path]

    def length(self) -> float:
        "Length of the route in meters"
        return path_length(self.coordinates())

    @property
    def shape(self) -> Optional[LineString]:
        "The route on the canvas. None if the route is a single node."
        return self.network.path_geometry(self.path)

    def road_classes(self) -> List[Optional[str]]:
        "Returns the road classification of every edge along the route"
        return [
            self.network.road_class(node_a, node_b)
            for (node_a, node_b) in zip(self.path, self.path[1:])
        ]
