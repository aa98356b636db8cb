"This module contains the RoadNetwork class and a builder function for it"

from logging import debug
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from shapely.geometry import LineString
from ..maps import Graph, Node, BoundingBox, project, closest_point
from ..maps.wgs84 import pairwise
from .error import DatasetError
from .records import Point, Record, Way

Position = Tuple[float, float]


def edge_key(node_a: int, node_b: int) -> Tuple[int, int]:
    "Returns the direction independent key of an edge"
    return (node_a, node_b) if node_a <= node_b else (node_b, node_a)


class RoadNetwork:
    """A road graph together with everything a renderer needs to draw it.

    The attribute `graph` is what the pathfinder searches in. `positions` maps every
    node ID to its (x, y) position on a `width` x `height` canvas, and `ways` keeps the
    way records with their tags, so that a renderer can choose a stroke style."""

    def __init__(
            self,
            graph: Graph,
            positions: Dict[int, Position],
            ways: List[Way],
            bounding_box: Optional[BoundingBox],
            width: float,
            height: float,
            road_classes: Dict[Tuple[int, int], str],
    ):
        self.graph = graph
        self.positions = positions
        self.ways = ways
        self.bounding_box = bounding_box
        self.width = width
        self.height = height
        self.road_classes = road_classes

    def __repr__(self):
        return f"RoadNetwork with {len(self.graph)} nodes and {len(self.ways)} ways"

    def position(self, node_id: int) -> Optional[Position]:
        "Returns the canvas position of a node, or None if the node is unknown"
        return self.positions.get(node_id)

    def road_class(self, node_a: int, node_b: int) -> Optional[str]:
        """Returns the classification of the way the edge between both nodes comes from

        When several ways share the edge, the first way wins."""
        return self.road_classes.get(edge_key(node_a, node_b))

    def path_geometry(self, node_ids: Sequence[int]) -> Optional[LineString]:
        """Returns the canvas shape along `node_ids`

        Unknown IDs are left out. Returns None if less than two points remain."""
        points = [self.positions[node_id] for node_id in node_ids if node_id in self.positions]
        if len(points) < 2:
            return None
        return LineString(points)

    def way_geometry(self, way: Way) -> Optional[LineString]:
        "Returns the canvas shape of a way, see `path_geometry`"
        return self.path_geometry(way.node_ids)

    def closest_node(self, x: float, y: float) -> Optional[int]:
        "Returns the ID of the node nearest to a canvas position, or None if there are no nodes"
        return closest_point((x, y), self.positions)


def build_network(
        records: Iterable[Record],
        width: float,
        height: float,
        road_tag: str = "highway",
) -> RoadNetwork:
    """Builds the road graph out of point and way records.

    Every point becomes a node. Consecutive points of a way become neighbors of each
    other; the edge is skipped if one of them is not among the points.

    Args:
        records:
            Point and way records, in any order
        width:
            Width of the canvas the points are projected onto
        height:
            Height of the canvas the points are projected onto
        road_tag:
            The tag holding the road classification of a way
    Returns:
        The network
    Raises:
        DatasetError:
            Raised if a record is neither a point nor a way
    """
    points: List[Point] = []
    ways: List[Way] = []
    for record in records:
        if isinstance(record, Point):
            points.append(record)
        elif isinstance(record, Way):
            ways.append(record)
        else:
            raise DatasetError(f"Record {record!r} is neither a point nor a way")

    graph = Graph()
    bbox = None
    if points:
        min_lat, max_lat = 90.0, -90.0
        min_lon, max_lon = 180.0, -180.0
        for point in points:
            min_lat = min(min_lat, point.lat)
            max_lat = max(max_lat, point.lat)
            min_lon = min(min_lon, point.lon)
            max_lon = max(max_lon, point.lon)
            graph.add_node(Node(point.point_id, point.coordinates))
        bbox = BoundingBox(min_lat, max_lat, min_lon, max_lon)

    positions = {
        node.node_id: project(node.coordinates, bbox, width, height)
        for node in graph.get_nodes()
    }

    road_classes = {}
    skipped = 0
    for way in ways:
        road_class = way.tags.get(road_tag)
        for (id_a, id_b) in pairwise(way.node_ids):
            node_a = graph.get_node(id_a)
            node_b = graph.get_node(id_b)
            if node_a is None or node_b is None:
                skipped += 1
                continue
            node_a.add_neighbor(id_b)
            node_b.add_neighbor(id_a)
            if road_class is not None:
                road_classes.setdefault(edge_key(id_a, id_b), road_class)

    if skipped:
        debug(f"Skipped {skipped} edges referencing unknown points")
    debug(f"Built graph with {len(graph)} nodes out of {len(ways)} ways")

    return RoadNetwork(graph, positions, ways, bbox, width, height, road_classes)
