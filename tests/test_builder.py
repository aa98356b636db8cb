"Contains the unit tests for building road networks"
import unittest

from shapely.geometry import LineString

from osm_router.network import build_network, load_dataset, Point, Way, DatasetError
from osm_router.network.builder import edge_key

from .example_dataset import example_elements, EDGES, NODES

WIDTH = 1024.0
HEIGHT = 768.0


class BuilderTests(unittest.TestCase):
    "Tests the graph builder on the example dataset"

    def setUp(self):
        self.network = build_network(load_dataset(example_elements()), WIDTH, HEIGHT)

    def test_all_points_become_nodes(self):
        "Every point is a node, and no node exists without a point"
        self.assertEqual(self.network.graph.get_nodecount(), len(NODES))
        for (node_id, lon, lat) in NODES:
            node = self.network.graph.get_node(node_id)
            self.assertEqual((node.lon, node.lat), (lon, lat))
        self.assertIsNone(self.network.graph.get_node(99))

    def test_edges(self):
        "The adjacency lists are exactly the expected undirected edges"
        found = set()
        for node in self.network.graph.get_nodes():
            for neighbor_id in node.neighbors:
                found.add(edge_key(node.node_id, neighbor_id))
        self.assertSetEqual(found, EDGES)

    def test_edges_symmetric(self):
        "Every neighbor lists the node as neighbor as well"
        graph = self.network.graph
        for node in graph.get_nodes():
            for neighbor_id in node.neighbors:
                self.assertIn(node.node_id, graph.get_node(neighbor_id).neighbors)

    def test_duplicate_edge(self):
        "Way 105 closes a loop at node 8, which adds the edge 6-8 once per direction"
        graph = self.network.graph
        self.assertEqual(graph.get_node(8).neighbors.count(6), 1)
        self.assertEqual(graph.get_node(6).neighbors.count(8), 1)

    def test_missing_point_skipped(self):
        "The edge of way 109 to the unknown point 99 is left out"
        self.assertNotIn(99, self.network.graph.get_node(13).neighbors)

    def test_bounding_box(self):
        "The bounding box spans the example points"
        bbox = self.network.bounding_box
        self.assertEqual(bbox.min_lat, 52.52)
        self.assertEqual(bbox.max_lat, 52.531)
        self.assertEqual(bbox.min_lon, 13.41)
        self.assertEqual(bbox.max_lon, 13.431)

    def test_positions_in_canvas(self):
        "All projected positions lie within the canvas"
        self.assertEqual(len(self.network.positions), len(NODES))
        for (x, y) in self.network.positions.values():
            self.assertTrue(0.0 <= x <= WIDTH)
            self.assertTrue(0.0 <= y <= HEIGHT)
        self.assertEqual(self.network.position(0)[0], 0.0)
        self.assertEqual(self.network.position(5)[1], 0.0)
        self.assertEqual(self.network.position(21)[0], WIDTH)
        self.assertEqual(self.network.position(20)[1], HEIGHT)
        self.assertIsNone(self.network.position(99))

    def test_road_class(self):
        "Edges keep the classification of the way they come from"
        self.assertEqual(self.network.road_class(7, 11), "primary")
        self.assertEqual(self.network.road_class(11, 7), "primary")
        self.assertEqual(self.network.road_class(6, 8), "tertiary")
        self.assertEqual(self.network.road_class(20, 21), "footway")
        self.assertIsNone(self.network.road_class(0, 11))

    def test_way_geometry(self):
        "Way shapes are drawn through the projected positions of known points"
        ways = {way.way_id: way for way in self.network.ways}
        shape = self.network.way_geometry(ways[101])
        self.assertIsInstance(shape, LineString)
        self.assertEqual(
            list(shape.coords),
            [self.network.position(1), self.network.position(2), self.network.position(3)]
        )
        self.assertIsNone(self.network.way_geometry(ways[109]))
        self.assertIsNone(self.network.way_geometry(ways[110]))

    def test_closest_node(self):
        "The node nearest to a canvas position is found"
        (x, y) = self.network.position(7)
        self.assertEqual(self.network.closest_node(x + 1.0, y - 1.0), 7)
        self.assertEqual(self.network.closest_node(-50.0, -50.0), 1)


class BuilderEdgeCaseTests(unittest.TestCase):
    "Tests the graph builder on hand-made records"

    def test_corners(self):
        "The bounding box corners are projected onto the canvas corners"
        records = [
            Point(1, 10.0, 20.0),
            Point(2, 10.0, 21.0),
            Point(3, 12.0, 21.0),
            Point(4, 12.0, 20.0),
            Point(5, 11.0, 20.5),
        ]
        network = build_network(records, 800.0, 600.0)
        self.assertEqual(network.position(1), (0.0, 0.0))
        self.assertEqual(network.position(2), (800.0, 0.0))
        self.assertEqual(network.position(3), (800.0, 600.0))
        self.assertEqual(network.position(4), (0.0, 600.0))
        self.assertEqual(network.position(5), (400.0, 300.0))

    def test_way_a_b_c(self):
        "A way A, B, C connects A with B and B with C in both directions"
        records = [
            Way(1, (1, 2, 3), {}),
            Point(1, 0.0, 0.0),
            Point(2, 0.0, 1.0),
            Point(3, 0.0, 2.0),
        ]
        graph = build_network(records, 100.0, 100.0).graph
        self.assertEqual(graph.get_node(1).neighbors, [2])
        self.assertEqual(graph.get_node(2).neighbors, [1, 3])
        self.assertEqual(graph.get_node(3).neighbors, [2])

    def test_short_ways(self):
        "Ways with less than two points add no edges"
        records = [Point(1, 0.0, 0.0), Way(1, (1,), {}), Way(2, (), {})]
        graph = build_network(records, 100.0, 100.0).graph
        self.assertEqual(graph.get_node(1).neighbors, [])

    def test_only_unknown_points(self):
        "A way of unknown points does not crash the builder"
        network = build_network([Way(None, (7, 8), {"highway": "primary"})], 100.0, 100.0)
        self.assertEqual(len(network.graph), 0)
        self.assertIsNone(network.road_class(7, 8))

    def test_empty(self):
        "No records yield an empty network"
        network = build_network([], 100.0, 100.0)
        self.assertEqual(len(network.graph), 0)
        self.assertIsNone(network.bounding_box)
        self.assertIsNone(network.closest_node(1.0, 1.0))

    def test_single_point(self):
        "A box without extent projects onto the origin"
        network = build_network([Point(3, 52.5, 13.4)], 100.0, 100.0)
        self.assertEqual(network.position(3), (0.0, 0.0))

    def test_invalid_record(self):
        "Anything but points and ways fails the build"
        with self.assertRaises(DatasetError):
            build_network([Point(1, 0.0, 0.0), ("node", 2)], 100.0, 100.0)

    def test_generator_input(self):
        "Records may be given as a one-shot iterable"
        records = (record for record in [Point(1, 0.0, 0.0), Point(2, 1.0, 1.0), Way(5, (1, 2), {})])
        graph = build_network(records, 10.0, 10.0).graph
        self.assertEqual(graph.get_node(1).neighbors, [2])

    def test_contains(self):
        "Membership tests tell known from unknown node IDs"
        graph = build_network([Point(1, 0.0, 0.0), Way(1, (1, 2), {})], 10.0, 10.0).graph
        self.assertIn(1, graph)
        self.assertNotIn(2, graph)
