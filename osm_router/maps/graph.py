"""Contains the in-memory road graph on which routes are searched.

The map model
-------------
Nodes
=====
A node is an object with an integer ID and a WGS84 longitude/latitude position.
It keeps the IDs of its neighbors as a plain list. The list may contain duplicates
(two ways sharing a segment) and may reference IDs that are not part of the graph.

Graph
=====
The graph maps node IDs to nodes. It is populated once by the network builder and
is not modified afterwards, so several searches may read it at the same time.

Looking up an ID that is not contained in the graph is not an error: `get_node`
returns None, and every consumer skips such IDs.
"""

from typing import Dict, Iterable, List, Optional
from openlr import Coordinates


class Node:
    "A road network node"

    def __init__(self, node_id: int, coordinates: Coordinates, neighbors: Optional[List[int]] = None):
        self.node_id = node_id
        self.coordinates = coordinates
        self.neighbors = neighbors if neighbors is not None else []

    def __repr__(self):
        return f"Node with id={self.node_id} at {self.coordinates}"

    @property
    def lat(self) -> float:
        return self.coordinates.lat

    @property
    def lon(self) -> float:
        return self.coordinates.lon

    def add_neighbor(self, node_id: int):
        "Appends `node_id` to the adjacency list"
        self.neighbors.append(node_id)


class Graph:
    "Mapping from node ID to `Node`"

    def __init__(self, nodes: Optional[Dict[int, Node]] = None):
        self.nodes = nodes if nodes is not None else {}

    def __contains__(self, node_id) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node: Node):
        "Adds or replaces a node. Only used while the graph is built."
        self.nodes[node.node_id] = node

    def get_node(self, node_id: int) -> Optional[Node]:
        "Returns a node by its id, or None if it is not part of the graph"
        return self.nodes.get(node_id)

    def get_nodes(self) -> Iterable[Node]:
        "Yields all nodes contained in the graph."
        yield from self.nodes.values()

    def get_nodecount(self) -> int:
        "Returns the number of nodes in the graph."
        return len(self.nodes)

    def neighbors(self, node_id: int) -> Iterable[Node]:
        """Yields the neighbors of a node which exist in the graph.

        Yields nothing if the node itself is unknown."""
        node = self.get_node(node_id)
        if node is None:
            return
        for neighbor_id in node.neighbors:
            neighbor = self.get_node(neighbor_id)
            if neighbor is not None:
                yield neighbor
