"""The public entry points for searching routes."""

from logging import debug
from typing import List, Optional
from ..configuration import Config, DEFAULT_CONFIG
from ..maps import Graph, shortest_path, PathNotFoundError, SearchTimeoutError
from ..network import RoadNetwork
from ..observer import SearchObserver
from .route import Route


def find_path(
    graph: Graph,
    start_id: int,
    goal_id: int,
    observer: Optional[SearchObserver] = None,
    config: Config = DEFAULT_CONFIG,
) -> Optional[List[int]]:
    """Searches the lowest hop count path between two nodes.

    Args:
        graph:
            The graph to search in
        start_id:
            The ID of the first node of the path
        goal_id:
            The ID of the last node of the path
        observer:
            An observer that collects information while the search proceeds
        config:
            Provides the search timeout

    Returns:
        The node IDs from `start_id` to `goal_id`, both included.
        None, if no path exists or one of the nodes is not in the graph.
    Raises:
        SearchTimeoutError:
            Raised if the search took longer than `config.timeout` seconds.
    """
    debug(f"Finding path between nodes {start_id, goal_id}")
    try:
        path = shortest_path(graph, start_id, goal_id, observer, config.timeout)
        debug(f"Returning path with {len(path) - 1} hops")
        return path
    except PathNotFoundError:
        debug("No path found between these nodes")
        return None


def find_route(
    network: RoadNetwork,
    start_id: int,
    goal_id: int,
    observer: Optional[SearchObserver] = None,
    config: Config = DEFAULT_CONFIG,
) -> Optional[Route]:
    "Like `find_path`, but returns a `Route` through the road network"
    path = find_path(network.graph, start_id, goal_id, observer, config)
    if path is None:
        return None
    return Route(network, path)
