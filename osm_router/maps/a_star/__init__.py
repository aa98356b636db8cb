"""
Provides the shortest_path(graph, start_id, goal_id) -> List[int] function, which
finds a shortest path between two nodes.
"""
import time
from functools import total_ordering
from heapq import heappush, heappop
from itertools import count
from logging import debug
from typing import Dict, List, NamedTuple, Optional
from ..graph import Graph, Node
from ...observer import SearchObserver
from .tools import heuristic, PathNotFoundError, SearchTimeoutError


class Score(NamedTuple):
    """The score of a single item in the search priority queue"""
    f: float
    g: int


@total_ordering
class PQItem(NamedTuple):
    """A single item in the search priority queue"""
    score: Score
    #: Insertion counter. Breaks ties between equal `f` scores, first in first out.
    order: int
    node: Node
    previous: "PQItem"

    def __lt__(self, other):
        return (self.score.f, self.order) < (other.score.f, other.order)

    def path(self) -> List[int]:
        "Walks the back pointers and returns the node IDs from the start to this item"
        result = []
        item = self
        while item is not None:
            result.append(item.node.node_id)
            item = item.previous
        result.reverse()
        return result


def shortest_path(
        graph: Graph,
        start_id: int,
        goal_id: int,
        observer: Optional[SearchObserver] = None,
        timeout: float = float("inf"),
) -> List[int]:
    """
    Returns a shortest path in the graph between two nodes, as list of node IDs.

    Uses the `A*`_ algorithm for this. Every edge costs one hop; the search is
    guided by the straight-line degree distance to the goal.

    .. _A*: https://en.wikipedia.org/wiki/A*_search_algorithm

    Args:
        graph:
            The graph to search in. It must not be modified during the search.
        start_id:
            The node from which the path shall start
        goal_id:
            The destination node of the path
        observer:
            Gets notified about every expanded node and about the outcome
        timeout:
            Maximum time in seconds. It is only checked between two frontier pops.

    Returns:
        The node IDs of the path, including `start_id` and `goal_id`.

        If start and goal are the same, the path consists of this single node.
    Raises:
        PathNotFoundError:
            Raised if no path between the nodes could be found, or if one of them is
            not part of the graph.
        SearchTimeoutError:
            Raised if the search took longer than `timeout` seconds.
    """
    for node_id in (start_id, goal_id):
        if node_id not in graph:
            debug(f"Node {node_id} is not part of the graph")
            if observer is not None:
                observer.on_no_path(start_id, goal_id)
            raise PathNotFoundError(f"No path found from {start_id} to {goal_id}")

    start = graph.get_node(start_id)
    goal = graph.get_node(goal_id)

    counter = count()

    # The queue
    open_set = [PQItem(Score(0.0, 0), next(counter), start, None)]

    # The best known hop count per node
    best_cost: Dict[int, int] = {}

    start_time = time.monotonic()

    while open_set:
        if time.monotonic() - start_time > timeout:
            raise SearchTimeoutError(f"Search from {start_id} to {goal_id} exceeded {timeout} s")

        current = heappop(open_set)
        current_node = current.node

        # Check if the goal node has been reached
        if current_node.node_id == goal_id:
            path = current.path()
            if observer is not None:
                observer.on_path_found(start_id, goal_id, path)
            return path

        if observer is not None:
            observer.on_node_expanded(current_node.node_id, current.score.g, current.score.f)

        neighbor_g_score = current.score.g + 1

        for neighbor_id in current_node.neighbors:
            neighbor_node = graph.get_node(neighbor_id)
            if neighbor_node is None:
                continue

            known = best_cost.get(neighbor_id)
            if known is not None and neighbor_g_score >= known:
                continue

            best_cost[neighbor_id] = neighbor_g_score
            neighbor_f_score = neighbor_g_score + heuristic(neighbor_node, goal)

            heappush(open_set, PQItem(
                Score(neighbor_f_score, neighbor_g_score),
                next(counter),
                neighbor_node,
                current
            ))

    debug(f"Frontier ran empty, {goal_id} is unreachable from {start_id}")
    if observer is not None:
        observer.on_no_path(start_id, goal_id)
    raise PathNotFoundError(f"No path found from {start_id} to {goal_id}")
