"Contains a simple SearchObserver implementation"
from typing import NamedTuple, Optional, Sequence
from .abstract import SearchObserver


class Expansion(NamedTuple):
    "A node taken from the frontier"
    node_id: int
    cost: int
    priority: float


class AttemptedSearch(NamedTuple):
    "A finished search between two nodes"
    start_id: int
    goal_id: int
    success: bool
    path: Optional[Sequence[int]]


class SimpleObserver(SearchObserver):
    """A simple observer that collects the information and can be
    queried after the search is finished"""

    def __init__(self):
        self.expansions = []
        self.searches = []

    def on_node_expanded(self, node_id: int, cost: int, priority: float):
        self.expansions.append(Expansion(node_id, cost, priority))

    def on_path_found(self, start_id: int, goal_id: int, path: Sequence[int]):
        self.searches.append(AttemptedSearch(start_id, goal_id, True, path))

    def on_no_path(self, start_id: int, goal_id: int):
        self.searches.append(AttemptedSearch(start_id, goal_id, False, None))

    @property
    def expanded_ids(self):
        "The IDs of all expanded nodes, in expansion order"
        return [expansion.node_id for expansion in self.expansions]
