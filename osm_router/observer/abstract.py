"Contains the abstract observer class for the pathfinder"
from abc import abstractmethod
from typing import Sequence


class SearchObserver:
    "Abstract class representing an observer to the A* search"

    @abstractmethod
    def on_node_expanded(self, node_id: int, cost: int, priority: float):
        """Called by the pathfinder after it pops a node from the frontier and
        before its neighbors are pushed.

        `cost` is the hop count of the path to the node, `priority` its frontier score."""

    @abstractmethod
    def on_path_found(self, start_id: int, goal_id: int, path: Sequence[int]):
        "Called when the goal node was popped from the frontier"

    @abstractmethod
    def on_no_path(self, start_id: int, goal_id: int):
        "Called when the search ends without reaching the goal"
