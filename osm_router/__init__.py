#!/usr/bin/env python3
"""
Shortest routes through road networks built from OpenStreetMap data.
"""

from .configuration import Config, load_config, save_config, DEFAULT_CONFIG
from .maps import Graph, Node, shortest_path, PathNotFoundError, SearchTimeoutError
from .network import (
    Point, Way, RoadNetwork, DatasetError, build_network, load_dataset, load_network, road_type_counts
)
from .routing import find_path, find_route, Route
from .observer import SearchObserver, SimpleObserver

from ._version import (
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __license__,
)
