"""Turns raw map data into a road network.

This includes reading the records, building the graph and projecting the nodes onto
a drawing canvas."""

from logging import debug
from ..configuration import Config, DEFAULT_CONFIG
from .error import DatasetError
from .records import Point, Way, Record, parse_element
from .dataset import load_dataset
from .builder import RoadNetwork, build_network
from .statistics import road_type_counts


def load_network(config: Config = DEFAULT_CONFIG) -> RoadNetwork:
    """Loads the dataset named in `config.dataset` and builds its road network

    Raises:
        ValueError:
            The config does not name a dataset
        DatasetError:
            The dataset is malformed"""
    if config.dataset is None:
        raise ValueError("No dataset configured")
    debug(f"Loading network from {config.dataset}")
    records = load_dataset(config.dataset)
    return build_network(records, config.canvas_width, config.canvas_height, config.road_tag)
