"""Defines the point and way records a road network is built from, and how they
are read from Overpass JSON elements.

An element looks like one of these:

    {"type": "node", "id": 1, "lat": 35.68, "lon": 139.76}
    {"type": "way", "id": 7, "nodes": [1, 2, 3], "tags": {"highway": "primary"}}
"""

from logging import debug
from typing import Dict, NamedTuple, Optional, Tuple, Union
from openlr import Coordinates
from .error import DatasetError


class Point(NamedTuple):
    "A single geographic location"
    point_id: int
    lat: float
    lon: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.lon, self.lat)


class Way(NamedTuple):
    "An ordered sequence of point IDs, e.g. a road, with descriptive tags"
    #: May be None when the source did not provide an ID
    way_id: Optional[int]
    node_ids: Tuple[int, ...]
    tags: Dict[str, str]


Record = Union[Point, Way]


def _as_int(element: dict, key: str) -> int:
    value = element[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DatasetError(f"Expected an integer for '{key}', got {value!r}")
    return value


def _as_float(element: dict, key: str) -> float:
    value = element[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DatasetError(f"Expected a number for '{key}', got {value!r}")
    return float(value)


def parse_point(element: dict) -> Point:
    "Reads a point record from a `node` element"
    try:
        return Point(_as_int(element, "id"), _as_float(element, "lat"), _as_float(element, "lon"))
    except KeyError as err:
        raise DatasetError(f"Node element {element!r} lacks the attribute {err}") from err


def parse_way(element: dict) -> Way:
    "Reads a way record from a `way` element"
    way_id = _as_int(element, "id") if "id" in element else None
    node_ids = element.get("nodes")
    if not isinstance(node_ids, list):
        raise DatasetError(f"Way {way_id} has no list of nodes")
    for node_id in node_ids:
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            raise DatasetError(f"Way {way_id} references the non-integer node {node_id!r}")
    tags = element.get("tags", {})
    if not isinstance(tags, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for (key, value) in tags.items()):
        raise DatasetError(f"Way {way_id} has malformed tags {tags!r}")
    return Way(way_id, tuple(node_ids), dict(tags))


def parse_element(element: dict) -> Optional[Record]:
    """Reads one Overpass element.

    Returns None for element types that are neither node nor way, e.g. relations.
    Raises:
        DatasetError:
            The element is not a dictionary, or a node or way is malformed"""
    if not isinstance(element, dict):
        raise DatasetError(f"Expected an element dictionary, got {element!r}")
    kind = element.get("type")
    if kind == "node":
        return parse_point(element)
    if kind == "way":
        return parse_way(element)
    debug(f"Skipping element of type {kind}")
    return None
