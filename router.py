"""
* This is a script to search a route on a map dataset
from the command line

    - Inputs:
        - an Overpass JSON dataset
        - start and goal node IDs
    - Outputs:
        - the route as JSON object, or `null` if there is none
"""

import argparse
import json
import logging
import sys

from osm_router import (
    Config, load_network, find_route, road_type_counts, load_dataset, DatasetError, SearchTimeoutError
)


def route_dto(route):
    """Builds a data object for a route"""
    if route is None:
        return None
    return {
        "path": route.path,
        "hops": route.hop_count,
        "length": route.length(),
        "coords": [[c.lon, c.lat] for c in route.coordinates()],
        "road_classes": route.road_classes(),
    }


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two nodes of a map dataset"
    )
    parser.add_argument("dataset", type=str, help="path to the Overpass JSON dataset")
    parser.add_argument("start", type=int, nargs="?", help="ID of the start node")
    parser.add_argument("goal", type=int, nargs="?", help="ID of the goal node")
    parser.add_argument("--timeout", type=float, default=float("inf"),
                        help="cancel the search after this many seconds")
    parser.add_argument("--road-types", action="store_true",
                        help="print the number of ways per road type instead of routing")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    if not args.road_types and (args.start is None or args.goal is None):
        parser.error("start and goal are required unless --road-types is given")
    return args


def main(argv=None, out=None, err=None):
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = Config(dataset=args.dataset, timeout=args.timeout)

    try:
        if args.road_types:
            counts = road_type_counts(load_dataset(config.dataset), config.road_tag)
            json.dump(counts, out, indent=2, sort_keys=True)
            out.write("\n")
            return 0

        network = load_network(config)
        route = find_route(network, args.start, args.goal, config=config)
    except (OSError, DatasetError, SearchTimeoutError) as error:
        err.write(f"error: {error}\n")
        return 2

    json.dump(route_dto(route), out, indent=2)
    out.write("\n")
    return 0 if route is not None else 1


if __name__ == "__main__":
    sys.exit(main())
