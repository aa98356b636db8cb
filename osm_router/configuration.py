"Contains the configuration object that can be passed to the loader and the pathfinder, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, Union, Optional


class Config(NamedTuple):
    """A config object that provides all settings that influence loading and routing

    Customize the values where the default won't fit you:

        >>> myconfig = Config(dataset="tokyo.json", timeout=5.0)
    """

    #: Width of the canvas onto which the network is projected
    canvas_width: float = 1024.0
    #: Height of the canvas onto which the network is projected
    canvas_height: float = 768.0
    #: Path to the Overpass JSON file the network is loaded from
    dataset: Optional[str] = None
    #: The way tag that holds the road classification
    road_tag: str = "highway"
    #: Time in seconds after which a single search is cancelled
    timeout: float = float("inf")


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Keys missing from the source take the default value.

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object
    """
    file_open = None
    opened_source = source
    if isinstance(opened_source, str):
        opened_source = open(source, "r")
        file_open = opened_source
    if isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if file_open is not None:
        file_open.close()
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    return Config(
        canvas_width=float(opened_source.get("canvas_width", DEFAULT_CONFIG.canvas_width)),
        canvas_height=float(opened_source.get("canvas_height", DEFAULT_CONFIG.canvas_height)),
        dataset=opened_source.get("dataset", DEFAULT_CONFIG.dataset),
        road_tag=opened_source.get("road_tag", DEFAULT_CONFIG.road_tag),
        timeout=float(opened_source.get("timeout", DEFAULT_CONFIG.timeout)),
    )


NoneType: object = type(None)


def save_config(config: Config, dest: Union[str, TextIOBase, NoneType] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    if dest is None:
        return config._asdict()
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            # Call the TextIOBase code path
            save_config(config, filepointer)
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(save_config(config)))
    else:
        raise TypeError("`dest` has to be a valid destination")
