"Reads map datasets in the Overpass JSON format"
from io import TextIOBase
from json import loads, JSONDecodeError
from logging import debug
from typing import List, Union
from .error import DatasetError
from .records import Record, parse_element


def load_dataset(source: Union[str, TextIOBase, dict]) -> List[Record]:
    """Load the point and way records of a dataset

    Args:
        source:
            Either an open text file containing the JSON document, or the path to it,
            or the already decoded dictionary with an `elements` list
    Returns:
        The records in the order of the elements. Elements which are neither nodes
        nor ways are left out.
    Raises:
        DatasetError:
            The document or one of its node or way elements is malformed
    """
    opened_source = source
    if isinstance(opened_source, str):
        with open(source, "r") as filepointer:
            return load_dataset(filepointer)
    if isinstance(opened_source, TextIOBase):
        try:
            opened_source = loads(opened_source.read())
        except JSONDecodeError as err:
            raise DatasetError(f"Dataset is not valid JSON: {err}") from err
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    elements = opened_source.get("elements")
    if not isinstance(elements, list):
        raise DatasetError("Dataset has no list of elements")
    records = []
    for element in elements:
        record = parse_element(element)
        if record is not None:
            records.append(record)
    debug(f"Read {len(records)} records from {len(elements)} elements")
    return records
