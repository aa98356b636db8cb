"Simple statistics over map datasets"
from collections import Counter
from typing import Dict, Iterable
from .records import Record, Way


def road_type_counts(records: Iterable[Record], road_tag: str = "highway") -> Dict[str, int]:
    """Counts the ways per road classification.

    Ways without the `road_tag` tag are not counted."""
    counts = Counter(
        record.tags[road_tag]
        for record in records
        if isinstance(record, Way) and road_tag in record.tags
    )
    return dict(counts)
