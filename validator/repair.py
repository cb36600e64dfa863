"""Repair of arrays that degraded into index-keyed objects.

Some storage layers serialize a JSON array as {"0": a, "1": b}. Before
schema validation every such mapping is turned back into a list.
"""

from typing import Any, Mapping


def _is_index_keyed(value: Mapping) -> bool:
    """True when the keys are exactly "0".."n-1" in order, n >= 1."""
    if not value:
        return False
    return list(value.keys()) == [str(i) for i in range(len(value))]


def repair_arrays(value: Any) -> Any:
    """Return a copy of `value` with index-keyed mappings turned into lists.

    Recurses into mappings and lists; the input is never mutated.
    """
    if isinstance(value, Mapping):
        repaired = {key: repair_arrays(item) for key, item in value.items()}
        if _is_index_keyed(repaired):
            return list(repaired.values())
        return repaired
    if isinstance(value, (list, tuple)):
        return [repair_arrays(item) for item in value]
    return value
