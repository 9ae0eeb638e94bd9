from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

M = TypeVar("M", bound=MutableMapping)


def reverse_merge(mapping: Mapping[Any, Any], other_mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    """
    Merge ``other_mapping`` underneath ``mapping``; keys of ``mapping`` win.

    Useful for filling an options mapping with defaults:

        options = reverse_merge(options, {"size": 25, "velocity": 10})

    Neither argument is modified.
    """
    merged = dict(other_mapping)
    merged.update(mapping)
    return merged


def reverse_merge_in_place(mapping: M, other_mapping: Mapping[Any, Any]) -> M:
    """Add the keys of ``other_mapping`` missing from ``mapping``, in place."""
    for key, value in other_mapping.items():
        if key not in mapping:
            mapping[key] = value
    return mapping
