import copy
from collections.abc import Iterable, Mapping, MutableMapping
from enum import Enum
from typing import Any, Final, TypeVar

from src.sitemap.domain.errors import InvalidKeySetError

M = TypeVar("M", bound=MutableMapping)


class _NotConvertible:
    def __repr__(self) -> str:
        return "NOT_CONVERTIBLE"


NOT_CONVERTIBLE: Final = _NotConvertible()

_NESTED_KEY_CONTAINERS = (list, set, frozenset)


def _flatten_keys(valid_keys: Iterable[Any]) -> list[Any]:
    flat: list[Any] = []
    for key in valid_keys:
        if isinstance(key, _NESTED_KEY_CONTAINERS):
            flat.extend(_flatten_keys(key))
        else:
            flat.append(key)
    return flat


def assert_valid_keys(mapping: Mapping[Any, Any], *valid_keys: Any) -> None:
    """
    Raise InvalidKeySetError if ``mapping`` has a key outside ``valid_keys``.

    ``valid_keys`` may be nested lists or sets; a tuple is a key, not nesting. Keys
    are compared by type as well as value: "size" and b"size" are different keys,
    and so are 1 and True. Allow-list entries need not be hashable.
    """
    allowed = [(type(key), key) for key in _flatten_keys(valid_keys)]
    unknown_keys = [key for key in mapping if (type(key), key) not in allowed]
    if unknown_keys:
        raise InvalidKeySetError(unknown_keys)


def to_option_key(key: Any) -> Any:
    """Convert ``key`` to a str option key, or return NOT_CONVERTIBLE."""
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return key.name
    if isinstance(key, (bytes, bytearray)):
        try:
            return bytes(key).decode("utf-8")
        except UnicodeDecodeError:
            return NOT_CONVERTIBLE
    return NOT_CONVERTIBLE


def symbolize_keys_in_place(mapping: M) -> M:
    """
    Replace every key of ``mapping`` by its str option key where one exists.

    Keys that cannot be converted are left alone. If two keys convert to the
    same option key the one processed last wins.
    """
    for key in list(mapping):
        option_key = to_option_key(key)
        if option_key is NOT_CONVERTIBLE or not option_key:
            option_key = key
        mapping[option_key] = mapping.pop(key)
    return mapping


def symbolize_keys(mapping: M) -> M:
    return symbolize_keys_in_place(copy.copy(mapping))
