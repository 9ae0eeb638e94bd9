from collections.abc import Collection, Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any, Callable


class ValueKind(str, Enum):
    ABSENT = "absent"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def classify_value(value: Any) -> ValueKind:
    # bool is a Number and str is a Sequence, so the order here matters.
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMERIC
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.TEXT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Collection)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


# Only ASCII whitespace counts; U+00A0 and other Unicode spaces are content.
_WHITESPACE = " \t\r\n\f\v"


def _is_blank_text(value: str | bytes | bytearray) -> bool:
    if isinstance(value, str):
        return not value.strip(_WHITESPACE)
    return not bytes(value).strip(_WHITESPACE.encode("ascii"))


def _is_blank_other(value: Any) -> bool:
    is_empty = getattr(value, "is_empty", None)
    if callable(is_empty):
        return bool(is_empty())
    return not value


_BLANK_RULES: dict[ValueKind, Callable[[Any], bool]] = {
    ValueKind.ABSENT: lambda value: True,
    ValueKind.BOOLEAN: lambda value: not value,
    ValueKind.NUMERIC: lambda value: False,
    ValueKind.TEXT: _is_blank_text,
    ValueKind.SEQUENCE: lambda value: len(value) == 0,
    ValueKind.MAPPING: lambda value: len(value) == 0,
    ValueKind.OTHER: _is_blank_other,
}


def is_blank(value: Any) -> bool:
    """
    A value is blank if it is None, False, empty, or a whitespace-only string.

    Numbers are never blank, so 0 and 0.0 are present. Other objects are blank
    when their ``is_empty()`` method says so, otherwise when they are falsy.
    """
    return _BLANK_RULES[classify_value(value)](value)


def is_present(value: Any) -> bool:
    return not is_blank(value)
