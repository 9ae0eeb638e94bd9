"""Pure helpers for handling sitemap options and values."""

from src.sitemap.domain.errors import InvalidKeySetError
from src.sitemap.domain.keys import NOT_CONVERTIBLE, assert_valid_keys, symbolize_keys, symbolize_keys_in_place, to_option_key
from src.sitemap.domain.merge import reverse_merge, reverse_merge_in_place
from src.sitemap.domain.numeric import round_float
from src.sitemap.domain.presence import ValueKind, classify_value, is_blank, is_present

__all__ = [
    "assert_valid_keys",
    "classify_value",
    "InvalidKeySetError",
    "is_blank",
    "is_present",
    "NOT_CONVERTIBLE",
    "reverse_merge",
    "reverse_merge_in_place",
    "round_float",
    "symbolize_keys",
    "symbolize_keys_in_place",
    "to_option_key",
    "ValueKind",
]
