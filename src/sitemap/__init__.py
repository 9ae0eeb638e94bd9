"""Sitemap generator support layer: option helpers, config script and artifact lifecycle."""

from src.sitemap.domain import (
    InvalidKeySetError,
    assert_valid_keys,
    is_blank,
    is_present,
    reverse_merge,
    reverse_merge_in_place,
    round_float,
    symbolize_keys,
    symbolize_keys_in_place,
)

__all__ = [
    "assert_valid_keys",
    "InvalidKeySetError",
    "is_blank",
    "is_present",
    "reverse_merge",
    "reverse_merge_in_place",
    "round_float",
    "symbolize_keys",
    "symbolize_keys_in_place",
]
