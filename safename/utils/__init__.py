"""Utility helpers for the safename library."""

from .hashing import hash_suffix
from .text import sanitize, split_extension, transliterate, trim_non_alnum_ends, truncate

__all__ = [
    "hash_suffix",
    "sanitize",
    "split_extension",
    "transliterate",
    "trim_non_alnum_ends",
    "truncate",
]
