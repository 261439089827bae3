"""Content hashes used as collision-avoiding suffixes."""

from __future__ import annotations

import hashlib

HEX_DIGEST_LENGTH = 64


def hash_suffix(value: str, length: int) -> str:
    """
    Return the first ``length`` hex characters of the SHA-256 of ``value``.

    The digest covers the original input, so two inputs that sanitise to the
    same text still get different suffixes. A length of 0 (or less) disables
    the suffix and returns an empty string.

    Example: hash_suffix("", 6) == "e3b0c4"
    """
    length = clamp_hash_length(length)
    if not length:
        return ""
    digest = hashlib.sha256(value.encode("utf-8", "surrogatepass")).hexdigest()
    return digest[:length]


def clamp_hash_length(length: int) -> int:
    return min(max(0, int(length)), HEX_DIGEST_LENGTH)


def hash_part_length(hash_length: int) -> int:
    """Characters taken by the hash suffix and its joining dash."""
    return hash_length + 1 if hash_length else 0
