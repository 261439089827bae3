"""Filesystem-safe filenames and DNS-safe slugs."""

from __future__ import annotations

import logging

from .utils.hashing import clamp_hash_length, hash_part_length, hash_suffix
from .utils.text import sanitize, split_extension, trim_non_alnum_ends, truncate

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
DEFAULT_MAX_LENGTH = 255
DEFAULT_FILENAME_HASH_LENGTH = 7
DEFAULT_SLUG_HASH_LENGTH = 6


class InvalidInputError(ValueError):
    """Raised when a value cannot be turned into a filename."""


def filename(
    value: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    hash_length: int = DEFAULT_FILENAME_HASH_LENGTH,
) -> str:
    """Return a filesystem-safe version of ``value``.

    The base name is transliterated to ASCII and reduced to dash-separated
    alphanumeric runs; the extension chain is kept and lowercased; a partial
    SHA-256 of ``value`` is appended so the result is never empty.

    The result fits in ``max_length`` as long as the budget holds the hash
    suffix, its dash and the extension. The hash and extension are never
    cut, so a smaller budget yields ``<hash><extension>`` and exceeds
    ``max_length``: ``filename("a.verylongext", max_length=10)`` is 19
    characters long.

    Raises ``InvalidInputError`` when ``value`` contains a path separator.
    """
    if PATH_SEPARATOR in value:
        raise InvalidInputError("no paths please, just file names")

    hash_length = clamp_hash_length(hash_length)
    digest = hash_suffix(value, hash_length)

    base, extension = split_extension(value)
    extension = extension.lower()

    budget = max_length - hash_part_length(hash_length) - len(extension)
    if budget <= 0:
        logger.debug("No room left for the base of %r (budget %d)", value, budget)

    sanitized = sanitize(base)
    sanitized = truncate(sanitized, budget)
    sanitized = trim_non_alnum_ends(sanitized)

    return _join(sanitized, digest) + extension


def slugify(
    value: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    hash_length: int = DEFAULT_SLUG_HASH_LENGTH,
) -> str:
    """Return a slug usable as a URL path segment or DNS label component.

    Only ASCII alphanumerics survive, other runs become single dashes, and
    the result never starts or ends with a dash.

    The hash suffix is never cut, so when ``max_length`` is shorter than
    ``hash_length`` the result is the bare hash and exceeds ``max_length``.
    """
    hash_length = clamp_hash_length(hash_length)
    digest = hash_suffix(value, hash_length)

    budget = max_length - hash_part_length(hash_length)
    if budget <= 0:
        logger.debug("No room left for the text of %r (budget %d)", value, budget)

    sanitized = sanitize(value)
    sanitized = truncate(sanitized, budget)
    sanitized = trim_non_alnum_ends(sanitized)

    return _join(sanitized, digest)


def _join(*parts: str) -> str:
    return "-".join(part for part in parts if part)
