"""String helpers for filename and slug sanitisation."""

from __future__ import annotations

import re

from unidecode import unidecode

_DASH_RUN_PATTERN = re.compile(r"[\s_-]+", re.ASCII)
_DISALLOWED_PATTERN = re.compile(r"[^A-Za-z0-9_.-]", re.ASCII)
_NON_ALNUM_RUN_PATTERN = re.compile(r"[^A-Za-z0-9]+", re.ASCII)
_EDGES_PATTERN = re.compile(r"^[^A-Za-z0-9]+|[^A-Za-z0-9]+\Z", re.ASCII)
_EXTENSION_PATTERN = re.compile(r"^(.*?)((?:\.[A-Za-z0-9]+)*)\Z", re.ASCII | re.DOTALL)


def transliterate(text: str) -> str:
    """Fold ``text`` to printable ASCII, dropping characters without a transliteration.

    Whitespace of any kind becomes a plain space.
    """
    folded = []
    for ch in unidecode(text):
        if ch.isspace():
            folded.append(" ")
        elif ch.isprintable():
            folded.append(ch)
    return "".join(folded)


def sanitize(text: str) -> str:
    """Return ``text`` as alphanumeric runs separated by single dashes.

    Leading and trailing dashes are kept; callers trim them once the
    string has been cut to its length budget. A result without any
    alphanumeric character is returned as an empty string.
    """
    sanitized = transliterate(text)
    sanitized = _DASH_RUN_PATTERN.sub("-", sanitized)
    sanitized = _DISALLOWED_PATTERN.sub("", sanitized)
    sanitized = _NON_ALNUM_RUN_PATTERN.sub("-", sanitized)
    return sanitized if sanitized.strip("-") else ""


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` into a base and its chain of ``.ext`` suffixes.

    ``archive.tar.gz`` becomes ``("archive", ".tar.gz")`` and ``README``
    becomes ``("README", "")``. Neither part is case-normalised here.
    """
    if not name:
        return "", ""
    match = _EXTENSION_PATTERN.match(name)
    if match is None:  # pragma: no cover - the pattern matches any string
        return name, ""
    return match.group(1), match.group(2)


def truncate(text: str, max_length: int) -> str:
    return text[: max(0, max_length)]


def trim_non_alnum_ends(text: str) -> str:
    """Strip non-alphanumeric characters from both ends of ``text``."""
    return _EDGES_PATTERN.sub("", text)
