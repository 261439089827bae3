"""Service applying configured limits to batches of names."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..config import NameKind, NamingConfig
from ..naming import InvalidInputError, filename, slugify

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NameResult:
    """Outcome of naming a single input value."""

    source: str
    kind: NameKind
    output: str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_message is None

    def as_dict(self) -> dict[str, str | None]:
        return {
            "input": self.source,
            "kind": self.kind.value,
            "output": self.output,
            "error": self.error_message,
        }


class Namer:
    """Produce filenames and slugs using the limits from a ``NamingConfig``."""

    def __init__(self, config: NamingConfig | None = None) -> None:
        self.config = config or NamingConfig()

    def filename(self, value: str) -> str:
        max_length, hash_length = self.config.limits_for(NameKind.FILENAME)
        return filename(value, max_length=max_length, hash_length=hash_length)

    def slugify(self, value: str) -> str:
        max_length, hash_length = self.config.limits_for(NameKind.SLUG)
        return slugify(value, max_length=max_length, hash_length=hash_length)

    def name(self, value: str, kind: NameKind) -> str:
        if kind == NameKind.FILENAME:
            return self.filename(value)
        return self.slugify(value)

    def name_many(self, values: Iterable[str], kind: NameKind) -> list[NameResult]:
        """Name every value, recording rejected inputs instead of raising."""
        results: list[NameResult] = []
        for value in values:
            try:
                output = self.name(value, kind)
            except InvalidInputError as exc:
                logger.warning("Cannot build a %s from %r: %s", kind.value, value, exc)
                results.append(NameResult(source=value, kind=kind, error_message=str(exc)))
                continue
            logger.debug("Named %r as %r", value, output)
            results.append(NameResult(source=value, kind=kind, output=output))
        return results
