"""Configuration models and persistence helpers."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .naming import DEFAULT_FILENAME_HASH_LENGTH, DEFAULT_MAX_LENGTH, DEFAULT_SLUG_HASH_LENGTH
from .utils.hashing import HEX_DIGEST_LENGTH, hash_part_length


class NameKind(str, Enum):
    """Supported output forms."""

    FILENAME = "filename"
    SLUG = "slug"


class NamingConfig(BaseModel):
    """Validates and stores the length limits used when producing names."""

    filename_max_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=1,
        description="Maximum length of a generated filename, extension included.",
    )
    filename_hash_length: int = Field(
        default=DEFAULT_FILENAME_HASH_LENGTH,
        ge=0,
        le=HEX_DIGEST_LENGTH,
        description="Hex characters of the content hash appended to filenames (0 disables).",
    )
    slug_max_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=1,
        description="Maximum length of a generated slug.",
    )
    slug_hash_length: int = Field(
        default=DEFAULT_SLUG_HASH_LENGTH,
        ge=0,
        le=HEX_DIGEST_LENGTH,
        description="Hex characters of the content hash appended to slugs (0 disables).",
    )

    @model_validator(mode="after")
    def _validate_filename_budget(self) -> NamingConfig:
        if self.filename_max_length < hash_part_length(self.filename_hash_length):
            raise ValueError("filename_max_length cannot hold the filename hash suffix.")
        return self

    @model_validator(mode="after")
    def _validate_slug_budget(self) -> NamingConfig:
        if self.slug_max_length < hash_part_length(self.slug_hash_length):
            raise ValueError("slug_max_length cannot hold the slug hash suffix.")
        return self

    def limits_for(self, kind: NameKind) -> tuple[int, int]:
        """Return ``(max_length, hash_length)`` for the given output form."""
        if kind == NameKind.FILENAME:
            return self.filename_max_length, self.filename_hash_length
        return self.slug_max_length, self.slug_hash_length

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        return self.model_dump(mode="json")

    @classmethod
    def load(cls, path: Path) -> NamingConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:  # pragma: no cover - pass through details
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML file."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file at {path} must contain a mapping.")
    return data


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        yaml_text = yaml.safe_dump(
            data,
            allow_unicode=False,
            sort_keys=False,
        )
        path.write_text(yaml_text, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
