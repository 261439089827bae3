"""Tests for NamingConfig validation and persistence."""

from __future__ import annotations

import json

import pytest
from safename.config import NameKind, NamingConfig


def test_defaults_match_public_api():
    config = NamingConfig()
    assert config.limits_for(NameKind.FILENAME) == (255, 7)
    assert config.limits_for(NameKind.SLUG) == (255, 6)


def test_hash_length_bounds():
    with pytest.raises(ValueError):
        NamingConfig(slug_hash_length=-1)
    with pytest.raises(ValueError):
        NamingConfig(filename_hash_length=65)


def test_max_length_must_hold_hash_suffix():
    with pytest.raises(ValueError):
        NamingConfig(slug_max_length=6, slug_hash_length=6)
    with pytest.raises(ValueError):
        NamingConfig(filename_max_length=4, filename_hash_length=7)


def test_zero_hash_length_needs_no_reservation():
    config = NamingConfig(slug_max_length=1, slug_hash_length=0)
    assert config.limits_for(NameKind.SLUG) == (1, 0)


def test_load_and_save_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    original = NamingConfig(filename_max_length=64, slug_hash_length=8)
    original.save(path)

    loaded = NamingConfig.load(path)
    assert loaded == original
    assert loaded.filename_max_length == 64
    assert loaded.slug_hash_length == 8


def test_load_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"slug_max_length": 63}), encoding="utf-8")

    assert NamingConfig.load(path).slug_max_length == 63


def test_load_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert NamingConfig.load(path) == NamingConfig()


def test_load_rejects_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"slug_max_length": 0}), encoding="utf-8")

    with pytest.raises(ValueError):
        NamingConfig.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        NamingConfig.load(tmp_path / "missing.yaml")


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        NamingConfig.load(path)
