"""Allowed-values document loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import AllowedValuesDocument

DEFAULT_SET_NAME = "default"

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the allowed-values file is invalid."""


def load_allowed_values(config_path: Path | str) -> AllowedValuesDocument:
    """Load and validate an allowed-values YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Allowed-values file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse allowed-values file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Allowed-values root must be a mapping.")

    has_sets = parsed.get("sets") is not None
    has_default = parsed.get("allowed_values") is not None
    if has_sets == has_default:
        raise ConfigurationError("Exactly one of 'sets' or 'allowed_values' must be provided.")

    if has_sets:
        sets = _parse_sets_section(parsed["sets"])
    else:
        sets = {DEFAULT_SET_NAME: _require_value_list(parsed["allowed_values"], "allowed_values")}

    _LOGGER.debug("Loaded allowed values from %s: %s", path, ", ".join(sets))
    return AllowedValuesDocument(path=path, sets=sets)


def _parse_sets_section(value: Any) -> dict[str, tuple[object, ...]]:
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'sets' must be a mapping.")
    if not value:
        raise ConfigurationError("Configuration section 'sets' must define at least one set.")
    sets: dict[str, tuple[object, ...]] = {}
    for raw_name, raw_values in value.items():
        name = _require_non_empty_string(raw_name, "sets key")
        if name in sets:
            raise ConfigurationError(f"Duplicate set name after trimming whitespace: '{name}'.")
        sets[name] = _require_value_list(raw_values, f"sets.{name}")
    return sets


def _require_value_list(value: Any, field_name: str) -> tuple[object, ...]:
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a list of values.")
    for item in value:
        if isinstance(item, Mapping | list):
            raise ConfigurationError(f"{field_name} entries must be scalar values.")
    return tuple(value)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
