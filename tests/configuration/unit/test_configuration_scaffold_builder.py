"""Allowed-values scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from expectation_matchers.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from expectation_matchers.configuration.loader import load_allowed_values


def test_placeholder_configuration_is_valid_yaml_with_guidance() -> None:
    scaffold = build_placeholder_configuration()

    parsed = yaml.safe_load(scaffold)

    assert parsed["sets"]["example"] == ["<REQUIRED>"]
    assert "# Each named set lists the values" in scaffold


def test_written_scaffold_loads_as_allowed_values(tmp_path: Path) -> None:
    output = write_placeholder_configuration(tmp_path / "allowed.yaml")

    document = load_allowed_values(output)

    assert output == (tmp_path / "allowed.yaml").resolve()
    assert document.set_names == ("example",)


def test_refuses_to_overwrite_existing_file(tmp_path: Path) -> None:
    existing = tmp_path / "allowed.yaml"
    existing.write_text("keep me", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(existing)

    assert existing.read_text(encoding="utf-8") == "keep me"
