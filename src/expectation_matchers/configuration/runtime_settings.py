"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AllowedValuesDocument:
    """Named allowed-value sets loaded from one YAML file."""

    path: Path
    sets: Mapping[str, tuple[object, ...]]

    @property
    def set_names(self) -> tuple[str, ...]:
        return tuple(self.sets)

    def values_for(self, set_name: str) -> tuple[object, ...]:
        """Return the allowed values of ``set_name``.

        Raises:
          KeyError: If the document has no set with that name.
        """
        return self.sets[set_name]
