"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "allowed-values.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Allowed-values file for expectation-matchers.
# Each named set lists the values a checked value may equal.
# Values are YAML scalars: 200 is an integer, "200" is a string.

sets:
  example:
    - "<REQUIRED>"
  # another_set:
  #   - "<OPTIONAL>"

# A file may instead hold a single unnamed list, exposed as the set "default":
# allowed_values:
#   - "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build an allowed-values YAML template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder allowed-values template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Allowed-values file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
