"""Value checking entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckRequest:
    """Input contract for checking raw values against one allowed set."""

    allowed_path: str
    raw_values: tuple[str, ...]
    set_name: str | None = None
    negate: bool = False


@dataclass(frozen=True)
class ValueCheckResult:
    """Outcome of checking one raw value."""

    raw_value: str
    value: object
    passed: bool
    message: str


@dataclass(frozen=True)
class CheckOutcome:
    """Output contract for one completed check."""

    set_name: str
    results: tuple[ValueCheckResult, ...]

    @property
    def all_passed(self) -> bool:
        """Return True when every value passed."""
        return all(result.passed for result in self.results)
