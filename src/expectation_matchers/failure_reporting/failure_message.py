"""Failure message output slot populated by matchers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FailureMessage:
    """Mutable message slot shared between an expectation and its matcher.

    Matchers set ``postfix_message`` and optionally ``actual_value``; the
    expectation sets ``to`` when negated.
    """

    expected: str = "expected"
    to: str = "to"
    postfix_message: str = ""
    actual_value: str | None = None

    @property
    def string_value(self) -> str:
        """Render the full human-readable failure description."""
        value = f"{self.expected} {self.to} {self.postfix_message}"
        if self.actual_value is not None:
            value = f"{value}, got {self.actual_value}"
        return value

    def __str__(self) -> str:
        return self.string_value
