"""Sinks receiving the outcome of each expectation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class ExpectationFailure(AssertionError):
    """Raised when an expectation does not hold."""

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message if location is None else f"{location}: {message}")
        self.message = message
        self.location = location


@dataclass(frozen=True)
class AssertionRecord:
    """One recorded expectation outcome."""

    success: bool
    message: str
    location: str | None = None


class AssertionHandler(Protocol):
    """Receives every expectation outcome."""

    def assert_(self, success: bool, message: str, location: str | None) -> None: ...


class RaisingAssertionHandler:
    """Default handler: raise ``ExpectationFailure`` on a failed expectation."""

    def assert_(self, success: bool, message: str, location: str | None) -> None:
        if not success:
            raise ExpectationFailure(message, location)


class AssertionRecorder:
    """Collect expectation outcomes instead of raising."""

    def __init__(self) -> None:
        self.assertions: list[AssertionRecord] = []

    def assert_(self, success: bool, message: str, location: str | None) -> None:
        if not success:
            _LOGGER.debug("Recorded failed expectation: %s", message)
        self.assertions.append(AssertionRecord(success=success, message=message, location=location))

    @property
    def failures(self) -> tuple[AssertionRecord, ...]:
        return tuple(record for record in self.assertions if not record.success)


_DEFAULT_HANDLER = RaisingAssertionHandler()
_CURRENT_HANDLER: ContextVar[AssertionHandler] = ContextVar(
    "expectation_matchers_assertion_handler", default=_DEFAULT_HANDLER
)


def current_assertion_handler() -> AssertionHandler:
    """Return the handler active in the current context."""
    return _CURRENT_HANDLER.get()


@contextmanager
def with_assertion_handler(handler: AssertionHandler) -> Iterator[AssertionHandler]:
    """Route expectation outcomes to ``handler`` for the duration of the block."""
    token = _CURRENT_HANDLER.set(handler)
    try:
        yield handler
    finally:
        _CURRENT_HANDLER.reset(token)
