"""Failure reporting domain exports."""

from .assertion_handlers import (
    AssertionHandler,
    AssertionRecord,
    AssertionRecorder,
    ExpectationFailure,
    RaisingAssertionHandler,
    current_assertion_handler,
    with_assertion_handler,
)
from .failure_message import FailureMessage
from .stringify import stringify

__all__ = [
    "FailureMessage",
    "stringify",
    "AssertionHandler",
    "AssertionRecord",
    "AssertionRecorder",
    "ExpectationFailure",
    "RaisingAssertionHandler",
    "current_assertion_handler",
    "with_assertion_handler",
]
