"""Behavior-driven expectations with a membership matcher."""

import logging

from .expectations import Expectation, expect, expect_value
from .failure_reporting import (
    AssertionRecorder,
    ExpectationFailure,
    FailureMessage,
    stringify,
    with_assertion_handler,
)
from .lazy_evaluation import Expression
from .matchers import Matcher, MatcherFunc, be_one_of

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AssertionRecorder",
    "Expectation",
    "ExpectationFailure",
    "Expression",
    "FailureMessage",
    "Matcher",
    "MatcherFunc",
    "be_one_of",
    "expect",
    "expect_value",
    "stringify",
    "with_assertion_handler",
]
