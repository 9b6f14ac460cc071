"""Membership matcher: the actual value must equal one of the allowed values."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from expectation_matchers.failure_reporting.failure_message import FailureMessage
from expectation_matchers.failure_reporting.stringify import stringify
from expectation_matchers.lazy_evaluation.expression import Expression

from .matcher_func import MatcherFunc

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def be_one_of(allowed_values: Iterable[T]) -> MatcherFunc[T]:
    """Build a matcher passing when the actual value equals an allowed value.

    The allowed values are snapshotted, so later changes to the caller's
    collection do not affect the matcher. An empty collection never matches.
    """
    allowed = tuple(allowed_values)
    postfix_message = f"be one of: {stringify(allowed)}"
    _LOGGER.debug("Built membership matcher over %d allowed values", len(allowed))

    def _match(expression: Expression[T], failure_message: FailureMessage) -> bool:
        failure_message.postfix_message = postfix_message
        actual_value = expression.evaluate()
        failure_message.actual_value = f"<{stringify(actual_value)}>"
        return _contains(allowed, actual_value)

    return MatcherFunc(_match)


def _contains(allowed: tuple[T, ...], actual_value: T) -> bool:
    # `in` short-circuits on identity; membership here is value equality only.
    return any(candidate == actual_value for candidate in allowed)
