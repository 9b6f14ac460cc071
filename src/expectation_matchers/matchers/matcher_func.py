"""Matcher capability and the function-backed matcher adapter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from expectation_matchers.failure_reporting.failure_message import FailureMessage
from expectation_matchers.lazy_evaluation.expression import Expression

T = TypeVar("T")

MatchFunction = Callable[[Expression[T], FailureMessage], bool]


class Matcher(Protocol[T]):
    """Predicate over a lazy actual value that also describes itself."""

    def matches(
        self, expression: Expression[T], failure_message: FailureMessage
    ) -> bool: ...

    def does_not_match(
        self, expression: Expression[T], failure_message: FailureMessage
    ) -> bool: ...


class MatcherFunc(Generic[T]):
    """Adapt a ``(expression, failure_message) -> bool`` function into a matcher.

    The negated form is the plain inverse of the function result.
    """

    def __init__(self, function: MatchFunction[T]) -> None:
        self._function = function

    def matches(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        return self._function(expression, failure_message)

    def does_not_match(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        return not self._function(expression, failure_message)
