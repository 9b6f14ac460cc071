"""``expect(...).to(...)`` orchestration over lazy expressions and matchers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from expectation_matchers.failure_reporting.assertion_handlers import current_assertion_handler
from expectation_matchers.failure_reporting.failure_message import FailureMessage
from expectation_matchers.lazy_evaluation.expression import Expression
from expectation_matchers.matchers.matcher_func import Matcher

T = TypeVar("T")


class Expectation(Generic[T]):
    """Pairs a lazy actual value with matchers and reports each outcome."""

    def __init__(self, expression: Expression[T]) -> None:
        self.expression = expression

    def to(self, matcher: Matcher[T], description: str | None = None) -> Expectation[T]:
        """Expect ``matcher`` to pass."""
        failure_message = FailureMessage()
        passed = matcher.matches(self.expression, failure_message)
        self._verify(passed, failure_message, description)
        return self

    def to_not(self, matcher: Matcher[T], description: str | None = None) -> Expectation[T]:
        """Expect ``matcher`` to fail."""
        failure_message = FailureMessage(to="to not")
        passed = matcher.does_not_match(self.expression, failure_message)
        self._verify(passed, failure_message, description)
        return self

    def not_to(self, matcher: Matcher[T], description: str | None = None) -> Expectation[T]:
        """Alias of :meth:`to_not`."""
        return self.to_not(matcher, description)

    def _verify(
        self, passed: bool, failure_message: FailureMessage, description: str | None
    ) -> None:
        message = failure_message.string_value
        if description:
            message = f"{description}\n{message}"
        current_assertion_handler().assert_(passed, message, self.expression.location)


def expect(closure: Callable[[], T], *, location: str | None = None) -> Expectation[T]:
    """Start an expectation over a lazily evaluated actual value."""
    return Expectation(Expression(closure, location=location))


def expect_value(value: T, *, location: str | None = None) -> Expectation[T]:
    """Start an expectation over an already computed actual value."""
    return Expectation(Expression.of(value, location=location))
