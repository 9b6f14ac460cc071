"""Function-backed matcher tests."""

from __future__ import annotations

from expectation_matchers.failure_reporting.failure_message import FailureMessage
from expectation_matchers.lazy_evaluation.expression import Expression
from expectation_matchers.matchers.matcher_func import MatcherFunc


def _be_positive(expression: Expression[int], failure_message: FailureMessage) -> bool:
    failure_message.postfix_message = "be positive"
    return expression.evaluate() > 0


def test_matches_delegates_to_function() -> None:
    matcher = MatcherFunc(_be_positive)
    failure_message = FailureMessage()

    assert matcher.matches(Expression.of(3), failure_message) is True
    assert matcher.matches(Expression.of(-3), failure_message) is False
    assert failure_message.postfix_message == "be positive"


def test_does_not_match_inverts_function_result() -> None:
    matcher = MatcherFunc(_be_positive)

    assert matcher.does_not_match(Expression.of(-3), FailureMessage()) is True
    assert matcher.does_not_match(Expression.of(3), FailureMessage()) is False
