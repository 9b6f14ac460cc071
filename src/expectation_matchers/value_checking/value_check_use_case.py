"""Value checking use-case service."""

from __future__ import annotations

import logging

import yaml

from expectation_matchers.configuration import (
    DEFAULT_SET_NAME,
    ConfigurationError,
    load_allowed_values,
)
from expectation_matchers.configuration.runtime_settings import AllowedValuesDocument
from expectation_matchers.expectations import expect_value
from expectation_matchers.failure_reporting import AssertionRecorder, with_assertion_handler
from expectation_matchers.matchers import be_one_of

from .check_contracts import CheckOutcome, CheckRequest, ValueCheckResult

_LOGGER = logging.getLogger(__name__)


class CheckExecutionError(Exception):
    """Raised when a value check cannot be completed."""


def execute_value_check(request: CheckRequest) -> CheckOutcome:
    """Check every raw value of ``request`` against the selected allowed set."""
    try:
        document = load_allowed_values(request.allowed_path)
    except ConfigurationError as exc:
        raise CheckExecutionError(str(exc)) from exc

    set_name = _select_set_name(document, request.set_name)
    matcher = be_one_of(document.values_for(set_name))

    results = []
    for raw_value in request.raw_values:
        value = parse_raw_value(raw_value)
        recorder = AssertionRecorder()
        with with_assertion_handler(recorder):
            expectation = expect_value(value)
            if request.negate:
                expectation.to_not(matcher)
            else:
                expectation.to(matcher)
        record = recorder.assertions[0]
        results.append(
            ValueCheckResult(
                raw_value=raw_value,
                value=value,
                passed=record.success,
                message=record.message,
            )
        )

    outcome = CheckOutcome(set_name=set_name, results=tuple(results))
    _LOGGER.debug(
        "Checked %d values against set %r: %d failed",
        len(outcome.results),
        set_name,
        sum(1 for result in outcome.results if not result.passed),
    )
    return outcome


def parse_raw_value(raw_value: str) -> object:
    """Interpret a command-line value as a YAML scalar.

    ``200`` becomes an integer, ``"200"`` stays a string, and ``null`` is None.
    Text that is not exactly one scalar is kept verbatim: blanks, collections,
    comments (``#FF0000``, ``red # warm``) and document markers (``---``).
    """
    text = raw_value.strip()
    if not text:
        return raw_value
    try:
        node = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        return raw_value
    if not isinstance(node, yaml.ScalarNode):
        return raw_value
    if node.start_mark.index != 0 or node.end_mark.index != len(text):
        return raw_value
    return yaml.safe_load(text)


def _select_set_name(document: AllowedValuesDocument, requested: str | None) -> str:
    if requested is not None:
        if requested not in document.sets:
            available = ", ".join(document.set_names)
            raise CheckExecutionError(
                f"Allowed set '{requested}' not found in {document.path} (available: {available})."
            )
        return requested
    if DEFAULT_SET_NAME in document.sets:
        return DEFAULT_SET_NAME
    if len(document.sets) == 1:
        return document.set_names[0]
    available = ", ".join(document.set_names)
    raise CheckExecutionError(
        f"Multiple allowed sets defined; choose one with --set ({available})."
    )
