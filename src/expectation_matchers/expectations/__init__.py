"""Expectation orchestration exports."""

from .expectation import Expectation, expect, expect_value

__all__ = ["Expectation", "expect", "expect_value"]
