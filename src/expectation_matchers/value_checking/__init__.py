"""Value checking use-case exports."""

from .check_contracts import CheckOutcome, CheckRequest, ValueCheckResult
from .value_check_use_case import CheckExecutionError, execute_value_check, parse_raw_value

__all__ = [
    "CheckRequest",
    "CheckOutcome",
    "ValueCheckResult",
    "CheckExecutionError",
    "execute_value_check",
    "parse_raw_value",
]
