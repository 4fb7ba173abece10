"""
Parameter validation helpers.

Validators never raise for bad input. Each returns a ``Validation`` holding
either the accepted value or an error message naming the field and the
offending value, so callers can stop at the first failure.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..core import DateUtils, constants


@dataclass(frozen=True)
class Validation:
    """Outcome of validating one value."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Validation":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "Validation":
        return cls(error=message)


def validate_enumerated(name: str, value: Any, allowed: Iterable[Any]) -> Validation:
    """
    Check that a value is one of an allowed set.

    Matching is exact; callers normalize case before calling.

    Args:
        name: Parameter name, used in the error message
        value: Value to check
        allowed: Allowed values

    Returns:
        Validation with the value, or an error naming field and value
    """
    allowed = list(allowed)
    if value in allowed:
        return Validation.success(value)

    valid = ", ".join(str(a) for a in allowed)
    return Validation.failure(
        f'Bad {name} value "{value}". Valid values are: {valid}'
    )


def validate_pattern(name: str, value: str, pattern: str) -> Validation:
    """
    Check that a value matches a structural pattern.

    Args:
        name: Parameter name, used in the error message
        value: Value to check
        pattern: Regular expression matched against the whole value

    Returns:
        Validation with the value, or an error naming field and value
    """
    if isinstance(value, str) and re.fullmatch(pattern, value):
        return Validation.success(value)
    return Validation.failure(f'Bad {name} value "{value}"')


def is_location_code(value: str) -> bool:
    """True for a 2-character wave server location code such as ``R0``."""
    return validate_pattern("type", value, constants.LOCATION_CODE_PATTERN).ok


def is_edge_channel(value: str) -> bool:
    """True for a raw 3-character channel code such as ``MVH``."""
    return validate_pattern("element", value, constants.EDGE_CHANNEL_PATTERN).ok


def validate_time(name: str, value: str, date_utils: Optional[DateUtils] = None) -> Validation:
    """
    Parse a time parameter into epoch seconds.

    Args:
        name: Parameter name, used in the error message
        value: Time string
        date_utils: Date utilities instance

    Returns:
        Validation with epoch seconds, or an error naming the field
    """
    date_utils = date_utils or DateUtils()
    try:
        return Validation.success(date_utils.parse_time(value))
    except ValueError:
        return Validation.failure(f'Bad {name} value "{value}". Unable to parse time')
