"""
Contains the conditions of the standard rules. Each function creates a condition which will be called with the
property value and the object.
Except for `required`, all conditions consider missing values as valid. Combine them with `required` if a value must
be present.
"""
import re
from typing import Any, Optional

from .types import SyncCondition

# taken from https://html.spec.whatwg.org/multipage/forms.html#valid-e-mail-address
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
_NON_WHITESPACE = re.compile(r"\S")


def _length(value: Any) -> Optional[int]:
    """Returns the length of sized values and None for everything else"""
    try:
        return len(value)
    except TypeError:
        return None


def _is_empty(value: Any) -> bool:
    return _length(value) == 0


def required(value: Any, _obj: Any = None) -> bool:
    """
    The value must not be None and, if it is a string, must contain at least one non-whitespace character.
    """
    return value is not None and not (isinstance(value, str) and _NON_WHITESPACE.search(value) is None)


def matches(pattern: re.Pattern) -> SyncCondition:
    """
    The value must match the pattern. None and empty values are valid. Non-string values are matched by their
    string representation.
    """

    def condition(value: Any, _obj: Any = None) -> bool:
        if value is None or _is_empty(value):
            return True
        return pattern.search(value if isinstance(value, str) else str(value)) is not None

    return condition


def min_length(length: int) -> SyncCondition:
    """None and empty values are valid"""

    def condition(value: Any, _obj: Any = None) -> bool:
        if value is None or _is_empty(value):
            return True
        value_length = _length(value)
        return value_length is not None and value_length >= length

    return condition


def max_length(length: int) -> SyncCondition:
    """None and empty values are valid"""

    def condition(value: Any, _obj: Any = None) -> bool:
        if value is None or _is_empty(value):
            return True
        value_length = _length(value)
        return value_length is not None and value_length <= length

    return condition


def min_items(count: int) -> SyncCondition:
    """
    None is valid. Note that, unlike `min_length`, empty collections are checked against `count`.
    """

    def condition(value: Any, _obj: Any = None) -> bool:
        if value is None:
            return True
        value_length = _length(value)
        return value_length is not None and value_length >= count

    return condition


def max_items(count: int) -> SyncCondition:
    """None is valid"""

    def condition(value: Any, _obj: Any = None) -> bool:
        if value is None:
            return True
        value_length = _length(value)
        return value_length is not None and value_length <= count

    return condition


def equals(expected_value: Any) -> SyncCondition:
    """
    The value must equal `expected_value`. None and the empty string are valid, also if `expected_value` is not a
    string.
    """

    def condition(value: Any, _obj: Any = None) -> bool:
        return value is None or (isinstance(value, str) and value == "") or value == expected_value

    return condition
