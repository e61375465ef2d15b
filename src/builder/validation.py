"""
Argument validation helpers shared by the builder modules.
"""

from typing import Any, Iterable, Optional

from .exceptions import InvalidArgumentError

BLANK_PARAMETER_MESSAGE = "Parameter cannot be null, empty, or whitespace."
NULL_ELEMENT_MESSAGE = "No elements in the collection can be null."
NULL_VALUE_MESSAGE = "Value cannot be null."


def is_blank(value: Any) -> bool:
    """Return True for None, non-strings, and strings that are empty once trimmed."""
    return not isinstance(value, str) or not value.strip()


def check_not_blank(value: Optional[str], parameter_name: str) -> str:
    """
    Validate that a required string is present.

    Args:
        value: String to validate
        parameter_name: Name reported in the error

    Returns:
        The trimmed value

    Raises:
        InvalidArgumentError: If value is None, empty, or whitespace
    """
    if is_blank(value):
        raise InvalidArgumentError(BLANK_PARAMETER_MESSAGE, parameter_name)
    return value.strip()


def check_not_none(value: Any, parameter_name: str) -> Any:
    """Validate that a required collection was supplied."""
    if value is None:
        raise InvalidArgumentError(NULL_VALUE_MESSAGE, parameter_name)
    return value


def check_no_none_elements(items: Iterable[Any], parameter_name: str) -> tuple:
    """
    Validate a collection and its elements.

    Any None element is rejected, whatever the collection length.
    """
    check_not_none(items, parameter_name)
    items = tuple(items)
    if any(item is None for item in items):
        raise InvalidArgumentError(NULL_ELEMENT_MESSAGE, parameter_name)
    return items
