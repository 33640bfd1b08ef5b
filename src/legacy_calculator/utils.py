"""Small numeric and formatting helpers."""

from __future__ import annotations

RESULT_TEMPLATE = "Result: %.2f"


def is_positive(number: float) -> bool:
    """Return True if number is strictly greater than zero."""
    return number > 0.0


def get_max(a: float, b: float) -> float:
    """
    Return the larger of two numbers.

    Ties return b. If either value is NaN the comparison is false and b is
    returned.
    """
    if a > b:
        return a
    return b


def format_message(template: str | None, value: float) -> str:
    """
    Format a single number into a printf-style template.

    Args:
        template: Template with at most one ``%`` conversion, e.g. ``"%.2f"``;
            a template without one is returned as is (``%%`` still collapses)
        value: The number to substitute

    Returns:
        The formatted text, or an empty string when no template is given
    """
    if template is None:
        return ""
    try:
        return template % value
    except TypeError:
        # No conversion to consume the value
        return template % ()


def format_result(value: float) -> str:
    return format_message(RESULT_TEMPLATE, value)
