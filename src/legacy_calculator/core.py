"""Operator table and dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from legacy_calculator.operations import add, divide, multiply, subtract
from legacy_calculator.result import CalculationResult

if TYPE_CHECKING:
    from collections.abc import Callable

OPERATIONS: dict[str, Callable[[float, float], float | CalculationResult]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}

SUPPORTED_OPERATORS = "".join(OPERATIONS)


def calculate(a: float, operator: str, b: float) -> CalculationResult | None:
    """
    Apply the operation selected by ``operator`` to a and b.

    Args:
        a: First operand
        operator: One of ``SUPPORTED_OPERATORS``
        b: Second operand

    Returns:
        The operation's outcome as a CalculationResult, or None if the
        operator is not supported (no operation is attempted)
    """
    operation = OPERATIONS.get(operator)
    if operation is None:
        return None

    outcome = operation(a, b)
    if isinstance(outcome, CalculationResult):
        return outcome
    return CalculationResult.success(outcome)
