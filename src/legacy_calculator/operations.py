"""Core arithmetic operations on two double-precision operands."""

from legacy_calculator.result import CalculationResult

DIVISION_BY_ZERO_MESSAGE = "Division by zero error"


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Overflow to infinity is plain IEEE-754 behaviour, not an error.

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0 (for finite a)

    Args:
        a: Minuend
        b: Subtrahend

    Returns:
        Difference of a and b
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """Multiply two numbers. Never fails."""
    return a * b


def divide(a: float, b: float) -> CalculationResult:
    """
    Divide a by b.

    The divisor is compared to ``0.0`` with exact equality: ``-0.0`` is
    zero, while the smallest subnormal is not.

    Properties:
        - Identity: divide(a, 1).result == a
        - Failure value: divide(a, 0).result == 0.0

    Args:
        a: Dividend
        b: Divisor

    Returns:
        A successful CalculationResult holding ``a / b``, or a failed one
        with error code 1 and ``DIVISION_BY_ZERO_MESSAGE`` if b is zero
    """
    if b == 0.0:
        return CalculationResult.failure(DIVISION_BY_ZERO_MESSAGE)

    return CalculationResult.success(a / b)
