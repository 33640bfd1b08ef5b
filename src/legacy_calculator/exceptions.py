"""Exceptions for programming errors inside the calculator package.

User-facing failures (division by zero, bad input, unknown operator) are
reported through result values, never through these exceptions.
"""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidResultError(CalculatorError):
    """Raised when a CalculationResult is built with inconsistent fields."""

    def __init__(self, reason: str, result: float, error_code: int, error_message: str) -> None:
        super().__init__(reason, (result, error_code, error_message))
        self.reason = reason
        self.result = result
        self.error_code = error_code
        self.error_message = error_message
