"""Structured outcome of a calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from legacy_calculator.exceptions import InvalidResultError

SUCCESS = 0
FAILURE = 1


@dataclass(frozen=True)
class CalculationResult:
    """
    Value of a calculation together with its success or failure code.

    A failed result always carries ``0.0`` and a non-empty message; a
    successful one always carries an empty message.

    Example:
        >>> CalculationResult.success(2.5)
        CalculationResult(result=2.5, error_code=0, error_message='')
        >>> CalculationResult.failure("Division by zero error").ok
        False
    """

    result: float
    error_code: int = SUCCESS
    error_message: str = ""

    def __post_init__(self) -> None:
        if self.error_code == SUCCESS:
            if self.error_message:
                raise InvalidResultError(
                    "Successful result must not carry a message",
                    self.result,
                    self.error_code,
                    self.error_message,
                )
        elif self.error_code == FAILURE:
            # NaN compares unequal to 0.0, so check it explicitly
            if math.isnan(self.result) or self.result != 0.0:
                raise InvalidResultError(
                    "Failed result must have a value of 0.0",
                    self.result,
                    self.error_code,
                    self.error_message,
                )
            if not self.error_message:
                raise InvalidResultError(
                    "Failed result must carry a message",
                    self.result,
                    self.error_code,
                    self.error_message,
                )
        else:
            raise InvalidResultError(
                f"Unknown error code {self.error_code}",
                self.result,
                self.error_code,
                self.error_message,
            )

    @classmethod
    def success(cls, value: float) -> CalculationResult:
        """Build a successful result holding ``value``."""
        return cls(result=float(value))

    @classmethod
    def failure(cls, message: str) -> CalculationResult:
        """Build a failed result with the given message."""
        return cls(result=0.0, error_code=FAILURE, error_message=message)

    @property
    def ok(self) -> bool:
        return self.error_code == SUCCESS
