"""
Interactive two-operand calculator.

Four arithmetic operations on double-precision operands, where division
reports division by zero through a structured CalculationResult rather
than an exception, and a prompt-driven command-line front end.
"""

from legacy_calculator.core import OPERATIONS, SUPPORTED_OPERATORS, calculate
from legacy_calculator.exceptions import CalculatorError, InvalidResultError
from legacy_calculator.operations import (
    DIVISION_BY_ZERO_MESSAGE,
    add,
    divide,
    multiply,
    subtract,
)
from legacy_calculator.result import FAILURE, SUCCESS, CalculationResult
from legacy_calculator.scanner import InputScanner, ReadResult
from legacy_calculator.utils import format_message, format_result, get_max, is_positive

__all__ = [
    "DIVISION_BY_ZERO_MESSAGE",
    "FAILURE",
    "OPERATIONS",
    "SUCCESS",
    "SUPPORTED_OPERATORS",
    "CalculationResult",
    "CalculatorError",
    "InputScanner",
    "InvalidResultError",
    "ReadResult",
    "add",
    "calculate",
    "divide",
    "format_message",
    "format_result",
    "get_max",
    "is_positive",
    "multiply",
    "subtract",
]

__version__ = "0.1.0"
