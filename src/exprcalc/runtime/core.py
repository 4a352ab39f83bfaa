from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..frontend.errors import CalculatorError
from ..writer import IndentingWriter

ParserEngine = Literal["descent", "grammar"]

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


class EvaluationError(CalculatorError):
    """A well-formed expression could not be reduced to an integer."""


class DivisionByZeroError(EvaluationError):
    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
    parser: ParserEngine = "descent"


def wrap_int(value: int) -> int:
    """Wraps an exact result to signed 32-bit two's complement."""
    return (value - INT_MIN) % (2**INT_BITS) + INT_MIN


def truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient
