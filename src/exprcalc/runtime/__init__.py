from .core import (
    DivisionByZeroError,
    EvaluationError,
    RuntimeContext,
)

__all__ = ["DivisionByZeroError", "EvaluationError", "RuntimeContext"]
