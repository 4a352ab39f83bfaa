from .frontend.ast_expressions import BinaryOp, Expression, IntLiteral, Opr
from .frontend.errors import CalculatorError, ParseError
from .frontend.parser import parse
from .runtime.core import DivisionByZeroError, EvaluationError, RuntimeContext
from .runtime.evaluator import evaluate
from .runtime.interpreter import (
    LineResult,
    calculate,
    calculate_line,
    process_line,
    run_lines,
)

__all__ = [
    "BinaryOp",
    "CalculatorError",
    "DivisionByZeroError",
    "EvaluationError",
    "Expression",
    "IntLiteral",
    "LineResult",
    "Opr",
    "ParseError",
    "RuntimeContext",
    "calculate",
    "calculate_line",
    "evaluate",
    "parse",
    "process_line",
    "run_lines",
]
