import operator
from typing import Callable

from ..frontend.ast_expressions import BinaryOp, Expression, IntLiteral, Opr
from ..writer import indented_output
from .core import (
    DivisionByZeroError,
    EvaluationError,
    RuntimeContext,
    truncating_div,
    wrap_int,
)


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise DivisionByZeroError()
    return truncating_div(left, right)


_binary_ops: dict[Opr, Callable[[int, int], int]] = {
    Opr.ADD: operator.add,
    Opr.SUB: operator.sub,
    Opr.MUL: operator.mul,
    Opr.DIV: _divide,
}


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> int:
    """Reduces ``expr`` to a signed 32-bit integer.

    Overflow wraps around the way two's complement hardware does, so
    ``2147483647 + 1`` yields ``-2147483648``.
    """
    context = context or RuntimeContext()
    try:
        return _eval(expr, context)
    except RecursionError:
        raise EvaluationError("expression nested too deeply") from None


def _eval(expr: Expression, context: RuntimeContext) -> int:
    if isinstance(expr, IntLiteral):
        return expr.value

    if isinstance(expr, BinaryOp):
        # Walk the left spine in a loop; only right operands recurse.
        spine: list[BinaryOp] = []
        node: Expression = expr
        while isinstance(node, BinaryOp):
            spine.append(node)
            node = node.left

        result = _eval(node, context)
        for step in reversed(spine):
            with indented_output(context.writer):
                right_value = _eval(step.right, context)
            left_value = result
            result = wrap_int(_binary_ops[step.operator](left_value, right_value))
            if context.writer.debug_enabled:
                context.writer.debugln(
                    f"[{left_value} {step.operator} {right_value} => {result}]"
                )
        return result

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")
