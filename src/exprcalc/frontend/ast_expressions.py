from dataclasses import dataclass
from enum import Enum


class Opr(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class IntLiteral(Expression):
    value: int

    def __str__(self) -> str:
        return str(self.value)


# Equal-precedence chains lean left: "a - b - c" is
# BinaryOp(BinaryOp(a, SUB, b), SUB, c).
@dataclass(frozen=True, slots=True)
class BinaryOp(Expression):
    left: Expression
    operator: Opr
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


def negated(expr: Expression) -> BinaryOp:
    """Unary minus is encoded as a subtraction from zero."""
    return BinaryOp(IntLiteral(0), Opr.SUB, expr)
