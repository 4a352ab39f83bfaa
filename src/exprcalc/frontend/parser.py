from __future__ import annotations

from ..runtime.core import INT_MAX, RuntimeContext
from ..writer import IndentingWriter, indented_output
from .ast_expressions import BinaryOp, Expression, IntLiteral, Opr, negated
from .errors import ParseError

_additive_ops = {"+": Opr.ADD, "-": Opr.SUB}
_multiplicative_ops = {"*": Opr.MUL, "/": Opr.DIV}


class Parser:
    """Recursive-descent parser for a single line.

    Binding strength grows with call depth:

        parse -> parse_expression -> parse_term -> parse_unary -> parse_number

    The cursor only moves forward. ``peek`` and ``match`` skip whitespace
    first, so the rules never deal with it directly.
    """

    def __init__(self, source: str, writer: IndentingWriter | None = None) -> None:
        self.source = source
        self.pos = 0
        self._writer = writer or IndentingWriter()

    def parse(self) -> Expression:
        try:
            result = self.parse_expression()
        except RecursionError:
            raise ParseError(
                f"expression nested too deeply at {self.pos}", self.pos
            ) from None

        self.skip_spaces()
        if self.pos < len(self.source):
            raise ParseError(f"failed at char {self.pos}", self.pos)
        return result

    def peek(self, char: str) -> bool:
        self.skip_spaces()
        return self.pos < len(self.source) and self.source[self.pos] == char

    def match(self, char: str) -> bool:
        if self.peek(char):
            self.pos += 1
            return True
        return False

    def skip_spaces(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

    def parse_expression(self) -> Expression:
        self._writer.debugln(f"expression @{self.pos}")
        with indented_output(self._writer):
            result = self.parse_term()
            while (op := self._match_any(_additive_ops)) is not None:
                result = BinaryOp(result, op, self.parse_term())
        return result

    def parse_term(self) -> Expression:
        self._writer.debugln(f"term @{self.pos}")
        with indented_output(self._writer):
            result = self.parse_unary()
            while (op := self._match_any(_multiplicative_ops)) is not None:
                result = BinaryOp(result, op, self.parse_unary())
        return result

    def parse_unary(self) -> Expression:
        negative = False
        while self.peek("+") or self.peek("-"):
            if self.match("-"):
                negative = not negative
            else:
                self.match("+")

        if self.match("("):
            result = self.parse_expression()
            if not self.match(")"):
                raise ParseError(
                    f"missing closing parenthesis at {self.pos}", self.pos
                )
        else:
            result = self.parse_number()

        if negative:
            result = negated(result)
        return result

    def parse_number(self) -> IntLiteral:
        self.skip_spaces()
        start = self.pos
        while self.pos < len(self.source) and _is_ascii_digit(self.source[self.pos]):
            self.pos += 1

        if start == self.pos:
            raise ParseError(f"expected number at {self.pos}", self.pos)

        value = int(self.source[start : self.pos])
        if value > INT_MAX:
            raise ParseError(f"number out of range at {start}", start)

        self._writer.debugln(f"number {value} @{start}")
        return IntLiteral(value)

    def _match_any(self, ops: dict[str, Opr]) -> Opr | None:
        for char, op in ops.items():
            if self.match(char):
                return op
        return None


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse(line: str, context: RuntimeContext | None = None) -> Expression:
    context = context or RuntimeContext()
    return Parser(line, context.writer).parse()
