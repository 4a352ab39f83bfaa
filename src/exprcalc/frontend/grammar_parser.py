from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Tree
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)
from lark.visitors import Transformer_NonRecursive

from ..runtime.core import INT_MAX
from .ast_expressions import BinaryOp, Expression, IntLiteral, Opr, negated
from .errors import ParseError


# Flat chains such as "1+1+...+1" build trees thousands of levels deep.
class AstTransformer(Transformer_NonRecursive):
    def add(self, children: list[object]) -> BinaryOp:
        return self._binary(children, Opr.ADD)

    def sub(self, children: list[object]) -> BinaryOp:
        return self._binary(children, Opr.SUB)

    def mul(self, children: list[object]) -> BinaryOp:
        return self._binary(children, Opr.MUL)

    def div(self, children: list[object]) -> BinaryOp:
        return self._binary(children, Opr.DIV)

    def _binary(self, children: list[object], op: Opr) -> BinaryOp:
        [left, right] = children
        return BinaryOp(self._as_expression(left), op, self._as_expression(right))

    def plus(self, children: list[object]) -> str:
        return "+"

    def minus(self, children: list[object]) -> str:
        return "-"

    def unary(self, children: list[object]) -> Expression:
        *signs, primary = children
        result = self._as_expression(primary)
        if signs.count("-") % 2 == 1:
            result = negated(result)
        return result

    def number(self, children: list[object]) -> IntLiteral:
        [number] = children
        assert isinstance(number, Token)
        value = int(str(number))
        if value > INT_MAX:
            position = number.start_pos or 0
            raise ParseError(f"number out of range at {position}", position)
        return IntLiteral(value)

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("exprcalc.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(line: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(line)
    return cast(Tree[Token], tree)


def parse_with_grammar(line: str) -> Expression:
    try:
        parsed = parse_tree(line)
    except UnexpectedInput as error:
        raise _as_parse_error(error, line) from None

    try:
        result = AstTransformer().transform(parsed)
    except VisitError as error:
        if isinstance(error.orig_exc, ParseError):
            raise error.orig_exc from None
        raise

    assert isinstance(result, Expression)
    return result


def _as_parse_error(error: UnexpectedInput, line: str) -> ParseError:
    if isinstance(error, UnexpectedToken):
        expected = set(error.expected)
        if error.token.type == "$END":
            position = len(line)
        else:
            position = error.token.start_pos or 0
    elif isinstance(error, UnexpectedCharacters):
        expected = set(error.allowed or ())
        position = error.pos_in_stream
    else:
        expected = set()
        position = max(error.pos_in_stream or 0, 0)

    if "NUMBER" in expected:
        return ParseError(f"expected number at {position}", position)
    if "RPAR" in expected:
        return ParseError(f"missing closing parenthesis at {position}", position)
    return ParseError(f"failed at char {position}", position)
