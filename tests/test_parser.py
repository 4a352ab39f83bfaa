import pytest

from exprcalc.frontend.ast_expressions import BinaryOp, IntLiteral, Opr
from exprcalc.frontend.errors import ParseError
from exprcalc.frontend.parser import Parser, parse


# ===== Literals =====
def test_parse_single_number() -> None:
    assert parse("42") == IntLiteral(42)


def test_leading_zeros_are_decimal() -> None:
    assert parse("007") == IntLiteral(7)


def test_largest_literal_is_accepted() -> None:
    assert parse("2147483647") == IntLiteral(2147483647)


def test_literal_above_int_range_is_rejected() -> None:
    with pytest.raises(ParseError, match=r"^number out of range at 2$") as info:
        parse("1+2147483648")
    assert info.value.position == 2


def test_non_ascii_digits_are_not_numbers() -> None:
    with pytest.raises(ParseError, match=r"^expected number at 0$"):
        parse("٣")


# ===== Precedence and Associativity =====
def test_precedence_mul_before_add() -> None:
    assert parse("1+2*3") == BinaryOp(
        IntLiteral(1), Opr.ADD, BinaryOp(IntLiteral(2), Opr.MUL, IntLiteral(3))
    )


def test_parentheses_override_precedence() -> None:
    assert parse("(1+2)*3") == BinaryOp(
        BinaryOp(IntLiteral(1), Opr.ADD, IntLiteral(2)), Opr.MUL, IntLiteral(3)
    )


def test_subtraction_chain_leans_left() -> None:
    assert parse("10-3-2") == BinaryOp(
        BinaryOp(IntLiteral(10), Opr.SUB, IntLiteral(3)), Opr.SUB, IntLiteral(2)
    )


def test_division_chain_leans_left() -> None:
    expr = parse("8/4/2")
    assert isinstance(expr, BinaryOp)
    assert expr.operator == Opr.DIV
    assert expr.right == IntLiteral(2)
    assert expr.left == BinaryOp(IntLiteral(8), Opr.DIV, IntLiteral(4))


def test_mixed_multiplicative_chain_leans_left() -> None:
    expr = parse("6/2*3")
    assert isinstance(expr, BinaryOp)
    assert expr.operator == Opr.MUL
    assert expr.left == BinaryOp(IntLiteral(6), Opr.DIV, IntLiteral(2))


# ===== Unary Signs =====
def test_single_minus_wraps_in_subtraction_from_zero() -> None:
    assert parse("-5") == BinaryOp(IntLiteral(0), Opr.SUB, IntLiteral(5))


def test_even_number_of_minus_signs_cancels() -> None:
    assert parse("--5") == IntLiteral(5)


def test_plus_signs_are_ignored() -> None:
    assert parse("+-+5") == BinaryOp(IntLiteral(0), Opr.SUB, IntLiteral(5))
    assert parse("++5") == IntLiteral(5)


def test_sign_applies_to_parenthesized_group() -> None:
    assert parse("-(1+2)") == BinaryOp(
        IntLiteral(0), Opr.SUB, BinaryOp(IntLiteral(1), Opr.ADD, IntLiteral(2))
    )


def test_sign_binds_tighter_than_multiplication() -> None:
    assert parse("-2*3") == BinaryOp(
        BinaryOp(IntLiteral(0), Opr.SUB, IntLiteral(2)), Opr.MUL, IntLiteral(3)
    )


def test_sign_after_binary_operator() -> None:
    assert parse("2*-3") == BinaryOp(
        IntLiteral(2), Opr.MUL, BinaryOp(IntLiteral(0), Opr.SUB, IntLiteral(3))
    )


# ===== Whitespace =====
@pytest.mark.parametrize(
    "line",
    ["1+2*3", " 1 + 2 * 3 ", "\t1+\t2 *3\n", "1   +2*   3"],
)
def test_whitespace_between_tokens_is_ignored(line: str) -> None:
    assert parse(line) == parse("1+2*3")


def test_whitespace_between_signs_is_ignored() -> None:
    assert parse("- - 5") == IntLiteral(5)


# ===== Failures =====
def test_missing_closing_parenthesis() -> None:
    with pytest.raises(ParseError, match=r"^missing closing parenthesis at 6$"):
        parse("2*(3+4")


def test_trailing_input_is_rejected() -> None:
    with pytest.raises(ParseError, match=r"^failed at char 2$") as info:
        parse("2 3")
    assert info.value.position == 2


def test_unmatched_closing_parenthesis_is_trailing_input() -> None:
    with pytest.raises(ParseError, match=r"^failed at char 1$"):
        parse("1)")


def test_dangling_operator_expects_number() -> None:
    with pytest.raises(ParseError, match=r"^expected number at 2$"):
        parse("1+")


def test_empty_parentheses_expect_number() -> None:
    with pytest.raises(ParseError, match=r"^expected number at 1$"):
        parse("()")


def test_unknown_character_is_rejected() -> None:
    with pytest.raises(ParseError, match=r"^expected number at 0$"):
        parse("x")


def test_positions_count_leading_whitespace() -> None:
    with pytest.raises(ParseError, match=r"^failed at char 4$"):
        parse("  1 %")


def test_deep_nesting_is_reported_as_parse_error() -> None:
    depth = 5000
    with pytest.raises(ParseError, match="nested too deeply"):
        parse("(" * depth + "1" + ")" * depth)


# ===== Cursor Primitives =====
def test_peek_does_not_advance() -> None:
    parser = Parser("  +")
    assert parser.peek("+")
    assert parser.pos == 2


def test_match_advances_past_token() -> None:
    parser = Parser("  +1")
    assert not parser.match("-")
    assert parser.match("+")
    assert parser.pos == 3


def test_each_parse_uses_fresh_state() -> None:
    assert parse("1+1") == parse("1+1")
