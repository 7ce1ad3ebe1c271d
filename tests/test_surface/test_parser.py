"""Tests for the expression parser."""

import pytest

from exprlang.core.ast import (
    Add,
    And,
    AndThen,
    BoolLit,
    Cond,
    Div,
    Equal,
    IntLit,
    LessThan,
    Mul,
    Neg,
    Not,
    Or,
    OrElse,
    Sub,
    Xor,
)
from exprlang.core.errors import OperandTypeError
from exprlang.surface.lexer import lex
from exprlang.surface.parser import ParseError, Parser, parse_expression
from exprlang.utils.location import Location


def parse(source: str):
    return parse_expression(source)


# =============================================================================
# Atoms
# =============================================================================


class TestAtoms:
    def test_literals(self):
        assert parse("true") == BoolLit(True)
        assert parse("17") == IntLit(17)
        assert parse("0b11") == IntLit(3)
        assert parse("0xff") == IntLit(255)

    def test_parentheses(self):
        assert parse("((5))") == IntLit(5)

    def test_unary(self):
        assert parse("-3") == Neg(IntLit(3))
        assert parse("!true") == Not(BoolLit(True))
        assert parse("~false") == Not(BoolLit(False))
        assert parse("--3") == Neg(Neg(IntLit(3)))

    def test_empty_input(self):
        assert parse("") is None
        assert parse("   # only a comment") is None

    def test_trailing_comment(self):
        assert parse("1 + 2 # three") == Add(IntLit(1), IntLit(2))


# =============================================================================
# Precedence and associativity
# =============================================================================


class TestPrecedence:
    def test_multiplication_binds_tighter(self):
        assert parse("1 + 2 * 3") == Add(IntLit(1), Mul(IntLit(2), IntLit(3)))

    def test_left_associative(self):
        assert parse("8 - 4 - 2") == Sub(Sub(IntLit(8), IntLit(4)), IntLit(2))
        assert parse("8 / 4 / 2") == Div(Div(IntLit(8), IntLit(4)), IntLit(2))

    def test_comparison_below_arithmetic(self):
        assert parse("1 + 1 < 3") == LessThan(Add(IntLit(1), IntLit(1)), IntLit(3))

    def test_equality_below_relational(self):
        expr = parse("1 < 2 == true")
        assert expr == Equal(LessThan(IntLit(1), IntLit(2)), BoolLit(True))

    def test_and_above_or(self):
        t, f = BoolLit(True), BoolLit(False)
        assert parse("true | false & true") == Or(t, And(f, t))
        assert parse("true || false && true") == OrElse(t, AndThen(f, t))

    def test_xor_shares_or_level(self):
        t, f = BoolLit(True), BoolLit(False)
        assert parse("true ^ false | true") == Or(Xor(t, f), t)

    def test_unary_binds_tightest(self):
        assert parse("-2 * 3") == Mul(Neg(IntLit(2)), IntLit(3))

    def test_parentheses_override(self):
        assert parse("(1 + 2) * 3") == Mul(Add(IntLit(1), IntLit(2)), IntLit(3))

    def test_conditional(self):
        expr = parse("1 < 2 ? 10 : 20")
        assert expr == Cond(LessThan(IntLit(1), IntLit(2)), IntLit(10), IntLit(20))

    def test_conditional_right_associative(self):
        t, f = BoolLit(True), BoolLit(False)
        expr = parse("true ? 1 : false ? 2 : 3")
        assert expr == Cond(t, IntLit(1), Cond(f, IntLit(2), IntLit(3)))

    def test_conditional_nested_in_then(self):
        t, f = BoolLit(True), BoolLit(False)
        expr = parse("true ? false ? 1 : 2 : 3")
        assert expr == Cond(t, Cond(f, IntLit(1), IntLit(2)), IntLit(3))


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    def test_type_error_carries_operator_location(self):
        with pytest.raises(OperandTypeError) as exc:
            parse("1 + (2 & 3)")
        assert exc.value.operator == "And"
        assert exc.value.location == Location(1, 8)
        assert str(exc.value).startswith("<stdin>:1:8: And (&) operands must be Bool")

    def test_cond_type_error_location(self):
        with pytest.raises(OperandTypeError) as exc:
            parse_expression("true ? 1 : false", filename="f.expr")
        assert exc.value.location == Location(1, 6, "f.expr")

    def test_identifiers_are_rejected(self):
        with pytest.raises(ParseError, match="Unknown identifier: x"):
            parse("x + 1")

    def test_missing_operand(self):
        with pytest.raises(ParseError, match="Expected an expression, got end of input"):
            parse("1 +")

    def test_unbalanced_parenthesis(self):
        with pytest.raises(ParseError, match="Expected RPAREN"):
            parse("(1 + 2")

    def test_leftover_tokens(self):
        with pytest.raises(ParseError) as exc:
            parse("1 2")
        assert exc.value.message == "Unexpected '2' after expression"
        assert exc.value.location == Location(1, 3)

    def test_missing_colon(self):
        with pytest.raises(ParseError, match="Expected COLON"):
            parse("true ? 1 2")

    def test_nesting_too_deep(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            parse("(" * 5000 + "1" + ")" * 5000)

    def test_moderate_nesting_is_fine(self):
        assert parse("(" * 20 + "1" + ")" * 20) == IntLit(1)


def test_parser_skips_comments():
    parser = Parser(lex("# lead\n1"))
    assert parser.parse() == IntLit(1)
