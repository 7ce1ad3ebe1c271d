"""Tests for the evaluator."""

import pytest

from exprlang.core.ast import (
    Add,
    And,
    AndThen,
    BoolLit,
    Cond,
    Div,
    Equal,
    GreaterThan,
    GreaterThanEq,
    IntLit,
    LessThan,
    LessThanEq,
    Mul,
    Neg,
    Not,
    NotEqual,
    Or,
    OrElse,
    Rem,
    Sub,
    Xor,
)
from exprlang.core.errors import DivisionByZero, EvaluationError, ExpressionTooDeep
from exprlang.eval.machine import Evaluator, evaluate, truncating_divmod


class Recorder:
    """Observer that remembers every node the evaluator visits."""

    def __init__(self):
        self.visited = []

    def __call__(self, expr):
        self.visited.append(expr)

    def saw(self, expr) -> bool:
        return any(node is expr for node in self.visited)


# =============================================================================
# Literals
# =============================================================================


@pytest.mark.parametrize("flag, expected", [(True, 1), (False, 0)])
def test_bool_literal(flag, expected):
    assert evaluate(BoolLit(flag)) == expected


@pytest.mark.parametrize("value", [0, 1, -1, 42, 2**40])
def test_int_literal(value):
    assert evaluate(IntLit(value)) == value


# =============================================================================
# Logic
# =============================================================================


@pytest.mark.parametrize(
    "node, a, b, expected",
    [
        (And, True, False, 0),
        (And, True, True, 1),
        (Or, True, False, 1),
        (Or, False, False, 0),
        (Xor, True, False, 1),
        (Xor, True, True, 0),
    ],
)
def test_connectives(node, a, b, expected):
    assert evaluate(node(BoolLit(a), BoolLit(b))) == expected


def test_not(t, f):
    assert evaluate(Not(t)) == 0
    assert evaluate(Not(f)) == 1
    assert evaluate(Not(Not(t))) == 1


def test_and_or_evaluate_both_operands(f):
    right = BoolLit(True)
    recorder = Recorder()
    Evaluator(observer=recorder).evaluate(And(f, right))
    assert recorder.saw(right)


# =============================================================================
# Short-circuiting
# =============================================================================


class TestShortCircuit:
    def test_and_then_false_skips_right(self, f):
        right = BoolLit(True)
        recorder = Recorder()
        assert Evaluator(observer=recorder).evaluate(AndThen(f, right)) == 0
        assert not recorder.saw(right)

    def test_and_then_true_returns_right(self, t):
        assert evaluate(AndThen(t, BoolLit(False))) == 0
        assert evaluate(AndThen(t, BoolLit(True))) == 1

    def test_or_else_nonzero_left_skips_right(self):
        right = IntLit(9)
        recorder = Recorder()
        assert Evaluator(observer=recorder).evaluate(OrElse(IntLit(4), right)) == 4
        assert not recorder.saw(right)

    def test_or_else_zero_left_takes_right(self):
        assert evaluate(OrElse(IntLit(0), IntLit(9))) == 9
        assert evaluate(OrElse(BoolLit(False), BoolLit(True))) == 1
        assert evaluate(OrElse(BoolLit(True), BoolLit(False))) == 1

    def test_or_else_guards_division(self):
        # 7 || (1 / 0) never divides
        assert evaluate(OrElse(IntLit(7), Div(IntLit(1), IntLit(0)))) == 7

    def test_cond_true_branch(self, t, two, three):
        assert evaluate(Cond(t, two, three)) == 2

    def test_cond_false_branch(self, f, two, three):
        assert evaluate(Cond(f, two, three)) == 3

    def test_cond_skips_untaken_branch(self, t, two, three):
        recorder = Recorder()
        Evaluator(observer=recorder).evaluate(Cond(t, two, three))
        assert recorder.saw(two)
        assert not recorder.saw(three)

    def test_cond_untaken_division_by_zero(self, f):
        expr = Cond(f, Div(IntLit(1), IntLit(0)), IntLit(5))
        assert evaluate(expr) == 5


# =============================================================================
# Comparisons
# =============================================================================


@pytest.mark.parametrize(
    "node, expected",
    [
        (Equal, 0),
        (NotEqual, 1),
        (LessThan, 1),
        (GreaterThan, 0),
        (LessThanEq, 1),
        (GreaterThanEq, 0),
    ],
)
def test_comparisons(node, expected, two, three):
    assert evaluate(node(two, three)) == expected


def test_bool_equality(t, f):
    assert evaluate(Equal(t, t)) == 1
    assert evaluate(NotEqual(t, f)) == 1


# =============================================================================
# Arithmetic
# =============================================================================


@pytest.mark.parametrize(
    "node, expected",
    [(Add, 5), (Sub, -1), (Mul, 6), (Div, 0), (Rem, 2)],
)
def test_arithmetic(node, expected, two, three):
    assert evaluate(node(two, three)) == expected


def test_neg(two):
    assert evaluate(Neg(two)) == -2
    assert evaluate(Neg(Neg(two))) == 2


@pytest.mark.parametrize(
    "x, y, quotient, remainder",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
    ],
)
def test_division_truncates_toward_zero(x, y, quotient, remainder):
    assert truncating_divmod(x, y) == (quotient, remainder)
    assert evaluate(Div(IntLit(x), IntLit(y))) == quotient
    assert evaluate(Rem(IntLit(x), IntLit(y))) == remainder


@pytest.mark.parametrize("node, symbol", [(Div, "/"), (Rem, "%")])
def test_division_by_zero(node, symbol):
    expr = node(IntLit(5), IntLit(0))  # constructs fine
    with pytest.raises(DivisionByZero) as exc:
        evaluate(expr)
    assert exc.value.operator == node.__name__
    assert exc.value.symbol == symbol
    assert isinstance(exc.value, ArithmeticError)
    assert isinstance(exc.value, EvaluationError)


def test_division_by_computed_zero():
    expr = Div(IntLit(5), Sub(IntLit(2), IntLit(2)))
    with pytest.raises(ArithmeticError):
        evaluate(expr)


# =============================================================================
# Whole trees and evaluator behaviour
# =============================================================================


def test_mixed_tree(two, three):
    # (2 < 3 && 3 != 2) ? -(2 * 3) + 10 : 0
    expr = Cond(
        AndThen(LessThan(two, three), NotEqual(three, two)),
        Add(Neg(Mul(two, three)), IntLit(10)),
        IntLit(0),
    )
    assert evaluate(expr) == 4


def test_repeated_evaluation_is_stable(two, three):
    evaluator = Evaluator()
    expr = Mul(Add(two, three), three)
    assert evaluator.evaluate(expr) == evaluator.evaluate(expr) == 15


def test_deep_tree_reports_distinct_error():
    expr = IntLit(1)
    for _ in range(100_000):
        expr = Neg(expr)
    with pytest.raises(ExpressionTooDeep) as exc:
        evaluate(expr)
    assert exc.value.phase == "evaluation"


def test_unknown_node():
    with pytest.raises(EvaluationError, match="Cannot evaluate"):
        evaluate(object())  # type: ignore[arg-type]
