"""Tree-walking evaluator for the expression language."""

from typing import Callable

from exprlang.core.ast import (
    Add,
    And,
    AndThen,
    BoolLit,
    Cond,
    Div,
    Equal,
    Expr,
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


def _bit(flag: bool) -> int:
    """Project a Python bool onto the integer domain."""
    return 1 if flag else 0


def truncating_divmod(x: int, y: int) -> tuple[int, int]:
    """Quotient rounded toward zero, remainder with the dividend's sign.

    Python's ``//`` and ``%`` floor instead; -7 / 2 must be -3 and -7 % 2
    must be -1 here.
    """
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    return q, x - q * y


class Evaluator:
    """Reduces a well-typed expression to an integer.

    Booleans evaluate to 1 and 0, so the logical connectives are the bitwise
    integer operators. Evaluation holds no state between calls.
    """

    def __init__(self, observer: Callable[[Expr], None] | None = None) -> None:
        """Initialize the evaluator.

        Args:
            observer: Called with every node right before it is evaluated.
                Nodes skipped by short-circuiting are never reported.
        """
        self.observer = observer

    def evaluate(self, expr: Expr) -> int:
        """Evaluate an expression.

        Raises:
            DivisionByZero: On division or remainder by zero
            ExpressionTooDeep: If the tree is too deep to walk recursively
        """
        try:
            return self._eval(expr)
        except RecursionError as e:
            raise ExpressionTooDeep("evaluation") from e

    def _eval(self, expr: Expr) -> int:
        if self.observer is not None:
            self.observer(expr)

        match expr:
            case BoolLit(value):
                return _bit(value)
            case IntLit(value):
                return value

            case Not(operand):
                return _bit(self._eval(operand) == 0)
            case Neg(operand):
                return -self._eval(operand)

            case And(left, right):
                return self._eval(left) & self._eval(right)
            case Or(left, right):
                return self._eval(left) | self._eval(right)
            case Xor(left, right):
                return self._eval(left) ^ self._eval(right)
            case AndThen(left, right):
                # Right side only runs when the left is true
                return self._eval(right) if self._eval(left) == 1 else 0
            case OrElse(left, right):
                value = self._eval(left)
                return value if value != 0 else self._eval(right)

            case Cond(cond, then, else_):
                return self._eval(then) if self._eval(cond) != 0 else self._eval(else_)

            case Equal(left, right):
                return _bit(self._eval(left) == self._eval(right))
            case NotEqual(left, right):
                return _bit(self._eval(left) != self._eval(right))
            case LessThan(left, right):
                return _bit(self._eval(left) < self._eval(right))
            case GreaterThan(left, right):
                return _bit(self._eval(left) > self._eval(right))
            case LessThanEq(left, right):
                return _bit(self._eval(left) <= self._eval(right))
            case GreaterThanEq(left, right):
                return _bit(self._eval(left) >= self._eval(right))

            case Add(left, right):
                return self._eval(left) + self._eval(right)
            case Sub(left, right):
                return self._eval(left) - self._eval(right)
            case Mul(left, right):
                return self._eval(left) * self._eval(right)
            case Div(left, right):
                x, y = self._eval(left), self._eval(right)
                if y == 0:
                    raise DivisionByZero(expr.operator, expr.symbol)
                return truncating_divmod(x, y)[0]
            case Rem(left, right):
                x, y = self._eval(left), self._eval(right)
                if y == 0:
                    raise DivisionByZero(expr.operator, expr.symbol)
                return truncating_divmod(x, y)[1]

            case _:
                raise EvaluationError(f"Cannot evaluate {expr!r}")


def evaluate(expr: Expr) -> int:
    """Evaluate an expression with a fresh evaluator."""
    return Evaluator().evaluate(expr)
