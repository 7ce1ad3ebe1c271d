"""Type checker for expression trees.

Construction already checks every node, so on a tree built through the
constructors ``check`` always agrees with ``node.type``. It re-derives the
type from scratch, children first, with the same rules, and never mutates
the tree.
"""

from exprlang.core.ast import BinaryExpr, BoolLit, Cond, Expr, IntLit, UnaryExpr
from exprlang.core.errors import ExpressionTooDeep, TypeError
from exprlang.core.rules import apply_rule
from exprlang.core.types import BOOL, INT, Type


class TypeChecker:
    """Bottom-up type synthesis for expressions."""

    def infer(self, expr: Expr) -> Type:
        """Synthesize the type of an expression.

        Args:
            expr: Expression to check

        Returns:
            The expression's type

        Raises:
            OperandTypeError: If an operator's operands violate its rule
            ExpressionTooDeep: If the tree is too deep to walk recursively
        """
        try:
            return self._infer(expr)
        except RecursionError as e:
            raise ExpressionTooDeep("type checking") from e

    def _infer(self, expr: Expr) -> Type:
        match expr:
            case BoolLit():
                return BOOL

            case IntLit():
                return INT

            case UnaryExpr(operand):
                operand_type = self._infer(operand)
                return apply_rule(expr.rule, expr.operator, expr.symbol, (operand_type,))

            case BinaryExpr(left, right):
                left_type = self._infer(left)
                right_type = self._infer(right)
                return apply_rule(expr.rule, expr.operator, expr.symbol, (left_type, right_type))

            case Cond(cond, then, else_):
                types = (self._infer(cond), self._infer(then), self._infer(else_))
                return apply_rule(expr.rule, expr.operator, expr.symbol, types)

            case _:
                raise TypeError(f"Not an expression: {expr!r}")


def check(expr: Expr) -> Type:
    """Return the type of an expression, re-checking every node."""
    return TypeChecker().infer(expr)
