"""Expression AST.

Every node is immutable and type-checked when it is built: operands are
constructed first, so a composite node only has to apply its operator's rule
to the already-known operand types. A node whose operands break the rule is
never created; its constructor raises ``OperandTypeError`` instead.

The operators share three shapes (unary, binary, conditional). Each operator
class only declares its surface ``symbol`` and its ``rule``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from exprlang.core.errors import LiteralError, TypeError
from exprlang.core.rules import TypeRule, apply_rule
from exprlang.core.types import BOOL, INT, Type
from exprlang.utils.numbers import int_text


class Expr:
    """Base class for expressions."""

    _type: Type

    @property
    def type(self) -> Type:
        """Type established when the node was constructed."""
        return self._type

    @property
    def operator(self) -> str:
        return type(self).__name__

    def operands(self) -> tuple[Expr, ...]:
        return ()

    def _settle(self) -> None:
        cls = type(self)
        if not hasattr(cls, "rule"):
            raise TypeError(f"{self.operator} is an operator shape; build one of its operators instead")
        symbol, rule = cls.symbol, cls.rule
        operands = self.operands()
        for operand in operands:
            if not isinstance(operand, Expr):
                raise TypeError(f"{self.operator} ({symbol}) operands must be expressions, got {operand!r}")
        result = apply_rule(rule, self.operator, symbol, tuple(op.type for op in operands))
        object.__setattr__(self, "_type", result)


@dataclass(frozen=True)
class BoolLit(Expr):
    """Boolean literal: true, false"""

    value: bool
    _type: Type = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise LiteralError("BoolLit", self.value)
        object.__setattr__(self, "_type", BOOL)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntLit(Expr):
    """Integer literal: 42

    Created by the parser from decimal, binary and hex NUMBER tokens.
    """

    value: int
    _type: Type = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise LiteralError("IntLit", self.value)
        object.__setattr__(self, "_type", INT)

    def __str__(self) -> str:
        return int_text(self.value)


# =============================================================================
# Operator shapes
# =============================================================================


@dataclass(frozen=True)
class UnaryExpr(Expr):
    """Prefix operator applied to one operand."""

    operand: Expr
    _type: Type = field(init=False, repr=False, compare=False)

    symbol: ClassVar[str]
    rule: ClassVar[TypeRule]

    def __post_init__(self) -> None:
        self._settle()

    def operands(self) -> tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return f"{self.symbol}{self.operand}"


@dataclass(frozen=True)
class BinaryExpr(Expr):
    """Infix operator applied to two operands."""

    left: Expr
    right: Expr
    _type: Type = field(init=False, repr=False, compare=False)

    symbol: ClassVar[str]
    rule: ClassVar[TypeRule]

    def __post_init__(self) -> None:
        self._settle()

    def operands(self) -> tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True)
class Cond(Expr):
    """Conditional: cond ? then : else_

    The condition must be Bool; both branches must share a type, which is the
    type of the whole expression.
    """

    cond: Expr
    then: Expr
    else_: Expr
    _type: Type = field(init=False, repr=False, compare=False)

    symbol: ClassVar[str] = "?:"
    rule: ClassVar[TypeRule] = TypeRule.CONDITIONAL

    def __post_init__(self) -> None:
        self._settle()

    def operands(self) -> tuple[Expr, ...]:
        return (self.cond, self.then, self.else_)

    def __str__(self) -> str:
        return f"({self.cond} ? {self.then} : {self.else_})"


# =============================================================================
# Unary operators
# =============================================================================


class Not(UnaryExpr):
    symbol = "!"
    rule = TypeRule.BOOL_OPERANDS


class Neg(UnaryExpr):
    symbol = "-"
    rule = TypeRule.INT_OPERANDS


# =============================================================================
# Logical operators (Bool, Bool -> Bool)
# =============================================================================


class And(BinaryExpr):
    symbol = "&"
    rule = TypeRule.BOOL_OPERANDS


class Or(BinaryExpr):
    symbol = "|"
    rule = TypeRule.BOOL_OPERANDS


class Xor(BinaryExpr):
    symbol = "^"
    rule = TypeRule.BOOL_OPERANDS


class AndThen(BinaryExpr):
    """Short-circuit and: the right operand is skipped when the left is false."""

    symbol = "&&"
    rule = TypeRule.BOOL_OPERANDS


class OrElse(BinaryExpr):
    """Short-circuit or: left if it is nonzero, otherwise right.

    Operands may be of either type as long as they agree.
    """

    symbol = "||"
    rule = TypeRule.SAME_TYPE


# =============================================================================
# Comparisons
# =============================================================================


class Equal(BinaryExpr):
    symbol = "=="
    rule = TypeRule.SAME_TYPE_COMPARISON


class NotEqual(BinaryExpr):
    symbol = "!="
    rule = TypeRule.SAME_TYPE_COMPARISON


class LessThan(BinaryExpr):
    symbol = "<"
    rule = TypeRule.INT_COMPARISON


class GreaterThan(BinaryExpr):
    symbol = ">"
    rule = TypeRule.INT_COMPARISON


class LessThanEq(BinaryExpr):
    symbol = "<="
    rule = TypeRule.INT_COMPARISON


class GreaterThanEq(BinaryExpr):
    symbol = ">="
    rule = TypeRule.INT_COMPARISON


# =============================================================================
# Arithmetic (Int, Int -> Int)
# =============================================================================


class Add(BinaryExpr):
    symbol = "+"
    rule = TypeRule.INT_OPERANDS


class Sub(BinaryExpr):
    symbol = "-"
    rule = TypeRule.INT_OPERANDS


class Mul(BinaryExpr):
    symbol = "*"
    rule = TypeRule.INT_OPERANDS


class Div(BinaryExpr):
    """Truncating integer division; a zero divisor fails at evaluation."""

    symbol = "/"
    rule = TypeRule.INT_OPERANDS


class Rem(BinaryExpr):
    """Remainder of truncating division; takes the sign of the dividend."""

    symbol = "%"
    rule = TypeRule.INT_OPERANDS


# Export the expression union for type checking
ExprRepr = Union[
    BoolLit,
    IntLit,
    Not,
    Neg,
    And,
    Or,
    Xor,
    AndThen,
    OrElse,
    Equal,
    NotEqual,
    LessThan,
    GreaterThan,
    LessThanEq,
    GreaterThanEq,
    Add,
    Sub,
    Mul,
    Div,
    Rem,
    Cond,
]
