"""Core language: types, AST, typing rules and type checker."""

from exprlang.core.ast import (
    Add,
    And,
    AndThen,
    BinaryExpr,
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
    UnaryExpr,
    Xor,
)
from exprlang.core.checker import TypeChecker, check
from exprlang.core.errors import (
    DivisionByZero,
    EvaluationError,
    ExpressionTooDeep,
    LiteralError,
    OperandTypeError,
    TypeError,
)
from exprlang.core.rules import CondPart, TypeRule, apply_rule
from exprlang.core.types import (
    BOOL,
    INT,
    PrimitiveType,
    Type,
    bool_type,
    int_type,
    type_equals,
)

__all__ = [
    # AST
    "Expr",
    "BoolLit",
    "IntLit",
    "UnaryExpr",
    "BinaryExpr",
    "Cond",
    "Not",
    "Neg",
    "And",
    "Or",
    "Xor",
    "AndThen",
    "OrElse",
    "Equal",
    "NotEqual",
    "LessThan",
    "GreaterThan",
    "LessThanEq",
    "GreaterThanEq",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Rem",
    # Types
    "Type",
    "PrimitiveType",
    "BOOL",
    "INT",
    "bool_type",
    "int_type",
    "type_equals",
    # Rules
    "TypeRule",
    "CondPart",
    "apply_rule",
    # Errors
    "TypeError",
    "OperandTypeError",
    "LiteralError",
    "EvaluationError",
    "DivisionByZero",
    "ExpressionTooDeep",
    # Type Checker
    "TypeChecker",
    "check",
]
