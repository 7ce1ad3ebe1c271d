"""Typed Bool/Int expression language: AST, type checker and evaluator."""

from exprlang.core import (
    Add,
    And,
    AndThen,
    BoolLit,
    Cond,
    Div,
    DivisionByZero,
    Equal,
    EvaluationError,
    Expr,
    ExpressionTooDeep,
    GreaterThan,
    GreaterThanEq,
    IntLit,
    LessThan,
    LessThanEq,
    Mul,
    Neg,
    Not,
    NotEqual,
    OperandTypeError,
    Or,
    OrElse,
    Rem,
    Sub,
    TypeError,
    Xor,
    bool_type,
    check,
    int_type,
    type_equals,
)
from exprlang.eval import Evaluator, evaluate

__version__ = "0.1.0"

__all__ = [
    "Expr",
    "BoolLit",
    "IntLit",
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
    "Cond",
    "bool_type",
    "int_type",
    "type_equals",
    "check",
    "Evaluator",
    "evaluate",
    "TypeError",
    "OperandTypeError",
    "EvaluationError",
    "DivisionByZero",
    "ExpressionTooDeep",
]
