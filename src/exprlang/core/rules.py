"""Typing rules shared by node construction and the checker.

Every operator names one rule. A rule maps the types of an operator's
operands to its result type, or raises ``OperandTypeError`` naming the
operator and the rule that failed.
"""

from __future__ import annotations

from enum import Enum, auto

from exprlang.core.errors import OperandTypeError
from exprlang.core.types import BOOL, INT, Type, type_equals


class CondPart(Enum):
    """Which part of a conditional broke the CONDITIONAL rule."""

    CONDITION = "condition"
    BRANCHES = "branches"


class TypeRule(Enum):
    """Operand requirements of the language's operators."""

    BOOL_OPERANDS = auto()  # Bool, ... -> Bool
    INT_OPERANDS = auto()  # Int, ... -> Int
    INT_COMPARISON = auto()  # Int, Int -> Bool
    SAME_TYPE_COMPARISON = auto()  # T, T -> Bool
    SAME_TYPE = auto()  # T, T -> T
    CONDITIONAL = auto()  # Bool, T, T -> T

    def requirement(self, part: CondPart | None = None) -> str:
        """Human-readable requirement, used in error messages."""
        match self:
            case TypeRule.BOOL_OPERANDS:
                return "must be Bool"
            case TypeRule.INT_OPERANDS | TypeRule.INT_COMPARISON:
                return "must be Int"
            case TypeRule.SAME_TYPE_COMPARISON | TypeRule.SAME_TYPE:
                return "must have the same type"
            case TypeRule.CONDITIONAL if part is CondPart.CONDITION:
                return "condition must be Bool"
            case TypeRule.CONDITIONAL:
                return "branches must have the same type"


def _all(types: tuple[Type, ...], expected: Type) -> bool:
    return all(type_equals(t, expected) for t in types)


def apply_rule(rule: TypeRule, operator: str, symbol: str, operand_types: tuple[Type, ...]) -> Type:
    """Compute an operator's result type from its operand types.

    Args:
        rule: The operator's typing rule
        operator: Operator name, e.g. "And"
        symbol: Surface symbol, e.g. "&"
        operand_types: Types of the operands, in source order

    Returns:
        The result type

    Raises:
        OperandTypeError: If the operand types violate the rule
    """
    match rule:
        case TypeRule.BOOL_OPERANDS:
            if _all(operand_types, BOOL):
                return BOOL
        case TypeRule.INT_OPERANDS:
            if _all(operand_types, INT):
                return INT
        case TypeRule.INT_COMPARISON:
            if _all(operand_types, INT):
                return BOOL
        case TypeRule.SAME_TYPE_COMPARISON:
            left, right = operand_types
            if type_equals(left, right):
                return BOOL
        case TypeRule.SAME_TYPE:
            left, right = operand_types
            if type_equals(left, right):
                return left
        case TypeRule.CONDITIONAL:
            cond, then, else_ = operand_types
            if not type_equals(cond, BOOL):
                raise OperandTypeError(operator, symbol, rule, operand_types, CondPart.CONDITION)
            if not type_equals(then, else_):
                raise OperandTypeError(operator, symbol, rule, operand_types, CondPart.BRANCHES)
            return then

    raise OperandTypeError(operator, symbol, rule, operand_types)
