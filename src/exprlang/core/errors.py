"""Error types for construction-time type checking and evaluation."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING

from exprlang.core.types import Type
from exprlang.utils.location import Location

if TYPE_CHECKING:
    from exprlang.core.rules import CondPart, TypeRule


class TypeError(Exception):
    """Base class for type errors.

    Shadows the builtin name inside this package on purpose: a node whose
    operands break its typing rule fails with a ``TypeError``. It does not
    derive from ``builtins.TypeError``.
    """

    location: Location | None

    def __init__(self, message: str, location: Location | None = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location is not None:
            return f"{self.location}: {self.message}"
        return self.message


class OperandTypeError(TypeError):
    """Operand types violate the typing rule of an operator."""

    def __init__(
        self,
        operator: str,
        symbol: str,
        rule: TypeRule,
        operand_types: tuple[Type, ...],
        part: CondPart | None = None,
        location: Location | None = None,
    ):
        self.operator = operator
        self.symbol = symbol
        self.rule = rule
        self.operand_types = operand_types
        self.part = part
        super().__init__(self._describe(), location)

    def _describe(self) -> str:
        from exprlang.core.rules import CondPart

        head = f"{self.operator} ({self.symbol})"
        if self.part is not None:
            cond, then, else_ = self.operand_types
            got = str(cond) if self.part is CondPart.CONDITION else f"{then} and {else_}"
            return f"{head} {self.rule.requirement(self.part)}, got {got}"
        noun = "operand" if len(self.operand_types) == 1 else "operands"
        got = " and ".join(str(t) for t in self.operand_types)
        return f"{head} {noun} {self.rule.requirement()}, got {got}"


class LiteralError(TypeError):
    """Literal node built from a payload of the wrong Python type."""

    def __init__(self, literal: str, value: object, location: Location | None = None):
        self.literal = literal
        self.value = value
        expected = "a bool" if literal == "BoolLit" else "an int"
        super().__init__(f"{literal} expects {expected} payload, got {value!r}", location)


class EvaluationError(Exception):
    """Base class for failures detected while evaluating a valid tree."""

    def __init__(self, message: str, operator: str | None = None):
        super().__init__(message)
        self.operator = operator


class DivisionByZero(EvaluationError, builtins.ArithmeticError):
    """Division or remainder with a zero divisor."""

    def __init__(self, operator: str, symbol: str):
        self.symbol = symbol
        super().__init__(f"{operator} ({symbol}) by zero", operator)


class ExpressionTooDeep(EvaluationError):
    """Tree nesting exceeded the interpreter stack."""

    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Expression nested too deeply for {phase}")
