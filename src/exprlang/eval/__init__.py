"""Interpreter and result formatting."""

from exprlang.eval.format import OutputFormat, format_value
from exprlang.eval.machine import Evaluator, evaluate, truncating_divmod

__all__ = [
    "Evaluator",
    "evaluate",
    "truncating_divmod",
    "OutputFormat",
    "format_value",
]
