"""Line-at-a-time pipeline: lexer -> parser -> evaluator.

The driver is the only place errors are recovered from. Each line produces
a ``LineResult`` holding either a value or the error that stopped it, and
the next line is processed regardless.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal

from loguru import logger

from exprlang.core.errors import EvaluationError, TypeError
from exprlang.core.types import Type
from exprlang.eval.format import OutputFormat, format_value
from exprlang.eval.machine import Evaluator
from exprlang.surface.parser import ParseError, parse_expression
from exprlang.surface.types import LexerError

ErrorKind = Literal["lex", "parse", "type", "eval"]


@dataclass(frozen=True)
class LineResult:
    """Outcome of one input line."""

    source: str
    value: int | None = None
    type: Type | None = None
    error: Exception | None = None
    kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def empty(self) -> bool:
        """True for lines holding nothing but whitespace and comments."""
        return self.error is None and self.value is None and self.type is None

    def render(self, fmt: OutputFormat = OutputFormat.DECIMAL, show_type: bool = False) -> str:
        if self.error is not None:
            return f"{self.kind} error: {self.error}"
        if self.value is None:
            return ""
        text = format_value(self.value, fmt)
        if show_type and self.type is not None:
            return f"{text} : {self.type}"
        return text


class Driver:
    """Feeds lines through the pipeline and catches per-line failures."""

    def __init__(self, filename: str = "<stdin>") -> None:
        self.filename = filename
        self.log = logger.bind(source=filename)
        self.evaluator = Evaluator()

    def process(self, line: str, line_no: int = 1, *, evaluate: bool = True) -> LineResult:
        """Lex, parse and evaluate one line.

        With ``evaluate=False`` the line is only parsed and type-checked; the
        result carries the type and no value.
        """
        try:
            expr = parse_expression(line, self.filename, line_no)
            if expr is None:
                return LineResult(source=line)
            if not evaluate:
                return LineResult(source=line, type=expr.type)
            value = self.evaluator.evaluate(expr)
            self.log.debug(
                "driver.eval line={} root={} type={} bits={}", line_no, expr.operator, expr.type, value.bit_length()
            )
            return LineResult(source=line, value=value, type=expr.type)
        except LexerError as e:
            return self._failed(line, e, "lex")
        except ParseError as e:
            return self._failed(line, e, "parse")
        except TypeError as e:
            return self._failed(line, e, "type")
        except EvaluationError as e:
            return self._failed(line, e, "eval")

    def run(self, lines: Iterable[str]) -> Iterator[LineResult]:
        """Process every line, skipping those without an expression."""
        for line_no, line in enumerate(lines, start=1):
            result = self.process(line.rstrip("\r\n"), line_no)
            if not result.empty:
                yield result

    def _failed(self, line: str, error: Exception, kind: ErrorKind) -> LineResult:
        self.log.info("driver.error kind={} error={}", kind, error)
        return LineResult(source=line, error=error, kind=kind)
