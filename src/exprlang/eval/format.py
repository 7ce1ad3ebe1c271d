"""Rendering of evaluation results."""

from enum import Enum

from exprlang.utils.numbers import int_text


class OutputFormat(str, Enum):
    """Number base used when printing integers."""

    DECIMAL = "decimal"
    BINARY = "binary"
    HEX = "hex"

    @property
    def base(self) -> int:
        match self:
            case OutputFormat.BINARY:
                return 2
            case OutputFormat.HEX:
                return 16
            case _:
                return 10


def format_value(value: int, fmt: OutputFormat = OutputFormat.DECIMAL) -> str:
    """Format an integer so the lexer reads it back as the same literal.

    Negative results keep a leading minus: -5 in hex is ``-0x5``. Decimal
    output of an integer too large for decimal conversion falls back to hex.
    """
    match fmt:
        case OutputFormat.BINARY:
            return format(value, "#b")
        case OutputFormat.HEX:
            return format(value, "#x")
        case _:
            return int_text(value)
