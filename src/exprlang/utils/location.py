"""Source locations for error reporting."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Position of a token in an input line (1-based)."""

    line: int
    column: int
    source: str = "<stdin>"

    def __str__(self) -> str:
        return f"{self.source}:{self.line}:{self.column}"
