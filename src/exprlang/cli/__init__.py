"""Command-line driver, REPL and entrypoints."""

from exprlang.cli.driver import Driver, LineResult

__all__ = [
    "Driver",
    "LineResult",
]
