"""Console rendering for the CLI and REPL."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from exprlang.cli.driver import LineResult
from exprlang.eval.format import OutputFormat, format_value
from exprlang.surface.types import NumberToken, Token


class CliRenderer:
    """Prints results, errors and token dumps through a rich console."""

    def __init__(self, console: Console, error_console: Console | None = None) -> None:
        self.console = console
        self.error_console = error_console or console

    def welcome(self, fmt: OutputFormat) -> None:
        self.console.print(f"[bold]exprlang[/bold] (output: {fmt.value})")
        self.console.print("[dim]Type :help for commands, :quit or Ctrl-D to exit[/dim]")

    def info(self, message: str) -> None:
        self.console.print(f"[dim]{escape(message)}[/dim]")

    def result(self, result: LineResult, fmt: OutputFormat, show_type: bool = False) -> None:
        if result.ok:
            self.console.print(escape(result.render(fmt, show_type)), highlight=False, soft_wrap=True)
        else:
            self.error(f"{result.kind} error: {result.error}")

    def error(self, message: str) -> None:
        self.error_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)

    def tokens(self, tokens: list[Token], fmt: OutputFormat) -> None:
        for token in tokens:
            self.console.print(escape(describe_token(token, fmt)), highlight=False, soft_wrap=True)


def describe_token(token: Token, fmt: OutputFormat = OutputFormat.DECIMAL) -> str:
    """One-line token description, numeric literals shown in ``fmt``."""
    if isinstance(token, NumberToken):
        return f"{token.type} : {format_value(token.number, fmt)}"
    return str(token)
