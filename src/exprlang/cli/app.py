"""Typer CLI entrypoints."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from exprlang.cli.driver import Driver
from exprlang.cli.interactive import InteractiveCli
from exprlang.cli.render import CliRenderer
from exprlang.config.settings import load_settings
from exprlang.eval.format import OutputFormat
from exprlang.logging_utils import configure_logging
from exprlang.surface.lexer import Lexer
from exprlang.surface.types import LexerError

app = typer.Typer(name="exprlang", help="Typed Bool/Int expression evaluator", add_completion=False)

FormatOption = Annotated[
    OutputFormat | None,
    typer.Option("--format", "-f", help="Print integers in decimal, binary or hex."),
]
ShowTypeOption = Annotated[
    bool | None,
    typer.Option("--show-type/--no-show-type", help="Print the type next to each result."),
]


def _renderer() -> CliRenderer:
    return CliRenderer(Console(), Console(stderr=True))


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        repl()


@app.command()
def repl(
    output_format: FormatOption = None,
    show_type: ShowTypeOption = None,
) -> None:
    """Run the interactive REPL."""

    configure_logging(profile="repl")
    settings = load_settings(output_format=output_format, show_type=show_type)
    logger.info("repl.start format={} history={}", settings.output_format.value, str(settings.history_file()))
    InteractiveCli(settings).run()


# Expressions such as "-5 + 1" look like options to click; pass them through
_EXPRESSION_ARGS = {"ignore_unknown_options": True}


@app.command("eval", context_settings=_EXPRESSION_ARGS)
def eval_command(
    expression: Annotated[str, typer.Argument(help="Expression to evaluate.")],
    output_format: FormatOption = None,
    show_type: ShowTypeOption = None,
) -> None:
    """Evaluate a single expression and print the result.

    An expression starting with "-" can also follow "--" so no part of it is
    read as an option: `exprlang eval -- "-(false ? 1 : 2)"`.
    """

    configure_logging()
    settings = load_settings(output_format=output_format, show_type=show_type)
    renderer = _renderer()
    result = Driver(filename="<arg>").process(expression)
    if not result.empty:
        renderer.result(result, settings.output_format, settings.show_type)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def run(
    path: Annotated[Path | None, typer.Argument(help="File with one expression per line; stdin if omitted.")] = None,
    output_format: FormatOption = None,
    show_type: ShowTypeOption = None,
) -> None:
    """Evaluate every line of a file, continuing past bad lines."""

    configure_logging()
    settings = load_settings(output_format=output_format, show_type=show_type)
    renderer = _renderer()

    if path is None:
        driver = Driver(filename="<stdin>")
        lines = sys.stdin.read().splitlines()
    else:
        driver = Driver(filename=str(path))
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.error("run.read_failed path={} error={}", str(path), e)
            raise typer.BadParameter(f"cannot read {path}: {e}") from e

    failures = 0
    for result in driver.run(lines):
        renderer.result(result, settings.output_format, settings.show_type)
        if not result.ok:
            failures += 1

    logger.info("run.done lines={} failures={}", len(lines), failures)
    if failures:
        raise typer.Exit(code=1)


@app.command(context_settings=_EXPRESSION_ARGS)
def tokens(
    expression: Annotated[str, typer.Argument(help="Text to tokenize.")],
    output_format: FormatOption = None,
) -> None:
    """Print the token stream of an expression."""

    configure_logging()
    settings = load_settings(output_format=output_format)
    renderer = _renderer()
    try:
        stream = Lexer(expression, filename="<arg>").tokenize()
    except LexerError as e:
        renderer.error(f"lex error: {e}")
        raise typer.Exit(code=1) from e
    renderer.tokens(stream, settings.output_format)


def main() -> None:
    app()
