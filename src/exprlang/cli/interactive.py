"""Interactive REPL."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from rich import get_console

from exprlang.cli.driver import Driver
from exprlang.cli.render import CliRenderer
from exprlang.config.settings import Settings
from exprlang.eval.format import OutputFormat
from exprlang.surface.lexer import Lexer
from exprlang.surface.types import LexerError

COMMANDS = [":help", ":quit", ":q", ":format", ":type", ":tokens"]

HELP_TEXT = """Commands:
  :help, :h              Show this help
  :quit, :q              Exit
  :format <fmt>          Output in decimal, binary or hex
  :type <expr>           Show the type of an expression
  :tokens <expr>         Show the tokens of an expression

Expressions:
  1 + 2 * 3              arithmetic: + - * / %, unary -
  2 < 3 && true          comparisons: < <= > >= == !=
  true ^ false | !true   logic: & | ^ ! ~, short-circuit && ||
  1 < 2 ? 0x10 : 0b11    conditional, hex and binary literals
  # comment              comments run to end of line"""


class InteractiveCli:
    """Read-eval-print loop over the line driver."""

    def __init__(self, settings: Settings, *, renderer: CliRenderer | None = None) -> None:
        self.settings = settings
        self.driver = Driver()
        self.renderer = renderer or CliRenderer(get_console())
        self.output_format = settings.output_format
        self._line_no = 0

    def run(self) -> None:
        session = self._build_prompt()
        self.renderer.welcome(self.output_format)
        while True:
            try:
                raw = session.prompt("> ")
            except KeyboardInterrupt:
                self.renderer.info("Interrupted. Use :quit to exit.")
                continue
            except EOFError:
                break

            if not self.handle(raw):
                break
        self.renderer.info("Bye.")

    def handle(self, raw: str) -> bool:
        """Handle one line of input. Returns False when the user asked to quit."""
        line = raw.strip()
        if not line:
            return True
        if line.startswith(":"):
            return self._handle_command(line)

        self._line_no += 1
        result = self.driver.process(line, self._line_no)
        if not result.empty:
            self.renderer.result(result, self.output_format, self.settings.show_type)
        return True

    def _handle_command(self, line: str) -> bool:
        cmd, _, arg = line.partition(" ")
        arg = arg.strip()

        match cmd:
            case ":quit" | ":q":
                return False
            case ":help" | ":h":
                self.renderer.console.print(HELP_TEXT, markup=False, highlight=False, soft_wrap=True)
            case ":format":
                self._set_format(arg)
            case ":type":
                result = self.driver.process(arg, evaluate=False)
                if not result.ok:
                    self.renderer.error(f"{result.kind} error: {result.error}")
                elif result.type is not None:
                    self.renderer.console.print(str(result.type), highlight=False, soft_wrap=True)
            case ":tokens":
                try:
                    tokens = Lexer(arg).tokenize()
                except LexerError as e:
                    self.renderer.error(f"lex error: {e}")
                else:
                    self.renderer.tokens(tokens, self.output_format)
            case _:
                self.renderer.error(f"Unknown command: {cmd}")
        return True

    def _set_format(self, name: str) -> None:
        try:
            self.output_format = OutputFormat(name)
        except ValueError:
            choices = ", ".join(f.value for f in OutputFormat)
            self.renderer.error(f"Unknown format {name!r}; choose one of {choices}")
            return
        self.renderer.info(f"Output format: {self.output_format.value}")

    def _build_prompt(self) -> PromptSession[str]:
        history_file = self.settings.history_file()
        history_file.parent.mkdir(parents=True, exist_ok=True)
        return PromptSession(
            completer=WordCompleter(COMMANDS, sentence=True),
            history=FileHistory(str(history_file)),
        )
