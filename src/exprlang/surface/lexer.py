"""Lexer for the expression language.

Table-driven tokenizer: one named regex per token kind, tried in order at
the current position. Comments are kept in the token stream; whitespace is
dropped.
"""

from __future__ import annotations

import re

from exprlang.surface.types import (
    BoolToken,
    CommentToken,
    EOFToken,
    IdentifierToken,
    LexerError,
    NumberToken,
    OperatorToken,
    Token,
    TokenType,
)
from exprlang.utils.location import Location

KEYWORDS = {"true": True, "false": False}

# Characters that may not directly follow a numeric literal
_END_OF_NUMBER = r"(?![0-9A-Za-z_])"


class Lexer:
    """Tokenizer for expression source text."""

    # Token specifications as regex patterns; order matters for prefixes
    TOKEN_PATTERNS = [
        ("NEWLINE", r"\r\n|\r|\n"),
        ("WHITESPACE", r"[ \t\f\v]+"),
        ("COMMENT", r"#[^\r\n]*"),
        # Numbers
        ("BINARY", r"0b[01]+" + _END_OF_NUMBER),
        ("HEX", r"0[xh][0-9A-Fa-f]+" + _END_OF_NUMBER),
        ("NUMBER", r"[0-9]+" + _END_OF_NUMBER),
        ("BAD_NUMBER", r"[0-9][0-9A-Za-z_]*"),
        # Names (true/false are keywords)
        ("IDENT", r"[A-Za-z_][A-Za-z0-9_]*"),
        # Two-character operators (must come before their prefixes)
        ("AMPAMP", r"&&"),
        ("BARBAR", r"\|\|"),
        ("EQ", r"=="),
        ("NE", r"!="),
        ("LE", r"<="),
        ("GE", r">="),
        # Single-character operators
        ("AMP", r"&"),
        ("BAR", r"\|"),
        ("CARET", r"\^"),
        ("BANG", r"!"),
        ("TILDE", r"~"),
        ("LT", r"<"),
        ("GT", r">"),
        ("PLUS", r"\+"),
        ("MINUS", r"-"),
        ("STAR", r"\*"),
        ("SLASH", r"/"),
        ("PERCENT", r"%"),
        ("QUESTION", r"\?"),
        ("COLON", r":"),
        ("LPAREN", r"\("),
        ("RPAREN", r"\)"),
        # A lone '=' is always a mistake for '=='
        ("EQUALS", r"="),
    ]

    _pattern = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in TOKEN_PATTERNS))

    def __init__(self, source: str, filename: str = "<stdin>", line: int = 1):
        """Initialize lexer with source text.

        Args:
            source: The text to tokenize
            filename: Name of the input (for error messages)
            line: Line number of the first line of ``source``
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = line
        self.column = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Convert source text to a token stream ending with EOF.

        Raises:
            LexerError: On an unexpected character or malformed literal
        """
        self.tokens = []

        while self.pos < len(self.source):
            match = self._pattern.match(self.source, self.pos)
            loc = self._location()

            if not match or match.lastgroup is None:
                raise LexerError(f"Unexpected character: {self.source[self.pos]!r}", loc)

            token_type = match.lastgroup
            value = match.group()
            self._advance(value)

            match token_type:
                case "NEWLINE":
                    self.line += 1
                    self.column = 1
                case "WHITESPACE":
                    pass
                case "BAD_NUMBER":
                    raise LexerError(f"Malformed number literal: {value!r}", loc)
                case "EQUALS":
                    raise LexerError("Invalid token '=' (expected '==')", loc)
                case _:
                    self.tokens.append(self._create_typed_token(token_type, value, loc))

        self.tokens.append(EOFToken(location=self._location()))
        return self.tokens

    def _location(self) -> Location:
        return Location(self.line, self.column, self.filename)

    def _advance(self, text: str) -> None:
        self.pos += len(text)
        self.column += len(text)

    def _create_typed_token(self, token_type: str, value: str, location: Location) -> Token:
        """Create a typed token from a matched pattern name."""
        match token_type:
            case TokenType.NUMBER:
                try:
                    number = int(value)
                except ValueError:
                    raise LexerError("Integer literal too large", location) from None
                return NumberToken(text=value, number=number, radix=10, location=location)
            case TokenType.BINARY:
                return NumberToken(text=value, number=int(value[2:], 2), radix=2, location=location)
            case TokenType.HEX:
                return NumberToken(text=value, number=int(value[2:], 16), radix=16, location=location)
            case TokenType.IDENT if value in KEYWORDS:
                return BoolToken(flag=KEYWORDS[value], location=location)
            case TokenType.IDENT:
                return IdentifierToken(name=value, location=location)
            case TokenType.COMMENT:
                return CommentToken(text=value[1:].strip(), location=location)
            case _ if token_type in TokenType.OPERATORS:
                return OperatorToken(operator=value, location=location, op_type=token_type)
            case _:
                raise LexerError(f"Unknown token type: {token_type}", location)


# =============================================================================
# Convenience Functions
# =============================================================================


def lex(source: str, filename: str = "<stdin>") -> list[Token]:
    """Tokenize source text.

    Example:
        >>> [t.type for t in lex("1 + 0x1F")]
        ['NUMBER', 'PLUS', 'HEX', 'EOF']
    """
    return Lexer(source, filename).tokenize()
