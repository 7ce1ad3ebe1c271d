"""Token definitions for the expression lexer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from exprlang.utils.location import Location
from exprlang.utils.numbers import int_text


class Token(Protocol):
    """Protocol for all tokens.

    All token types expose ``type`` and ``value`` so the parser can match on
    the type string alone.
    """

    @property
    def type(self) -> str:
        """Get the token type identifier."""
        ...

    @property
    def value(self) -> str:
        """Get the token text."""
        ...

    @property
    def location(self) -> Location:
        """Get the source location of this token."""
        ...


@dataclass(frozen=True)
class OperatorToken:
    """Operator or punctuator: + && ( ? ..."""

    operator: str
    location: Location
    op_type: str  # The token type name (PLUS, AMPAMP, etc.)

    @property
    def value(self) -> str:
        return self.operator

    @property
    def type(self) -> str:
        return self.op_type

    def __str__(self) -> str:
        return self.type


@dataclass(frozen=True)
class BoolToken:
    """Boolean literal: true, false."""

    flag: bool
    location: Location

    @property
    def value(self) -> str:
        return "true" if self.flag else "false"

    @property
    def type(self) -> str:
        return TokenType.BOOL

    def __str__(self) -> str:
        return f"{self.type} : {self.value.upper()}"


@dataclass(frozen=True)
class NumberToken:
    """Integer literal in base 10, 2 (0b101) or 16 (0x1F, 0h1F)."""

    text: str
    number: int
    radix: int
    location: Location

    @property
    def value(self) -> str:
        return self.text

    @property
    def type(self) -> str:
        match self.radix:
            case 2:
                return TokenType.BINARY
            case 16:
                return TokenType.HEX
            case _:
                return TokenType.NUMBER

    def __str__(self) -> str:
        return f"{self.type} : {int_text(self.number)}"


@dataclass(frozen=True)
class IdentifierToken:
    """Identifier. Lexed but not bound to anything by the parser."""

    name: str
    location: Location

    @property
    def value(self) -> str:
        return self.name

    @property
    def type(self) -> str:
        return TokenType.IDENT

    def __str__(self) -> str:
        return f"{self.type} : {self.name}"


@dataclass(frozen=True)
class CommentToken:
    """Comment from ``#`` to end of line; text excludes the marker."""

    text: str
    location: Location

    @property
    def value(self) -> str:
        return self.text

    @property
    def type(self) -> str:
        return TokenType.COMMENT

    def __str__(self) -> str:
        return f"{self.type} : {self.text}"


@dataclass(frozen=True)
class EOFToken:
    """End of input token."""

    location: Location

    @property
    def value(self) -> str:
        return ""

    @property
    def type(self) -> str:
        return TokenType.EOF

    def __str__(self) -> str:
        return self.type


class LexerError(Exception):
    """Error during lexical analysis."""

    def __init__(self, message: str, location: Location):
        super().__init__(f"{location}: {message}")
        self.message = message
        self.location = location


class TokenType:
    """Token type names.

    Plain string constants rather than an Enum so tokens compare against
    literals directly in the parser.
    """

    # Arithmetic
    PLUS = "PLUS"  # +
    MINUS = "MINUS"  # -
    STAR = "STAR"  # *
    SLASH = "SLASH"  # /
    PERCENT = "PERCENT"  # %

    # Logical
    AMP = "AMP"  # &
    AMPAMP = "AMPAMP"  # &&
    BAR = "BAR"  # |
    BARBAR = "BARBAR"  # ||
    CARET = "CARET"  # ^
    BANG = "BANG"  # !
    TILDE = "TILDE"  # ~

    # Comparison
    EQ = "EQ"  # ==
    NE = "NE"  # !=
    LT = "LT"  # <
    GT = "GT"  # >
    LE = "LE"  # <=
    GE = "GE"  # >=

    # Punctuators
    QUESTION = "QUESTION"  # ?
    COLON = "COLON"  # :
    LPAREN = "LPAREN"  # (
    RPAREN = "RPAREN"  # )

    # Literals and names
    BOOL = "BOOL"
    NUMBER = "NUMBER"
    BINARY = "BINARY"
    HEX = "HEX"
    IDENT = "IDENT"

    COMMENT = "COMMENT"
    WHITESPACE = "WHITESPACE"
    EOF = "EOF"

    OPERATORS = frozenset(
        [
            PLUS,
            MINUS,
            STAR,
            SLASH,
            PERCENT,
            AMP,
            AMPAMP,
            BAR,
            BARBAR,
            CARET,
            BANG,
            TILDE,
            EQ,
            NE,
            LT,
            GT,
            LE,
            GE,
            QUESTION,
            COLON,
            LPAREN,
            RPAREN,
        ]
    )

    LITERALS = frozenset([BOOL, NUMBER, BINARY, HEX])

    # Tokens the parser never sees
    SKIPPABLE = frozenset([WHITESPACE, COMMENT])
