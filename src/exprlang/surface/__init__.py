"""Surface syntax: lexer and parser feeding the core AST."""

from exprlang.surface.lexer import Lexer, lex
from exprlang.surface.parser import ParseError, Parser, parse_expression
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

__all__ = [
    # Lexer
    "Lexer",
    "lex",
    "LexerError",
    # Tokens
    "Token",
    "TokenType",
    "OperatorToken",
    "BoolToken",
    "NumberToken",
    "IdentifierToken",
    "CommentToken",
    "EOFToken",
    # Parser
    "Parser",
    "ParseError",
    "parse_expression",
]
