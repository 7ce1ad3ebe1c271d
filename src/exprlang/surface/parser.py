"""Recursive descent parser for the expression language.

Builds the tree through the AST constructors, so every node is type-checked
the moment the parser reduces it. A construction ``TypeError`` propagates to
the caller with the location of the offending operator attached.
"""

from __future__ import annotations

from typing import Callable

from exprlang.core.ast import (
    Add,
    And,
    AndThen,
    BinaryExpr,
    BoolLit,
    Cond,
    Div,
    Equal,
    Expr,
    GreaterThan,
    GreaterThanEq,
    IntLit,
    LessThan,
    LessThanEq,
    Mul,
    Neg,
    Not,
    NotEqual,
    Or,
    OrElse,
    Rem,
    Sub,
    UnaryExpr,
    Xor,
)
from exprlang.core.errors import TypeError
from exprlang.surface.lexer import Lexer
from exprlang.surface.types import Token, TokenType
from exprlang.utils.location import Location


class ParseError(Exception):
    """Error during parsing."""

    def __init__(self, message: str, location: Location):
        super().__init__(f"{location}: {message}")
        self.message = message
        self.location = location


# Binary operators per precedence level, loosest first
BINARY_LEVELS: list[dict[str, type[BinaryExpr]]] = [
    {TokenType.BAR: Or, TokenType.BARBAR: OrElse, TokenType.CARET: Xor},
    {TokenType.AMP: And, TokenType.AMPAMP: AndThen},
    {TokenType.EQ: Equal, TokenType.NE: NotEqual},
    {TokenType.LT: LessThan, TokenType.LE: LessThanEq, TokenType.GT: GreaterThan, TokenType.GE: GreaterThanEq},
    {TokenType.PLUS: Add, TokenType.MINUS: Sub},
    {TokenType.STAR: Mul, TokenType.SLASH: Div, TokenType.PERCENT: Rem},
]

UNARY_OPERATORS: dict[str, type[UnaryExpr]] = {
    TokenType.MINUS: Neg,
    TokenType.BANG: Not,
    TokenType.TILDE: Not,
}


class Parser:
    """Recursive descent parser for expressions.

    Grammar:
        expression     ::= conditional
        conditional    ::= logical_or ("?" expression ":" conditional)?
        logical_or     ::= logical_and (("|" | "||" | "^") logical_and)*
        logical_and    ::= equality (("&" | "&&") equality)*
        equality       ::= relational (("==" | "!=") relational)*
        relational     ::= additive (("<" | "<=" | ">" | ">=") additive)*
        additive       ::= multiplicative (("+" | "-") multiplicative)*
        multiplicative ::= unary (("*" | "/" | "%") unary)*
        unary          ::= ("-" | "!" | "~") unary | primary
        primary        ::= BOOL | NUMBER | BINARY | HEX | "(" expression ")"
    """

    def __init__(self, tokens: list[Token]):
        """Initialize parser with a token stream; comments are dropped."""
        self.tokens = [t for t in tokens if t.type not in TokenType.SKIPPABLE]
        self.pos = 0

    def _current(self) -> Token:
        """Get current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # EOF token

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def _expect(self, token_type: str) -> Token:
        """Expect current token to be of specific type."""
        token = self._current()
        if token.type != token_type:
            raise ParseError(f"Expected {token_type}, got {_describe(token)}", token.location)
        return self._advance()

    def _match(self, *token_types: str) -> bool:
        """Check if current token matches any of the types."""
        return self._current().type in token_types

    def at_end(self) -> bool:
        """Check if all tokens are consumed."""
        return self._match(TokenType.EOF)

    # =====================================================================
    # Entry points
    # =====================================================================

    def parse(self) -> Expr | None:
        """Parse the whole token stream as one expression.

        Returns:
            The root expression, or None if the input holds no tokens
            besides comments

        Raises:
            ParseError: On a grammar violation or leftover tokens
            TypeError: If a node fails its typing rule
        """
        if self.at_end():
            return None
        try:
            expr = self.parse_expression()
        except RecursionError:
            raise ParseError("Expression nested too deeply", self._current().location) from None
        if not self.at_end():
            token = self._current()
            raise ParseError(f"Unexpected {_describe(token)} after expression", token.location)
        return expr

    def parse_expression(self) -> Expr:
        """Parse an expression."""
        return self.parse_conditional()

    # =====================================================================
    # Precedence levels
    # =====================================================================

    def parse_conditional(self) -> Expr:
        """Parse ``c ? a : b`` (right-associative)."""
        cond = self.parse_binary(0)
        if not self._match(TokenType.QUESTION):
            return cond

        loc = self._advance().location
        then = self.parse_expression()
        self._expect(TokenType.COLON)
        else_ = self.parse_conditional()
        return _build(loc, Cond, cond, then, else_)

    def parse_binary(self, level: int) -> Expr:
        """Parse one left-associative binary precedence level."""
        if level == len(BINARY_LEVELS):
            return self.parse_unary()

        operators = BINARY_LEVELS[level]
        left = self.parse_binary(level + 1)
        while self._current().type in operators:
            token = self._advance()
            right = self.parse_binary(level + 1)
            left = _build(token.location, operators[token.type], left, right)
        return left

    def parse_unary(self) -> Expr:
        """Parse prefix operators."""
        token = self._current()
        if token.type in UNARY_OPERATORS:
            self._advance()
            operand = self.parse_unary()
            return _build(token.location, UNARY_OPERATORS[token.type], operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """Parse literals and parenthesized expressions."""
        token = self._current()

        match token.type:
            case TokenType.BOOL:
                self._advance()
                return BoolLit(token.flag)  # type: ignore[attr-defined]
            case TokenType.NUMBER | TokenType.BINARY | TokenType.HEX:
                self._advance()
                return IntLit(token.number)  # type: ignore[attr-defined]
            case TokenType.LPAREN:
                self._advance()
                expr = self.parse_expression()
                self._expect(TokenType.RPAREN)
                return expr
            case TokenType.IDENT:
                raise ParseError(f"Unknown identifier: {token.value}", token.location)
            case _:
                raise ParseError(f"Expected an expression, got {_describe(token)}", token.location)


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    return f"{token.value!r}"


def _build(location: Location, node: Callable[..., Expr], *operands: Expr) -> Expr:
    """Construct a node, tagging a typing failure with the operator's location."""
    try:
        return node(*operands)
    except TypeError as e:
        if e.location is None:
            e.location = location
        raise


# =============================================================================
# Convenience Functions
# =============================================================================


def parse_expression(source: str, filename: str = "<stdin>", line: int = 1) -> Expr | None:
    """Lex and parse a single expression.

    Returns None for input that holds only whitespace and comments.

    Example:
        >>> str(parse_expression("1 + 2 * 3"))
        '(1 + (2 * 3))'
    """
    tokens = Lexer(source, filename, line).tokenize()
    return Parser(tokens).parse()
