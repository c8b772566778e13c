"""
Recursive descent parser for reckon arithmetic lines.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → factor (("*" | "/") factor)*
    factor      → INTEGER | DECIMAL

Both levels are left-associative. The parser never raises on malformed
input: problems are collected as diagnostics, and a non-empty diagnostics
list means the returned tree must not be evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from reckon.core.arithmetic.tokenizer import Token, TokenKind, tokenize
from reckon.core.errors import ParseError, make_context
from reckon.core.ir import BinaryExpr, Decimal, Expr, Integer, Literal, Operator

logger = logging.getLogger(__name__)


class ParseResult(NamedTuple):
    """Expression tree (or None) plus the diagnostics collected while parsing."""

    expression: Expr | None
    diagnostics: list[str]

    @property
    def ok(self) -> bool:
        return self.expression is not None and not self.diagnostics


_ADDITIVE: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUBTRACT,
}

_MULTIPLICATIVE: dict[TokenKind, Operator] = {
    TokenKind.ASTERISK: Operator.MULTIPLY,
    TokenKind.SLASH: Operator.DIVIDE,
}


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return f"{tok.kind} ({tok.text!r})"


class Parser:
    """Recursive descent parser over a materialised token list.

    BAD_TOKEN entries are dropped up front and everything after the first
    EOF is ignored. Malformed numerals among the dropped tokens are
    reported as diagnostics; stray characters are dropped silently.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.diagnostics: list[str] = []
        self.error_pos: int | None = None
        self.tokens: list[Token] = []

        for tok in tokens:
            if tok.kind == TokenKind.EOF:
                self.tokens.append(tok)
                break
            if tok.kind == TokenKind.BAD_TOKEN:
                if tok.error is not None:
                    self._report(f"Malformed numeral {tok.text!r}: {tok.error}", tok)
                continue
            self.tokens.append(tok)
        else:
            end = tokens[-1].pos + len(tokens[-1].text) if tokens else 0
            self.tokens.append(Token(TokenKind.EOF, "", end))

        self.pos = 0
        self._aborted = False

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def _report(self, message: str, tok: Token) -> None:
        if self.error_pos is None:
            self.error_pos = tok.pos
        self.diagnostics.append(message)

    # -- Grammar rules --

    def parse(self) -> ParseResult:
        """Parse the whole line and check that nothing follows the expression."""
        expr = self.parse_expression()

        if expr is not None and not self._aborted and self.current.kind != TokenKind.EOF:
            self._report(
                f"Unexpected token after expression: {_describe(self.current)}",
                self.current,
            )

        if self.diagnostics:
            logger.debug("Parse produced %d diagnostic(s)", len(self.diagnostics))
        return ParseResult(expr, list(self.diagnostics))

    def parse_expression(self) -> Expr | None:
        """term (('+' | '-') term)*"""
        return self._parse_level(self.parse_term, _ADDITIVE)

    def parse_term(self) -> Expr | None:
        """factor (('*' | '/') factor)*"""
        return self._parse_level(self.parse_factor, _MULTIPLICATIVE)

    def _parse_level(
        self, operand: Callable[[], Expr | None], operators: dict[TokenKind, Operator]
    ) -> Expr | None:
        left = operand()
        if left is None:
            return None

        while not self._aborted and self.current.kind in operators:
            op = operators[self.advance().kind]
            right = operand()
            if right is None:
                break
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Expr | None:
        """INTEGER | DECIMAL"""
        tok = self.current

        if tok.kind == TokenKind.INTEGER:
            self.advance()
            return Literal(number=Integer(value=tok.value))
        if tok.kind == TokenKind.DECIMAL:
            self.advance()
            return Literal(number=Decimal(value=tok.value))

        self._report(f"Expected an integer or decimal, but got a {_describe(tok)}", tok)
        self._aborted = True
        return None


def parse(tokens: list[Token]) -> ParseResult:
    """Parse a token list into an expression tree plus diagnostics.

    Args:
        tokens: Output of :func:`tokenize`.

    Returns:
        ParseResult; evaluate ``expression`` only when ``diagnostics`` is empty.
    """
    return Parser(tokens).parse()


def parse_expr(source: str) -> ParseResult:
    """Tokenize and parse a single line."""
    return parse(tokenize(source))


def parse_expr_strict(source: str) -> Expr:
    """Parse a line, raising instead of returning diagnostics.

    Raises:
        ParseError: If the line produced any diagnostics.
    """
    parser = Parser(tokenize(source))
    expr, diagnostics = parser.parse()
    if diagnostics or expr is None:
        context = make_context(source, parser.error_pos) if parser.error_pos is not None else None
        raise ParseError(diagnostics, context)
    return expr
