"""
Tokenizer for reckon arithmetic lines.

Converts a single input line into a sequence of typed tokens. Tokenizing
never fails: unrecognised characters and malformed numerals become
BAD_TOKEN tokens, and the sequence always ends with exactly one EOF.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum, auto

from reckon.core.errors import MalformedNumeralError
from reckon.core.ir import fits_int64

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic lines."""

    # Literals
    INTEGER = auto()
    DECIMAL = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()

    # Unrecognised character or malformed numeral
    BAD_TOKEN = auto()

    # End of input
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the tokenizer."""

    kind: TokenKind
    text: str
    pos: int
    value: int | float | None = None
    error: str | None = None

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.kind}, {self.text!r}, pos={self.pos}, value={self.value!r})"
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"


_WHITESPACE = frozenset(" \t\r\n\f")
_DIGITS = frozenset("0123456789")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
}


class Tokenizer:
    """Pull-based tokenizer over one input line.

    ``next_token`` returns successive tokens; once the end of the line is
    reached it keeps returning EOF without advancing.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx < len(self.source):
            return self.source[idx]
        return ""

    def _skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self.pos += 1

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        c = self._peek()
        start = self.pos

        if not c:
            return Token(TokenKind.EOF, "", start)

        if c in _SINGLE_CHAR:
            self.pos += 1
            return Token(_SINGLE_CHAR[c], c, start)

        # A minus sign glued to a digit starts a signed literal
        if c == "-":
            if self._peek(1) in _DIGITS:
                return self._read_number()
            self.pos += 1
            return Token(TokenKind.MINUS, c, start)

        if c in _DIGITS:
            return self._read_number()

        self.pos += 1
        return Token(TokenKind.BAD_TOKEN, c, start)

    def _read_number(self) -> Token:
        """Read an integer or decimal literal, optionally with a leading '-'."""
        start = self.pos
        seen_dot = False

        if self._peek() == "-":
            self.pos += 1

        while True:
            c = self._peek()
            if c in _DIGITS:
                self.pos += 1
            elif c == "." and not seen_dot:
                seen_dot = True
                self.pos += 1
            else:
                break

        text = self.source[start : self.pos]
        try:
            if seen_dot:
                return Token(TokenKind.DECIMAL, text, start, value=_to_decimal(text))
            return Token(TokenKind.INTEGER, text, start, value=_to_integer(text))
        except MalformedNumeralError as e:
            logger.debug("Malformed numeral %r at %d: %s", text, start, e.message)
            return Token(TokenKind.BAD_TOKEN, text, start, error=e.message)


def _to_integer(text: str) -> int:
    """Convert an integer literal, enforcing the signed 64-bit range."""
    value = int(text)
    if not fits_int64(value):
        raise MalformedNumeralError("integer literal out of 64-bit range", text)
    return value


def _to_decimal(text: str) -> float:
    """Convert a decimal literal, rejecting values that overflow to infinity."""
    try:
        value = float(text)
    except ValueError as e:
        raise MalformedNumeralError(f"invalid decimal literal ({e})", text) from e
    if not math.isfinite(value):
        raise MalformedNumeralError("decimal literal out of range", text)
    return value


def tokenize(source: str) -> list[Token]:
    """Tokenize a line into a list of tokens terminated by a single EOF."""
    tokenizer = Tokenizer(source)
    tokens: list[Token] = []

    while True:
        tok = tokenizer.next_token()
        tokens.append(tok)
        if tok.kind == TokenKind.EOF:
            break

    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return tokens
