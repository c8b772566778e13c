"""
reckon arithmetic pipeline.

Tokenizer, parser, and evaluator for single-line integer/decimal
arithmetic with + - * / and standard precedence.

Usage:
    from reckon.core.arithmetic import parse_and_evaluate

    result = parse_and_evaluate("2 + 3 * 4")
    # result.value == Integer(value=14)
"""

from reckon.core.arithmetic.evaluator import evaluate
from reckon.core.arithmetic.parser import ParseResult, Parser, parse, parse_expr, parse_expr_strict
from reckon.core.arithmetic.pipeline import Evaluation, parse_and_evaluate
from reckon.core.arithmetic.tokenizer import Token, Tokenizer, TokenKind, tokenize

__all__ = [
    "Evaluation",
    "ParseResult",
    "Parser",
    "Token",
    "TokenKind",
    "Tokenizer",
    "evaluate",
    "parse",
    "parse_and_evaluate",
    "parse_expr",
    "parse_expr_strict",
    "tokenize",
]
