"""Tests for the reckon recursive descent parser.

Covers:
- Literal and binary trees
- Precedence and left associativity
- Diagnostics for unexpected, trailing, and malformed tokens
"""

from __future__ import annotations

import pydantic
import pytest

from reckon.core.arithmetic.parser import ParseResult, parse, parse_expr, parse_expr_strict
from reckon.core.arithmetic.tokenizer import Token, TokenKind, tokenize
from reckon.core.errors import ParseError
from reckon.core.ir import BinaryExpr, Decimal, Integer, Literal, Operator


def lit(value: int | float) -> Literal:
    if isinstance(value, int):
        return Literal(number=Integer(value=value))
    return Literal(number=Decimal(value=value))


# ============================================================================
# Trees
# ============================================================================


class TestParserLiterals:
    """Parser handles single literals."""

    def test_integer(self) -> None:
        expr, diagnostics = parse_expr("42")
        assert expr == lit(42)
        assert diagnostics == []

    def test_decimal(self) -> None:
        expr, diagnostics = parse_expr("2.5")
        assert expr == lit(2.5)
        assert diagnostics == []

    def test_negative_literal(self) -> None:
        expr, _ = parse_expr("-7")
        assert expr == lit(-7)

    def test_result_is_named_tuple(self) -> None:
        result = parse_expr("1")
        assert isinstance(result, ParseResult)
        assert result.ok
        assert result.expression == lit(1)


class TestParserArithmetic:
    """Parser handles arithmetic with correct precedence."""

    def test_addition(self) -> None:
        expr, diagnostics = parse_expr("3+4")
        assert expr == BinaryExpr(op=Operator.ADD, left=lit(3), right=lit(4))
        assert diagnostics == []

    def test_subtraction(self) -> None:
        expr, _ = parse_expr("3 - 4")
        assert expr == BinaryExpr(op=Operator.SUBTRACT, left=lit(3), right=lit(4))

    def test_multiplication(self) -> None:
        expr, _ = parse_expr("3 * 4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == Operator.MULTIPLY

    def test_division(self) -> None:
        expr, _ = parse_expr("3 / 4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == Operator.DIVIDE

    def test_mul_before_add(self) -> None:
        # 2 + 3 * 4 should be 2 + (3 * 4)
        expr, _ = parse_expr("2+3*4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == Operator.ADD
        assert expr.left == lit(2)
        assert isinstance(expr.right, BinaryExpr)
        assert expr.right.op == Operator.MULTIPLY

    def test_mul_before_add_on_the_left(self) -> None:
        expr, _ = parse_expr("2*3+4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == Operator.ADD
        assert isinstance(expr.left, BinaryExpr)
        assert expr.left.op == Operator.MULTIPLY

    def test_chained_subtraction_is_left_associative(self) -> None:
        # 10 - 3 - 2 is (10 - 3) - 2
        expr, _ = parse_expr("10 - 3 - 2")
        assert expr == BinaryExpr(
            op=Operator.SUBTRACT,
            left=BinaryExpr(op=Operator.SUBTRACT, left=lit(10), right=lit(3)),
            right=lit(2),
        )

    def test_chained_division_is_left_associative(self) -> None:
        expr, _ = parse_expr("8 / 4 / 2")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == Operator.DIVIDE
        assert isinstance(expr.left, BinaryExpr)
        assert expr.right == lit(2)

    def test_str_is_fully_parenthesised(self) -> None:
        expr, _ = parse_expr("2 + 3 * 4 - 1.5")
        assert str(expr) == "((2 + (3 * 4)) - 1.5)"

    def test_bad_characters_are_skipped(self) -> None:
        expr, diagnostics = parse_expr("3 @ + 4")
        assert expr == BinaryExpr(op=Operator.ADD, left=lit(3), right=lit(4))
        assert diagnostics == []

    def test_trees_are_immutable(self) -> None:
        expr, _ = parse_expr("1 + 2")
        with pytest.raises(pydantic.ValidationError):
            expr.op = Operator.SUBTRACT  # type: ignore[misc,union-attr]


# ============================================================================
# Diagnostics
# ============================================================================


class TestParserDiagnostics:
    """Malformed lines produce diagnostics, never exceptions."""

    def test_operator_without_left_operand(self) -> None:
        expr, diagnostics = parse_expr("*3")
        assert expr is None
        assert len(diagnostics) == 1
        assert diagnostics[0].startswith("Expected an integer or decimal, but got a")
        assert "'*'" in diagnostics[0]

    def test_empty_line(self) -> None:
        expr, diagnostics = parse_expr("")
        assert expr is None
        assert diagnostics == ["Expected an integer or decimal, but got a end of input"]

    def test_missing_right_operand_keeps_partial_tree(self) -> None:
        result = parse_expr("3 +")
        assert result.expression == lit(3)
        assert result.diagnostics == ["Expected an integer or decimal, but got a end of input"]
        assert not result.ok

    def test_missing_operand_in_term(self) -> None:
        result = parse_expr("1 + 2 * / 3")
        assert len(result.diagnostics) == 1
        assert "slash" in result.diagnostics[0]
        assert not result.ok

    def test_trailing_signed_literal(self) -> None:
        # "3-4" lexes as 3 followed by the literal -4
        expr, diagnostics = parse_expr("3-4")
        assert expr == lit(3)
        assert diagnostics == ["Unexpected token after expression: integer ('-4')"]

    def test_only_bad_tokens(self) -> None:
        expr, diagnostics = parse_expr("$%")
        assert expr is None
        assert diagnostics == ["Expected an integer or decimal, but got a end of input"]

    def test_malformed_numeral(self) -> None:
        expr, diagnostics = parse_expr("1 + 99999999999999999999")
        assert len(diagnostics) == 2
        assert diagnostics[0].startswith("Malformed numeral '99999999999999999999'")
        assert diagnostics[1] == "Expected an integer or decimal, but got a end of input"

    def test_diagnostics_are_per_call(self) -> None:
        parse_expr("*")
        _, diagnostics = parse_expr("1")
        assert diagnostics == []


# ============================================================================
# Token list handling
# ============================================================================


class TestParseTokens:
    """parse() on hand-built token lists."""

    def test_missing_eof_is_tolerated(self) -> None:
        expr, diagnostics = parse([Token(TokenKind.INTEGER, "1", 0, value=1)])
        assert expr == lit(1)
        assert diagnostics == []

    def test_tokens_after_eof_are_ignored(self) -> None:
        expr, diagnostics = parse(tokenize("1") + tokenize("+ 2"))
        assert expr == lit(1)
        assert diagnostics == []

    def test_empty_token_list(self) -> None:
        expr, diagnostics = parse([])
        assert expr is None
        assert len(diagnostics) == 1


class TestParseStrict:
    """parse_expr_strict raises ParseError instead of returning diagnostics."""

    def test_valid(self) -> None:
        assert parse_expr_strict("1 + 2") == BinaryExpr(op=Operator.ADD, left=lit(1), right=lit(2))

    def test_invalid(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr_strict("*3")
        assert len(exc_info.value.diagnostics) == 1
        assert exc_info.value.context is not None
        assert exc_info.value.context.column == 1
        assert str(exc_info.value).startswith("*3\n^\n")
