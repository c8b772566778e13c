"""
Expression evaluator for reckon arithmetic trees.

Pure evaluation: no I/O, no side effects. Each binary node picks its
arithmetic from its own evaluated children: integer arithmetic when both
are Integer, floating point otherwise.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable

from reckon.core.errors import (
    DecimalDivisionByZeroError,
    DecimalOverflowError,
    EvaluationError,
    IntegerDivisionByZeroError,
    IntegerOverflowError,
)
from reckon.core.ir import BinaryExpr, Decimal, Expr, Integer, Literal, Number, Operator, fits_int64

logger = logging.getLogger(__name__)


def _int_div(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise IntegerDivisionByZeroError()
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _float_div(left: float, right: float) -> float:
    if right == 0:
        raise DecimalDivisionByZeroError()
    return left / right


_INTEGER_OPS: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: _int_div,
}

_DECIMAL_OPS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: _float_div,
}


def evaluate(expr: Expr) -> Number:
    """Evaluate an expression tree to a Number.

    Args:
        expr: Parsed expression AST (from a parse with no diagnostics).

    Returns:
        Integer when every operand on the path is an integer, else Decimal.

    Raises:
        DivisionByZeroError: If a divisor evaluates to zero.
        IntegerOverflowError: If integer arithmetic leaves the 64-bit range.
        DecimalOverflowError: If decimal arithmetic is not finite.
    """
    result = _interpret(expr)
    logger.debug("Evaluated %s -> %r", expr, result)
    return result


def _interpret(expr: Expr) -> Number:
    match expr:
        case Literal(number=number):
            return number
        case BinaryExpr():
            return _interpret_binary(expr)
    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr) -> Number:
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    match left, right:
        case Integer(value=a), Integer(value=b):
            value = _INTEGER_OPS[expr.op](a, b)
            if not fits_int64(value):
                raise IntegerOverflowError(f"Integer overflow: {a} {expr.op.value} {b}")
            return Integer(value=value)
        case _:
            a, b = float(left.value), float(right.value)
            value = _DECIMAL_OPS[expr.op](a, b)
            if not math.isfinite(value):
                raise DecimalOverflowError(f"Decimal overflow: {a!r} {expr.op.value} {b!r}")
            return Decimal(value=value)
