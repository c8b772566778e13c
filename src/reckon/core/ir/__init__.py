"""
reckon intermediate representation.

Typed numbers and expression trees shared by the parser and evaluator.
"""

from .expressions import (
    INT64_MAX,
    INT64_MIN,
    BinaryExpr,
    Decimal,
    Expr,
    Integer,
    Literal,
    Number,
    Operator,
    fits_int64,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "BinaryExpr",
    "Decimal",
    "Expr",
    "Integer",
    "Literal",
    "Number",
    "Operator",
    "fits_int64",
]
