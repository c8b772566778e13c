"""
Expression types for reckon IR.

This module defines the typed AST produced by the arithmetic parser and
consumed by the evaluator.

Supports:
- Numbers: signed 64-bit integers and 64-bit floats (decimals)
- Arithmetic: +, -, *, /
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, StrictInt

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class Integer(BaseModel):
    """A signed 64-bit integer value."""

    value: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX, description="The integer value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class Decimal(BaseModel):
    """A 64-bit floating point value."""

    value: float = Field(description="The decimal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


Number = Integer | Decimal


def fits_int64(value: int) -> bool:
    """True when ``value`` is representable as a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal leaf."""

    number: Number = Field(description="The literal number")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.number)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
