"""
reckon - a read-eval-print calculator for integer and decimal arithmetic.

One line in, one number (or a list of diagnostics) out.
"""

from __future__ import annotations

from ._version import get_version
from .core.arithmetic import Evaluation, evaluate, parse, parse_and_evaluate, tokenize
from .core.errors import (
    DivisionByZeroError,
    EvaluationError,
    ParseError,
    ReckonError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "Evaluation",
    "DivisionByZeroError",
    "EvaluationError",
    "ParseError",
    "ReckonError",
    "evaluate",
    "parse",
    "parse_and_evaluate",
    "tokenize",
]
