"""
Composed tokenize → parse → evaluate entry point for one input line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from reckon.core.arithmetic.evaluator import evaluate
from reckon.core.arithmetic.parser import Parser
from reckon.core.arithmetic.tokenizer import tokenize
from reckon.core.errors import ErrorContext, EvaluationError, make_context
from reckon.core.ir import Number

logger = logging.getLogger(__name__)


@dataclass
class Evaluation:
    """Outcome of running one line through the pipeline.

    Exactly one of ``value`` or ``diagnostics`` is populated. When the
    failure came from evaluation rather than parsing, ``error`` holds the
    exception so callers can tell the cases apart.
    """

    source: str
    value: Number | None = None
    diagnostics: list[str] = field(default_factory=list)
    error: EvaluationError | None = None
    context: ErrorContext | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.diagnostics


def parse_and_evaluate(line: str) -> Evaluation:
    """Run a line through the tokenizer, parser, and evaluator.

    Parse diagnostics short-circuit evaluation. Evaluation errors are
    returned as a failed Evaluation rather than raised.
    """
    parser = Parser(tokenize(line))
    expr, diagnostics = parser.parse()

    if diagnostics or expr is None:
        context = make_context(line, parser.error_pos) if parser.error_pos is not None else None
        return Evaluation(source=line, diagnostics=diagnostics, context=context)

    try:
        value = evaluate(expr)
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s", line, e.message)
        return Evaluation(source=line, diagnostics=[e.message], error=e)

    return Evaluation(source=line, value=value)
