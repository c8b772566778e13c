"""
Error types for reckon tokenizing, parsing, evaluation, and configuration.
"""

from dataclasses import dataclass
from typing import Optional


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class MalformedNumeralError(ReckonError):
    """
    Raised when a scanned numeral cannot be converted to its numeric kind.

    Examples:
    - Integer literal outside the signed 64-bit range
    - Literal consisting of a sign and a decimal point only
    """

    def __init__(self, message: str, text: str, context: Optional["ErrorContext"] = None):
        self.text = text
        super().__init__(message, context)


class ParseError(ReckonError):
    """
    Raised by strict parsing helpers when a line produced diagnostics.

    The collected diagnostics are kept in order on ``diagnostics``.
    """

    def __init__(self, diagnostics: list[str], context: Optional["ErrorContext"] = None):
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(self.diagnostics), context)


class EvaluationError(ReckonError):
    """Raised when a well-formed expression cannot be evaluated."""

    pass


class DivisionByZeroError(EvaluationError):
    """Raised when the divisor of a division evaluates to zero."""

    pass


class IntegerDivisionByZeroError(DivisionByZeroError):
    """Integer division with a zero divisor."""

    def __init__(self, context: Optional["ErrorContext"] = None):
        super().__init__("Division by zero (integer)", context)


class DecimalDivisionByZeroError(DivisionByZeroError):
    """Decimal division with a zero divisor."""

    def __init__(self, context: Optional["ErrorContext"] = None):
        super().__init__("Division by zero (decimal)", context)


class IntegerOverflowError(EvaluationError):
    """Raised when integer arithmetic leaves the signed 64-bit range."""

    pass


class DecimalOverflowError(EvaluationError):
    """Raised when decimal arithmetic produces infinity or NaN."""

    pass


class ConfigError(ReckonError):
    """
    Raised when reckon.toml cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Unknown log level
    - Wrong value type for a setting
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a single input line.

    Attributes:
        source: The input line the error refers to
        column: Column number (1-indexed)
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format the input line with a marker under the error column.

        Returns:
            Two lines: the source, then ``^`` under the column.
        """
        marker_pos = max(self.column - 1, 0)
        return f"{self.source}\n{' ' * marker_pos}^"


def make_context(source: str, pos: int) -> ErrorContext:
    """
    Helper to create an ErrorContext from a 0-based character offset.

    Args:
        source: The input line
        pos: 0-based offset of the offending character

    Returns:
        ErrorContext pointing at ``pos``
    """
    return ErrorContext(source=source.rstrip("\r\n"), column=pos + 1)
