# errors.py

"""
Error kinds and the exception that carries them out of the evaluator.

Every failure is terminal: the first one aborts evaluation and is reported
once, with the column of the offending character when there is one.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of evaluation failure, each with its user-facing phrase."""
    MALFORMED = "malformed expression"
    RIGHT_PAREN = "mismatched right parenthesis"
    LEFT_PAREN = "mismatched (unclosed) left parenthesis"
    UNRECOGNIZED = "unrecognized character"
    NO_INPUT = "no input provided"

    @property
    def phrase(self) -> str:
        return self.value


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class ExpressionError(CalculatorError):
    """
    Raised when an expression cannot be evaluated.

    Attributes:
        kind: The ErrorKind.
        column: 0-based column in the input, or None for errors found only
            at the end of input.
        detail: Extra text for logs (which malformed case was hit).
    """

    def __init__(self, kind: ErrorKind, column: Optional[int] = None, detail: str = ""):
        self.kind = kind
        self.column = column
        self.detail = detail
        message = kind.phrase
        if column is not None:
            message = f"{message} at column {column}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __repr__(self):
        return f"ExpressionError({self.kind.name}, column={self.column})"
