# reporter.py

"""
Error reporter.

Turns an ExpressionError into one or two lines for the error stream: the
message followed by an excerpt of the input, then a caret under the
offending column. The excerpt is a window of the input that fits the
terminal width, centred on the column where the input allows.
"""

import sys
from typing import List, Optional, TextIO, Tuple

from .errors import ErrorKind, ExpressionError

DEFAULT_TERM_WIDTH = 80

NO_INPUT_MESSAGE = "This is a calculator - provide some math!"


def excerpt_window(column: int, msg_width: int, term_width: int = DEFAULT_TERM_WIDTH) -> Tuple[int, int]:
    """
    Compute where the excerpt starts and how long it may be.

    Args:
        column: 1-based column of the error.
        msg_width: Width of the message printed before the excerpt.
        term_width: Total line width available.

    Returns:
        (start, length) of the excerpt, start being a 0-based index.
    """
    avail_width = max(term_width - msg_width, 1)
    start = max(column - avail_width // 2, 0)
    return start, avail_width


def format_error(error: ExpressionError, text: str, term_width: int = DEFAULT_TERM_WIDTH) -> List[str]:
    """Build the diagnostic lines for an error: message (+ excerpt and caret line)."""
    if error.kind is ErrorKind.NO_INPUT:
        return [NO_INPUT_MESSAGE]

    message = f"Error: {error.kind.phrase}"
    if error.column is None:
        return [message]

    message += ": "
    column = error.column + 1
    msg_width = len(message)
    start, length = excerpt_window(column, msg_width, term_width)
    excerpt = text[start:start + length].split("\n", 1)[0]

    caret = " " * (msg_width + column - start - 1) + "^"
    return [message + excerpt, caret]


def report_error(
    error: ExpressionError,
    text: str,
    stream: Optional[TextIO] = None,
    term_width: int = DEFAULT_TERM_WIDTH,
) -> None:
    """Write the diagnostic for `error` to `stream` (stderr by default)."""
    stream = stream or sys.stderr
    for line in format_error(error, text, term_width):
        print(line, file=stream)
