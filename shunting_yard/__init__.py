"""Command-line arithmetic calculator built on a dual-stack shunting-yard evaluator."""
from .codec import decode, encode, trim_double
from .errors import CalculatorError, ErrorKind, ExpressionError
from .evaluator import apply_operator, evaluate, shunting_yard
from .reporter import format_error, report_error

__version__ = "1.0.0"

__all__ = [
    'decode', 'encode', 'trim_double',
    'CalculatorError', 'ErrorKind', 'ExpressionError',
    'apply_operator', 'evaluate', 'shunting_yard',
    'format_error', 'report_error',
]
