# evaluator.py

"""
Dual-stack expression evaluator.

The input is scanned once, left to right. Operands go on one stack (as
exact encodings), operators on another, and operators are applied as soon
as precedence allows, so no syntax tree is ever built.

Precedence follows classifier.OP_ORDER. A binary operator first applies
every pending operator that binds at least as tightly (left-associative,
`^` included). A unary operator only applies pending unary operators that
bind strictly tighter, so `--3` waits for its operand. '(' is a barrier.
"""

import logging
import math
import operator
from typing import Callable, Dict, Optional

from .classifier import compare_operators, is_operand, is_operator, is_unary
from .codec import decode, encode
from .errors import ErrorKind, ExpressionError
from .stack import Operator, Stack

logger = logging.getLogger(__name__)

END = "\0"


# ---------------------------
# Arithmetic (IEEE-754 results, never raises)
# ---------------------------

def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _divide(dividend: float, divisor: float) -> float:
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 to a negative power is a pole; anything else is a domain error
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _factorial(value: float) -> float:
    """Gamma-based factorial, defined for non-integers too."""
    try:
        return math.gamma(value + 1)
    except OverflowError:
        return math.inf
    except ValueError:
        if value + 1 == 0:
            return math.copysign(math.inf, value + 1)
        return math.nan


UNARY_OPERATIONS: Dict[str, Callable[[float], float]] = {
    "+": operator.pos,
    "-": operator.neg,
    "!": _factorial,
}

BINARY_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}


def apply_operator(op: str, unary: bool, operands: Stack) -> bool:
    """
    Apply an operator to the top operand(s) on the stack.

    Args:
        op: Operator character (+, -, *, /, ^, !).
        unary: Whether this occurrence is unary.
        operands: Operand stack of exact encodings; the result is pushed
            back onto it.

    Returns:
        True on success, False on underflow or an unknown operator.
    """
    # Underflow means the expression is malformed
    if operands.is_empty():
        return False
    val2 = decode(operands.pop())

    if unary:
        operation = UNARY_OPERATIONS.get(op)
        if operation is None:
            logger.debug("unknown unary operator %r", op)
            return False
        result = operation(val2)
        logger.debug("apply %s(%r) = %r", op, val2, result)
        operands.push(encode(result))
        return True

    if operands.is_empty():
        return False
    val1 = decode(operands.pop())

    operation = BINARY_OPERATIONS.get(op)
    if operation is None:
        logger.debug("unknown binary operator %r", op)
        return False
    result = operation(val1, val2)
    logger.debug("apply %r %s %r = %r", val1, op, val2, result)
    operands.push(encode(result))
    return True


# ---------------------------
# Scanner
# ---------------------------

def _should_apply(top: Operator, new: Operator) -> bool:
    """Whether the operator on top of the stack is applied before `new` is pushed."""
    if top.char == "(":
        return False
    if new.unary:
        return top.unary and compare_operators(top.char, new.char)
    return not compare_operators(new.char, top.char)


def _apply(item: Operator, operands: Stack, column: Optional[int]) -> None:
    if not apply_operator(item.char, item.unary, operands):
        raise ExpressionError(ErrorKind.MALFORMED, column, detail=f"cannot apply {item.char!r}")


def _push_operand(operands: Stack, raw: str, column: int) -> None:
    operand = raw.rstrip()

    # Reject a lone '.', an operand split by a space, and repeated '.'
    if operand == "." or " " in operand or operand.count(".") > 1:
        raise ExpressionError(ErrorKind.MALFORMED, column, detail=f"invalid operand {operand!r}")

    operands.push(encode(decode(operand)))


def shunting_yard(text: str) -> float:
    """
    Evaluate an expression.

    Args:
        text: The expression. Scanning stops at the first newline.

    Returns:
        The numeric result. Division by zero and similar cases give inf or
        nan rather than an error.

    Raises:
        ExpressionError: On the first syntax error, with its column when
            one applies.
    """
    operands: Stack[str] = Stack()
    operators: Stack[Operator] = Stack()

    token_pos = None
    paren_depth = 0
    paren_pos = None    # first unclosed '(' for error reporting
    prev_chr = None

    try:
        for i, char in enumerate(text + END):
            if char == " ":
                continue

            # Operands
            if is_operand(char):
                if token_pos is None:
                    token_pos = i
                prev_chr = char
                continue
            if token_pos is not None:
                _push_operand(operands, text[token_pos:i], token_pos)
                token_pos = None

            # Operators
            if is_operator(char):
                new = Operator(char, is_unary(char, prev_chr))
                while not operators.is_empty() and _should_apply(operators.top(), new):
                    _apply(operators.pop(), operands, i)
                operators.push(new)

            # Parentheses
            elif char == "(":
                operators.push(Operator("("))
                paren_depth += 1
                if paren_depth == 1:
                    paren_pos = i
            elif char == ")":
                if not paren_depth:
                    raise ExpressionError(ErrorKind.RIGHT_PAREN, i)

                # Apply operators back to the matching '('
                while True:
                    item = operators.pop()
                    if item.char == "(":
                        paren_depth -= 1
                        break
                    _apply(item, operands, i)

            elif char in (END, "\n"):
                break
            else:
                raise ExpressionError(ErrorKind.UNRECOGNIZED, i)

            prev_chr = char

        if paren_depth:
            raise ExpressionError(ErrorKind.LEFT_PAREN, paren_pos)

        # End of input: apply whatever is left
        while not operators.is_empty():
            _apply(operators.pop(), operands, None)

        if operands.is_empty():
            raise ExpressionError(ErrorKind.NO_INPUT)
        result = decode(operands.pop())
        if not operands.is_empty():
            raise ExpressionError(ErrorKind.MALFORMED, detail=f"{len(operands)} unused operand(s)")

        return result
    except ExpressionError as e:
        logger.debug("evaluation of %r failed: %s", text, e)
        raise
    finally:
        operands.clear()
        operators.clear()


def evaluate(text: str) -> float:
    """Evaluate `text` and return the result (see shunting_yard)."""
    return shunting_yard(text)
