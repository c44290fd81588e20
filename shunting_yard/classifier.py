# classifier.py

"""Character predicates and operator precedence."""

from typing import Optional

# Precedence classes, tightest first. '(' sits last so it is never applied
# eagerly; '!' is absent and outranks every class.
OP_ORDER = ("^", "*/", "+-", "(")

OPERATORS = "+-*/^!"
POSTFIX = "!"


def rank(op: str) -> int:
    """Index of the precedence class holding `op`, or -1 if it has none."""
    for index, ops in enumerate(OP_ORDER):
        if op in ops:
            return index
    return -1


def compare_operators(op1: str, op2: str) -> bool:
    """True when `op1` binds strictly tighter than `op2`."""
    return rank(op1) < rank(op2)


def is_operand(c: Optional[str]) -> bool:
    return bool(c) and (c.isdigit() and c.isascii() or c == ".")


def is_operator(c: Optional[str]) -> bool:
    return bool(c) and c in OPERATORS


def is_unary(op: str, prev_chr: Optional[str]) -> bool:
    """
    Decide whether an operator occurrence is unary.

    `prev_chr` is the previous non-space character, or None at the start of
    input. A prefix operator is unary after another operator, after '(' or
    at the start. '!' is unary (postfix) after an operand or ')'. An
    operator right after '!' is never unary unless it is '!' again.
    """
    if prev_chr == POSTFIX and op != POSTFIX:
        return False

    if prev_chr is None or prev_chr == "(" or is_operator(prev_chr):
        return True
    return op == POSTFIX and (is_operand(prev_chr) or prev_chr == ")")
