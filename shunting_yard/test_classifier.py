# test_classifier.py

import pytest

from shunting_yard.classifier import compare_operators, is_operand, is_operator, is_unary, rank


def test_precedence_ranks():
    assert rank("^") == 0
    assert rank("*") == rank("/") == 1
    assert rank("+") == rank("-") == 2
    assert rank("(") == 3
    # '!' has no class and outranks everything
    assert rank("!") == -1


def test_compare_operators_is_strict():
    assert compare_operators("*", "+")
    assert compare_operators("^", "/")
    assert compare_operators("!", "^")
    assert not compare_operators("+", "-")
    assert not compare_operators("+", "*")
    assert not compare_operators("(", "+")


@pytest.mark.parametrize("char", list("0123456789."))
def test_operand_characters(char):
    assert is_operand(char)


@pytest.mark.parametrize("char", ["a", " ", "(", "+", "\0", None, "²"])
def test_non_operand_characters(char):
    assert not is_operand(char)


def test_operator_characters():
    for char in "+-*/^!":
        assert is_operator(char)
    for char in ["(", ")", "&", "3", None]:
        assert not is_operator(char)

# ---------------------------
# Unary detection
# ---------------------------

@pytest.mark.parametrize("op, prev, expected", [
    ("-", None, True),     # start of input
    ("-", "+", True),      # after an operator
    ("-", "-", True),      # chained prefix
    ("-", "(", True),      # start of a sub-expression
    ("-", "3", False),
    ("-", ")", False),
    ("!", "3", True),      # postfix after an operand
    ("!", ".", True),
    ("!", ")", True),      # postfix after a group
    ("!", "!", True),
])
def test_is_unary(op, prev, expected):
    assert is_unary(op, prev) is expected


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "^"])
def test_operator_after_postfix_is_never_unary(op):
    assert not is_unary(op, "!")
