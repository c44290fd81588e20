# codec.py

"""
Numeric codec.

Values travel through the operand stack as text. `encode` and `decode` use
the hexadecimal float form so a value survives any number of push/pop
cycles bit for bit. `trim_double` is the lossy formatter for the final
result only.
"""

import math

DEFAULT_PRECISION = 12
DEFAULT_EXPONENT_THRESHOLD = 12


def encode(value: float) -> str:
    """Return an exact textual form of `value` (e.g. '0x1.8000000000000p+1')."""
    return float(value).hex()


def decode(text: str) -> float:
    """
    Parse an exact encoding or a raw decimal operand token.

    Args:
        text: Output of `encode`, or a decimal token such as '12', '3.5',
            '.5' or '7.'.

    Returns:
        The float value.

    Raises:
        ValueError: If the text is neither form.
    """
    text = text.strip()
    if "x" in text.lower():
        return float.fromhex(text)
    return float(text)


def _trim_zeroes(digits: str) -> str:
    if "." not in digits:
        return digits
    digits = digits.rstrip("0")
    if digits.endswith("."):
        digits = digits[:-1]
    return digits


def trim_double(
    value: float,
    precision: int = DEFAULT_PRECISION,
    exponent_threshold: int = DEFAULT_EXPONENT_THRESHOLD,
) -> str:
    """
    Format a final result for display, without trailing zeroes.

    Scientific notation is used once the magnitude reaches
    10 ** exponent_threshold; both notations use `precision` digits after
    the decimal point before trimming.

    >>> trim_double(4.0)
    '4'
    >>> trim_double(0.1 + 0.2)
    '0.3'
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"

    if abs(value) >= 10.0 ** exponent_threshold:
        mantissa, _, exponent = f"{value:.{precision}e}".partition("e")
        return f"{_trim_zeroes(mantissa)}e{exponent}"
    return _trim_zeroes(f"{value:.{precision}f}")
