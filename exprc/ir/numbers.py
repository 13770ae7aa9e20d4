"""
Display form of folded numeric values.

Values print the way a JavaScript runtime prints numbers: the shortest
round-tripping digits, plain decimal notation for magnitudes from 1e-6
up to (but excluding) 1e21, and exponent notation outside that range.
"""

import math

# Decimal exponents (position of the decimal point relative to the
# first significant digit) that still print in plain notation.
_MAX_PLAIN_POINT = 21
_MIN_PLAIN_POINT = -5


def _shortest_digits(value: float):
    """Split a positive finite float into significant digits and point position.

    Returns ``(digits, point)`` such that value == 0.<digits> * 10**point,
    using the shortest digit string that round-trips.
    """
    mantissa, _, exponent = repr(value).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    combined = int_part + frac_part
    digits = combined.lstrip("0")
    point = len(int_part) + int(exponent or 0) - (len(combined) - len(digits))
    return digits.rstrip("0"), point


def format_number(value: float) -> str:
    """Format a folded value for display.

    Examples:
        >>> format_number(8.0)
        '8'
        >>> format_number(2.0 ** 60)
        '1152921504606847000'
        >>> format_number(1e-5)
        '0.00001'
        >>> format_number(float("inf"))
        'Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= _MAX_PLAIN_POINT:
        text = digits + "0" * (point - count)
    elif 0 < point <= _MAX_PLAIN_POINT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_PLAIN_POINT <= point <= 0:
        text = "0." + "0" * -point + digits
    else:
        exponent = point - 1
        exponent_sign = "+" if exponent >= 0 else "-"
        head = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{head}e{exponent_sign}{abs(exponent)}"
    return sign + text
