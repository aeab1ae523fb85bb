"""Runtime values.

Lox values map onto Python objects: numbers are ``float`` (always held at
32-bit precision), strings are ``str``, booleans are ``bool`` and ``nil`` is
``None``. The helpers here implement the language rules that depend only on
the value itself: narrowing to single precision, truthiness, equality and
the text produced by ``print``.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import struct
from decimal import Decimal


def to_f32(value: float) -> float:
    """
    Round a double to the nearest IEEE 754 single-precision value.

    Values beyond the single-precision range become signed infinities.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def is_number(value) -> bool:
    """
    Return ``True`` for Lox numbers. Booleans are not numbers.
    """
    return type(value) is float


def is_truthy(value) -> bool:
    """
    ``nil`` and ``false`` are falsey, everything else is truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(lhs, rhs) -> bool:
    """
    Compare two values without any coercion between kinds.
    """
    if type(lhs) is not type(rhs):
        return False
    return lhs == rhs


def format_number(value: float) -> str:
    """
    Render a number as the shortest decimal that reads back as the same
    single-precision value, without exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    for precision in range(1, 10):
        candidate = f"{value:.{precision}g}"
        if to_f32(float(candidate)) == value:
            text = candidate
            break
    return format(Decimal(text), "f")


def stringify(value) -> str:
    """
    Convert a runtime value to the text written by ``print``.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    return value
