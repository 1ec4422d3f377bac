"""Numeric helpers for ``Max-Age``.

Header values arrive as text and the serializer accepts any real
number, so both directions follow the loose rules browsers apply to
cookie attributes rather than ``int()``.
"""

import math
import re

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def parse_number(text: str) -> int | float:
    """Convert *text* to a number, or ``nan`` when it is not numeric.

    Surrounding whitespace is ignored and an empty string is ``0``.
    Integral results come back as ``int``.
    """
    text = text.strip()
    if not text:
        return 0
    if text in _INFINITY:
        return _INFINITY[text]
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL.fullmatch(text):
        return math.nan
    if not any(c in text for c in ".eE"):
        return int(text)
    number = float(text)
    if number.is_integer():
        return int(number)
    return number


def format_number(number: int | float) -> str:
    """Render *number* the way it would read in a header."""
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)
