from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Union


# Optional surrounding whitespace, sign, digits with optional fraction, optional exponent.
# "nan", "inf" and hexadecimal forms are not numeric.
_NUMERIC_STRING_RE = re.compile(
    r"[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*"
)

Number = Union[int, float, Decimal]


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_STRING_RE.fullmatch(value) is not None


def is_numeric(value: Any) -> bool:
    """Return True for ints, floats, non-NaN Decimals and numeric strings.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, (int, float)):
        return True
    return is_numeric_string(value)


def numeric_value(value: Any) -> Number:
    """Return a comparable number for a value accepted by :func:`is_numeric`.

    Numeric strings are read as ``Decimal`` so large or precise literals compare exactly.
    An exponent beyond the ``Decimal`` context range falls back to ``float``, which
    saturates to an infinity or zero.
    The caller keeps the original value; this is only used for range checks.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            return Decimal(text)
        except InvalidOperation:
            return float(text)
    return value
