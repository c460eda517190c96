"""Runtime values for Nice.

A Nice value is one of four Python types:

- nil      -> ``None``
- boolean  -> ``bool``
- number   -> ``float`` (IEEE-754 double)
- string   -> ``str``

``bool`` is a subclass of ``int`` in Python, never of ``float``, so the
``isinstance(value, float)`` checks used throughout keep booleans and
numbers apart.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal
from typing import Union

Value = Union[None, bool, float, str]


def is_number(value: Value) -> bool:
    """Return ``True`` if ``value`` is a Nice number."""
    return isinstance(value, float)


def type_name(value: Value) -> str:
    """Return the Nice name of a value's kind."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    return 'string'


def is_truthy(value: Value) -> bool:
    """
    Map a value to a boolean.

    ``nil`` and ``false`` are falsey; everything else, including ``0``,
    ``""`` and NaN, is truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Value, b: Value) -> bool:
    """
    Compare two values for equality.

    Values of different kinds are never equal. Numbers compare with IEEE
    ``==`` except that NaN equals NaN, which keeps equality reflexive.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type_name(a) != type_name(b):
        return False
    if isinstance(a, float) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def format_number(value: float) -> str:
    """
    Render a number with a fractional part, e.g. ``7.0`` or ``2.5``.

    Magnitudes from ``1e-3`` up to ``1e7`` are written out in full. Anything
    outside that range uses one leading digit and an ``E`` exponent
    (``1.0E21``, ``1.5E-4``). Digits are the shortest that round-trip.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0.0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    text = ''.join(map(str, digits))
    power = len(text) + exponent - 1
    text = text.rstrip('0')
    mantissa = f"{text[0]}.{text[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{power}"


def stringify(value: Value) -> str:
    """
    Render a value the way ``print`` shows it.
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = format_number(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return value
