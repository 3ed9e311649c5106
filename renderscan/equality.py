"""Value comparison rules shared by every diff.

``same_value`` is the equality used for memoization checks: primitives are
compared by value, everything else by identity. NaN equals NaN and the two
signed zeros are distinct.
"""

from __future__ import annotations

import math
from collections.abc import Sized
from typing import Any

_PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes)


def is_primitive(value: Any) -> bool:
    """Return True for scalar values that compare by value."""
    return isinstance(value, _PRIMITIVE_TYPES)


def is_function(value: Any) -> bool:
    """Any callable, classes included."""
    return callable(value)


def same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if not (is_primitive(a) and is_primitive(b)):
        return False
    # True and False are singletons, and must not equal 1 or 0
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, float) and isinstance(b, float):
        if math.isnan(a) and math.isnan(b):
            return True
        if a == 0.0 and b == 0.0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
        return a == b
    if isinstance(a, int | float) and isinstance(b, int | float):
        # int/int or int/float; an int zero is positive
        if a == 0 and b == 0:
            zero = a if isinstance(a, float) else b
            return math.copysign(1.0, zero) > 0
        return a == b
    return type(a) is type(b) and a == b


def is_non_default(value: Any) -> bool:
    """True for values worth flagging on first paint.

    Non-empty strings and containers, non-zero numbers, True and objects
    with instance attributes. None, empty values, zero, False and objects
    without attributes are defaults.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int | float | complex):
        return value != 0
    if isinstance(value, Sized):
        return len(value) > 0
    return bool(getattr(value, "__dict__", None))
