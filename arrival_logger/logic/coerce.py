"""Integer coercion for loosely-typed API fields."""

from __future__ import annotations

import math
import re
from typing import Any

from arrival_logger.errors import TypeMismatchError

_DECIMAL_INT = re.compile(r"\s*[+-]?[0-9]+\s*")


def coerce_to_int(value: Any) -> int:
    """Read a string, int or float as an int, truncating floats toward zero.

    JSON numbers may decode as floats, and the upstream API sometimes sends
    numbers as strings. Anything else raises :class:`TypeMismatchError`.
    """
    # bool is an int subclass and must not pass as one.
    if isinstance(value, bool):
        raise TypeMismatchError(f"unexpected type {type(value).__name__}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeMismatchError(f"cannot convert non-finite float {value!r}")
        return int(value)
    if isinstance(value, str):
        if not _DECIMAL_INT.fullmatch(value):
            raise TypeMismatchError(f"cannot convert string {value!r}")
        return int(value)
    raise TypeMismatchError(f"unexpected type {type(value).__name__}")
