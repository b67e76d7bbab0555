"""Display-string conversion for resolved values."""

import json
import math
from decimal import Decimal
from typing import Any

from datafmt.templates.paths import is_missing


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # 3.0 displays as "3"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    # Exponent form only below 1e-6 or from 1e21 up: 1e-05 -> 0.00001, 1e-07 -> 1e-7
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def to_display(value: Any) -> str:
    """Convert a resolved value to the text inserted into the template.

    None and NOT_FOUND become "", booleans "true"/"false", numbers their
    decimal form, strings themselves. Dicts and lists render as compact JSON.
    """
    if is_missing(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)
