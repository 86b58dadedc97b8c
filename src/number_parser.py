"""
Numeric cell normalization for hand-maintained spreadsheet values.

Cells like "82,5 KG", "100kg" or " 7 " all come out as plain floats.
Ranges such as "8-10" read as their leading number. Anything without a
leading number comes back as None.
"""

import math
import re

NON_NUMERIC_RE = re.compile(r"[^\d,.\-]")
LEADING_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def normalize_number(raw):
    """
    Convert a raw cell value into a float.

    Args:
        raw: Cell value (string, number or None)

    Returns:
        float, or None when the cell is missing or not numeric
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else None

    cleaned = NON_NUMERIC_RE.sub("", str(raw))
    if not cleaned:
        return None

    # Decimal comma ("82,5"); only the first comma is converted
    cleaned = cleaned.replace(",", ".", 1)

    match = LEADING_NUMBER_RE.match(cleaned)
    if not match:
        return None

    value = float(match.group())
    return value if math.isfinite(value) else None
