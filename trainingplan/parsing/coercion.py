"""
Best-effort cell coercion.
Turns raw cell text into numbers or trimmed strings without ever raising.
"""

import math
import re
from typing import Optional

from .delimited import Cell, format_number

# A cell that is entirely a decimal number
NUMBER_PATTERN = re.compile(r'^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$')
INTEGER_PATTERN = re.compile(r'^\s*-?\d+\s*$')

# Leading decimal number of a text value, e.g. "40" in "40k"
LEADING_NUMBER_PATTERN = re.compile(
    r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


def infer_cell(raw: Optional[str]) -> Cell:
    """
    Convert cell text to a number when the whole cell looks like one.

    Examples:
        '12' -> 12
        '0.75' -> 0.75
        '8k easy' -> '8k easy'
    """
    if not isinstance(raw, str) or not NUMBER_PATTERN.match(raw):
        return raw
    if INTEGER_PATTERN.match(raw):
        return int(raw)
    return float(raw)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_string(value: Cell) -> str:
    """Text form of a cell, trimmed. Falsy cells (None, '', 0, NaN) become ''."""
    if not value or (isinstance(value, float) and math.isnan(value)):
        return ''
    text = format_number(value) if _is_number(value) else str(value)
    return text.strip()


def coerce_number(value: Cell) -> Optional[float]:
    """
    Numeric value of a cell, or None when it has none.

    Numbers pass through unchanged. Text is read up to the end of its
    leading number, so '40k' gives 40.0 and 'abc' gives None.
    """
    if _is_number(value):
        return value
    if isinstance(value, str):
        match = LEADING_NUMBER_PATTERN.match(value)
        if match:
            return float(match.group(1))
    return None


def required_number(value: Cell) -> float:
    """Like coerce_number, but missing, unparseable and NaN all become 0."""
    number = coerce_number(value)
    if not number or math.isnan(number):
        return 0
    return number
