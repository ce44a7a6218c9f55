"""
Header handling for the training plan export.

The spreadsheet writes two column labels that contain the delimiter
("Notes Q1, for Q1" and "Notes Q2, for Q2") without quoting them, which
would split each label into two columns and shift every later field.
"""

import re

from ..config import HEADER_LINE_COUNT, LINE_SEPARATOR, MALFORMED_HEADER_LABELS, QUOTE_CHAR

# Matches a label only where it is not already wrapped in quotes
_UNQUOTED_LABELS = [
    (label, re.compile(f'(?<!{QUOTE_CHAR}){re.escape(label)}(?!{QUOTE_CHAR})'))
    for label in MALFORMED_HEADER_LABELS
]


def sanitize_header_line(line: str) -> str:
    """
    Quote the known malformed labels in a header line.

    Already quoted labels are left untouched, so applying this twice is
    the same as applying it once.

    Examples:
        'Workout Q1 (k),Notes Q1, for Q1' -> 'Workout Q1 (k),"Notes Q1, for Q1"'
    """
    for label, pattern in _UNQUOTED_LABELS:
        if label in line:
            line = pattern.sub(QUOTE_CHAR + label + QUOTE_CHAR, line)
    return line


def header_lines_of(csv_text: str) -> list[str]:
    """Return the preamble and column header lines of a training plan export."""
    return csv_text.split(LINE_SEPARATOR)[:HEADER_LINE_COUNT]
