"""
Delimited text reading and writing.
Generic quoted-field handling with no knowledge of the training plan columns.
"""

import io
import math
from typing import Optional, Sequence, Union

import pandas as pd
from pandas.errors import EmptyDataError, ParserError

from ..config import DELIMITER, QUOTE_CHAR
from ..logger import setup_logger

logger = setup_logger(__name__)

Cell = Union[str, int, float, None]

# Every cell is read as text; numeric typing happens per cell afterwards
READ_OPTIONS = dict(
    sep=DELIMITER,
    quotechar=QUOTE_CHAR,
    doublequote=True,
    dtype=object,
    keep_default_na=False,
    skip_blank_lines=True,
    index_col=False,
)

_NEEDS_QUOTING = (DELIMITER, QUOTE_CHAR, '\n', '\r')


def read_records(text: str) -> list[dict]:
    """
    Read delimited text whose first row holds the field names.

    Rows wider than the header lose their extra trailing fields and
    short rows are padded, so a single ragged row never fails the read.
    A stray quote inside a cell does not fail the read, and a quoted
    cell left open swallows the rest of the text.

    Args:
        text: Delimited text, header row first

    Returns:
        One dict per data row, mapping field name to cell text.
        Cells missing from short rows are None.
    """
    if not text.strip():
        return []

    try:
        df = pd.read_csv(io.StringIO(text), **READ_OPTIONS)
    except EmptyDataError:
        logger.debug("No header row found")
        return []
    except ParserError as e:
        # An unterminated quote runs to the end of the text
        logger.warning(f"Unterminated quoted field, closing it at end of text: {e}")
        df = pd.read_csv(io.StringIO(text + QUOTE_CHAR), **READ_OPTIONS)

    df.columns = [str(col).rstrip('\r') for col in df.columns]
    logger.debug(f"Delimited text loaded: {len(df)} rows, {len(df.columns)} columns")

    return [
        {key: (None if pd.isna(value) else value) for key, value in row.items()}
        for row in df.to_dict(orient='records')
    ]


def format_number(value: Union[int, float]) -> str:
    """Render a number the way the spreadsheet tool writes it (12.0 -> '12')."""
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def escape_field(value: Optional[Union[str, int, float]]) -> str:
    """
    Render a single field for output.

    Text containing the delimiter, a quote or a line break is wrapped in
    quotes with inner quotes doubled. Everything else is written as is.
    """
    if value is None:
        return ''
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    text = str(value)
    if any(token in text for token in _NEEDS_QUOTING):
        return QUOTE_CHAR + text.replace(QUOTE_CHAR, QUOTE_CHAR * 2) + QUOTE_CHAR
    return text


def join_fields(fields: Sequence[str]) -> str:
    """Join already rendered fields into one row."""
    return DELIMITER.join(fields)
