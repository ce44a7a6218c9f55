"""
CSV writing module for training plan exports.
Rebuilds the file from the original header lines and edited TrainingWeek records.
"""

from typing import Sequence

from ..config import LEADING_EMPTY_COLUMNS, LINE_SEPARATOR
from ..logger import setup_logger
from ..models import TrainingWeek
from .delimited import escape_field, join_fields
from .header import sanitize_header_line

logger = setup_logger(__name__)


def week_to_row(week: TrainingWeek) -> str:
    """Render one TrainingWeek in the export's column order."""
    fields = [''] * LEADING_EMPTY_COLUMNS + [
        escape_field(week.weeks_until_race),
        escape_field(week.fraction_of_peak),
        escape_field(week.q1.description),
        escape_field(week.q1.notes),
        escape_field(week.q2.description),
        escape_field(week.q2.notes),
        escape_field(week.weekly_easy_mileage),
        escape_field(week.actual_mileage),
        escape_field(week.difference),
        escape_field(week.notes),
    ]
    return join_fields(fields)


def convert_to_csv(weeks: Sequence[TrainingWeek], original_header_lines: Sequence[str]) -> str:
    """
    Serialize training weeks back into the export format.

    Args:
        weeks: Records to write, in output order
        original_header_lines: Preamble and column header lines of the source file

    Returns:
        Header section, a line break, then one line per week
    """
    header_section = LINE_SEPARATOR.join(
        sanitize_header_line(line) for line in original_header_lines
    )
    data_rows = LINE_SEPARATOR.join(week_to_row(week) for week in weeks)

    logger.debug(f"Serialized {len(weeks)} weeks with {len(original_header_lines)} header lines")
    return header_section + LINE_SEPARATOR + data_rows
