"""
CSV parsing module for training plan exports.
Handles preamble removal, header repair and mapping rows to TrainingWeek records.
"""

from ..config import (
    PREAMBLE_LINE_COUNT,
    LINE_SEPARATOR,
    COL_WEEKS_UNTIL_RACE,
    COL_FRACTION_OF_PEAK,
    COL_Q1_WORKOUT,
    COL_Q1_NOTES,
    COL_Q2_WORKOUT,
    COL_Q2_NOTES,
    COL_WEEKLY_EASY_MILEAGE,
    COL_ACTUAL_MILEAGE,
    COL_DIFFERENCE,
    COL_NOTES,
)
from ..logger import setup_logger, log_week_stats
from ..models import TrainingWeek, Workout
from .coercion import coerce_number, coerce_string, infer_cell, required_number
from .delimited import read_records
from .header import sanitize_header_line

logger = setup_logger(__name__)


def _extract_data_block(lines: list[str]) -> str:
    """Drop the preamble and repair the header line; data rows pass through untouched."""
    header_row = lines[PREAMBLE_LINE_COUNT]
    fixed_header = sanitize_header_line(header_row)
    if fixed_header != header_row:
        logger.debug("Quoted malformed labels in header row")
    return LINE_SEPARATOR.join([fixed_header] + lines[PREAMBLE_LINE_COUNT + 1:])


def row_to_week(row: dict) -> TrainingWeek:
    """
    Map one parsed row to a TrainingWeek by column name.

    Args:
        row: Mapping of column name to cell value

    Returns:
        TrainingWeek with defaults applied for missing or unparseable cells
    """
    def cell(key):
        return infer_cell(row.get(key))

    return TrainingWeek(
        weeks_until_race=required_number(cell(COL_WEEKS_UNTIL_RACE)),
        fraction_of_peak=required_number(cell(COL_FRACTION_OF_PEAK)),
        q1=Workout(
            description=coerce_string(cell(COL_Q1_WORKOUT)),
            notes=coerce_string(cell(COL_Q1_NOTES)),
        ),
        q2=Workout(
            description=coerce_string(cell(COL_Q2_WORKOUT)),
            notes=coerce_string(cell(COL_Q2_NOTES)),
        ),
        weekly_easy_mileage=required_number(cell(COL_WEEKLY_EASY_MILEAGE)),
        actual_mileage=coerce_number(cell(COL_ACTUAL_MILEAGE)),
        difference=coerce_number(cell(COL_DIFFERENCE)),
        notes=coerce_string(cell(COL_NOTES)),
    )


def parse_training_plan(csv_text: str) -> list[TrainingWeek]:
    """
    Parse a training plan export into TrainingWeek records.

    The first 9 lines are metadata and are skipped. Line 10 holds the
    column names and data starts on line 11. Rows with no weeks until
    race and no Q1 workout are treated as blank and dropped.

    Args:
        csv_text: Full contents of the exported file

    Returns:
        TrainingWeek records in file order

    Raises:
        TypeError: If csv_text is not a string
    """
    if not isinstance(csv_text, str):
        logger.error(f"Expected CSV text, got {type(csv_text).__name__}")
        raise TypeError(f"csv_text must be str, not {type(csv_text).__name__}")

    lines = csv_text.split(LINE_SEPARATOR)
    if len(lines) <= PREAMBLE_LINE_COUNT:
        logger.warning(f"Input has {len(lines)} lines, no header row found")
        return []

    rows = read_records(_extract_data_block(lines))
    weeks = [row_to_week(row) for row in rows]

    kept = [week for week in weeks if not week.is_empty]
    if len(kept) < len(weeks):
        logger.debug(f"Dropped {len(weeks) - len(kept)} blank rows")

    log_week_stats(kept, logger, "Parsed training plan")
    return kept
