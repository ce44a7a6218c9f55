"""Read and write spreadsheet-exported training plans."""

from .models import Workout, TrainingWeek
from .parsing import (
    parse_training_plan,
    convert_to_csv,
    header_lines_of,
    sanitize_header_line,
)

__all__ = [
    'Workout',
    'TrainingWeek',
    'parse_training_plan',
    'convert_to_csv',
    'header_lines_of',
    'sanitize_header_line',
]
