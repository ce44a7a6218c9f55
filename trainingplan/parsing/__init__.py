"""Parsing package for training plan CSV import and export."""

from .header import sanitize_header_line, header_lines_of
from .csv_parser import parse_training_plan
from .csv_writer import convert_to_csv
