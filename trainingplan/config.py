"""
Configuration constants for the training plan codec.
Centralized definition of the source file layout, column names and logging behavior.
"""

from typing import List

# File Layout
PREAMBLE_LINE_COUNT = 9  # Metadata lines before the column header
HEADER_LINE_COUNT = 10  # Preamble plus the column header line
LEADING_EMPTY_COLUMNS = 3  # Unused columns in front of "Weeks until race"

# Delimited Text
DELIMITER = ","
QUOTE_CHAR = '"'
LINE_SEPARATOR = "\n"

# Column Names (exactly as written by the source spreadsheet)
COL_WEEKS_UNTIL_RACE = "Weeks until race"
COL_FRACTION_OF_PEAK = "Fraction of peak"
COL_Q1_WORKOUT = "Workout Q1 (k)"
COL_Q1_NOTES = "Notes Q1, for Q1"
COL_Q2_WORKOUT = "Worout Q2 ()"  # sic
COL_Q2_NOTES = "Notes Q2, for Q2"
COL_WEEKLY_EASY_MILEAGE = "Weekly Easy Mileage (k)"
COL_ACTUAL_MILEAGE = "Actual (k)"
COL_DIFFERENCE = "Difference (k)"
COL_NOTES = "Notes"

# Header labels that contain the delimiter but are written unquoted
MALFORMED_HEADER_LABELS: List[str] = [COL_Q1_NOTES, COL_Q2_NOTES]

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_TO_FILE = False  # Write logs/trainingplan.log in addition to the console
