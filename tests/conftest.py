"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

PREAMBLE = [
    "Marathon plan,,,,,,,,,,,,",
    ",,,Race,Rotterdam Marathon,,,,,,,,",
    ",,,Race date,2026-04-12,,,,,,,,",
    ",,,Peak mileage (k),80,,,,,,,,",
    ",,,,,,,,,,,,",
    ",,,Legend,,,,,,,,,",
    ",,,Q1,Quality session 1,,,,,,,,",
    ",,,Q2,Quality session 2,,,,,,,,",
    ",,,,,,,,,,,,",
]

RAW_HEADER = (
    ",,,Weeks until race,Fraction of peak,Workout Q1 (k),Notes Q1, for Q1,"
    "Worout Q2 (),Notes Q2, for Q2,Weekly Easy Mileage (k),Actual (k),Difference (k),Notes"
)

QUOTED_HEADER = (
    ',,,Weeks until race,Fraction of peak,Workout Q1 (k),"Notes Q1, for Q1",'
    'Worout Q2 (),"Notes Q2, for Q2",Weekly Easy Mileage (k),Actual (k),Difference (k),Notes'
)

DATA_ROWS = [
    ',,,12,0.75,8k easy,"Notes Q1, for Q1 value",6k tempo,"Notes Q2, for Q2 value",40,38,-2,ok',
    ',,,11,0.8,10x400m,"foo, ""bar""",8k progression,,42,abc,,',
    ',,,10,0.85,3x2k @ HMP,,16k long,"hilly, slow",45,,,"cut back ""a bit"""',
    ',,,0,0,race day,,,,,,,',
    ',,,,,,,,,,,,',
]


def build_document(header: str = RAW_HEADER, rows=None, newline: str = "\n") -> str:
    """Assemble a full export: preamble, header line, data rows."""
    rows = DATA_ROWS if rows is None else rows
    return newline.join(PREAMBLE + [header] + list(rows))


@pytest.fixture
def raw_document():
    """Export with the unquoted header labels, as written by the spreadsheet."""
    return build_document()


@pytest.fixture
def quoted_document():
    """Same export with the header labels already quoted."""
    return build_document(header=QUOTED_HEADER)


@pytest.fixture
def crlf_document():
    """Export saved with Windows line endings."""
    return build_document(newline="\r\n")
