"""
Unit tests for training plan serialization
"""
from dataclasses import replace

import pytest

from trainingplan.models import TrainingWeek, Workout
from trainingplan.parsing.csv_parser import parse_training_plan
from trainingplan.parsing.csv_writer import convert_to_csv, week_to_row
from trainingplan.parsing.header import header_lines_of

from conftest import PREAMBLE, QUOTED_HEADER, RAW_HEADER


@pytest.mark.unit
class TestWeekToRow:
    """Test week_to_row function."""

    def test_column_order(self):
        """Test fields are written in the export's column order."""
        week = TrainingWeek(
            weeks_until_race=12,
            fraction_of_peak=0.75,
            q1=Workout("8k easy", notes="Notes Q1, for Q1 value"),
            q2=Workout("6k tempo", notes="steady"),
            weekly_easy_mileage=40,
            actual_mileage=38,
            difference=-2,
            notes="ok",
        )

        assert week_to_row(week) == (
            ',,,12,0.75,8k easy,"Notes Q1, for Q1 value",6k tempo,steady,40,38,-2,ok'
        )

    def test_missing_values_are_blank(self):
        """Test None values become empty fields."""
        week = TrainingWeek(weeks_until_race=3, q1=Workout("strides"))

        assert week_to_row(week) == ",,,3,0,strides,,,,0,,,"

    def test_zero_mileage_is_written(self):
        """Test zero is written, unlike None."""
        week = TrainingWeek(weeks_until_race=3, actual_mileage=0, difference=0.0)

        assert week_to_row(week).split(",")[10:12] == ["0", "0"]

    def test_quotes_escaped(self):
        """Test quotes and line breaks in text are escaped."""
        week = TrainingWeek(q1=Workout("a", notes='foo, "bar"'), notes="line\nbreak")
        fields = week_to_row(week)

        assert '"foo, ""bar"""' in fields
        assert fields.endswith('"line\nbreak"')


@pytest.mark.unit
class TestConvertToCsv:
    """Test convert_to_csv function."""

    def test_header_is_sanitized(self):
        """Test the raw header line gets its labels quoted."""
        output = convert_to_csv([], PREAMBLE + [RAW_HEADER])
        lines = output.split("\n")

        assert lines[:9] == PREAMBLE
        assert lines[9] == QUOTED_HEADER

    def test_presanitized_header_unchanged(self):
        """Test an already quoted header is written as is."""
        output = convert_to_csv([], PREAMBLE + [QUOTED_HEADER])

        assert output.split("\n")[9] == QUOTED_HEADER

    def test_header_only_output(self):
        """Test no weeks gives the header plus a line break."""
        assert convert_to_csv([], ["a", "b"]) == "a\nb\n"

    def test_empty_inputs(self):
        """Test empty inputs are accepted."""
        assert convert_to_csv([], []) == "\n"

    def test_one_line_per_week(self):
        """Test each week is written on its own line."""
        weeks = [TrainingWeek(weeks_until_race=n, q1=Workout("run")) for n in (3, 2, 1)]
        output = convert_to_csv(weeks, ["header"])

        assert output.split("\n") == [
            "header",
            ",,,3,0,run,,,,0,,,",
            ",,,2,0,run,,,,0,,,",
            ",,,1,0,run,,,,0,,,",
        ]


@pytest.mark.unit
class TestRoundTrip:
    """Test parse -> serialize -> parse gives the same records."""

    def test_round_trip(self, raw_document):
        """Test records survive a full round trip."""
        weeks = parse_training_plan(raw_document)
        output = convert_to_csv(weeks, header_lines_of(raw_document))

        assert parse_training_plan(output) == weeks

    def test_round_trip_is_stable(self, raw_document):
        """Test serializing twice gives the same text."""
        header_lines = header_lines_of(raw_document)
        first = convert_to_csv(parse_training_plan(raw_document), header_lines)
        second = convert_to_csv(parse_training_plan(first), header_lines_of(first))

        assert first == second

    def test_round_trip_crlf(self, crlf_document):
        """Test documents with Windows line endings round trip."""
        weeks = parse_training_plan(crlf_document)
        output = convert_to_csv(weeks, header_lines_of(crlf_document))

        assert parse_training_plan(output) == weeks

    @pytest.mark.parametrize("notes", [
        'foo, "bar"',
        "two\nlines",
        '"',
        "trailing comma,",
    ])
    def test_edited_notes_round_trip(self, raw_document, notes):
        """Test edited text with special characters comes back unchanged."""
        weeks = parse_training_plan(raw_document)
        edited = [replace(w, q1=replace(w.q1, notes=notes)) for w in weeks]
        output = convert_to_csv(edited, header_lines_of(raw_document))

        assert [w.q1.notes for w in parse_training_plan(output)] == [notes] * len(weeks)
