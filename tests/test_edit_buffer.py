"""
Tests for the numeric edit buffers behind the property fields.

Covers:
- Partial input is kept locally and never committed
- Valid input commits as the user types
- External syncs don't rewrite equivalent text
- Blur restores the last valid value
- Angle step range check
"""
import pytest

from utils.edit_buffer import NumericEditBuffer, StepEditBuffer
from utils.number_utils import parse_finite_number, format_number


class TestParsing:

    @pytest.mark.parametrize("text", ["", " ", "-", ".", "1e", "abc", "12abc", "nan", "inf", "-inf"])
    def test_rejected(self, text):
        assert parse_finite_number(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("12", 12), ("-3.5", -3.5), (" 7 ", 7), ("1e2", 100), (".5", 0.5), ("1.", 1),
    ])
    def test_accepted(self, text, expected):
        assert parse_finite_number(text) == expected

    @pytest.mark.parametrize("value,text", [(10.0, "10"), (12.5, "12.5"), (-0.25, "-0.25"), (None, "")])
    def test_format(self, value, text):
        assert format_number(value) == text


class TestNumericEditBuffer:

    def test_partial_input_not_committed(self):
        commits = []
        buffer = NumericEditBuffer(commits.append, 5)
        for text in ["", "-", "-1e"]:
            assert buffer.set_text(text) is None
            assert buffer.text == text
        assert commits == []

    def test_valid_input_commits(self):
        commits = []
        buffer = NumericEditBuffer(commits.append, 5)
        buffer.set_text("-")
        assert buffer.set_text("-12") == -12
        assert commits == [-12]

    def test_sync_keeps_equivalent_text(self):
        buffer = NumericEditBuffer(value=1)
        buffer.set_text("1.0")
        buffer.sync(1.0)
        assert buffer.text == "1.0"

    def test_sync_replaces_different_value(self):
        buffer = NumericEditBuffer(value=1)
        buffer.set_text("1.0")
        buffer.sync(35)
        assert buffer.text == "35"

    def test_sync_none_clears(self):
        buffer = NumericEditBuffer(value=1)
        buffer.sync(None)
        assert buffer.text == ""

    def test_blur_restores_last_value(self):
        buffer = NumericEditBuffer(value=42)
        buffer.set_text("4-")
        assert buffer.blur() == "42"
        assert buffer.text == "42"

    def test_no_callback(self):
        buffer = NumericEditBuffer()
        assert buffer.set_text("3") == 3
        assert buffer.text == "3"


class TestStepEditBuffer:

    @pytest.mark.parametrize("text", ["0", "-1", "90.01", "500"])
    def test_out_of_range_rejected(self, text):
        commits = []
        buffer = StepEditBuffer(commits.append, 0.1)
        assert buffer.set_text(text) is None
        assert commits == []
        assert buffer.value == 0.1

    @pytest.mark.parametrize("text,expected", [("0.5", 0.5), ("90", 90), ("15", 15)])
    def test_in_range_committed(self, text, expected):
        commits = []
        buffer = StepEditBuffer(commits.append, 0.1)
        assert buffer.set_text(text) == expected
        assert commits == [expected]
        assert buffer.value == expected

    def test_blur_after_rejected_input(self):
        buffer = StepEditBuffer(value=1)
        buffer.set_text("2")
        buffer.set_text("200")
        assert buffer.blur() == "2"
