"""Unit tests for the field transform library."""

import csv
import io
from datetime import date
from decimal import Decimal

import pytest

from ui19export.sdk.transforms import (
    escape_delimited,
    first_name_from_initials,
    format_currency_2dp,
    format_date_compact,
    format_date_dmy,
    format_date_iso,
    format_date_mdy,
    format_date_short_dmy,
    format_hours,
    format_hours_integer,
    optional_code,
    optional_date,
    pad_or_truncate,
)


class TestDateFormats:
    """All notations for 2026-01-15."""

    d = date(2026, 1, 15)

    def test_iso(self):
        assert format_date_iso(self.d) == "2026-01-15"

    def test_dmy(self):
        assert format_date_dmy(self.d) == "15/01/2026"

    def test_mdy(self):
        assert format_date_mdy(self.d) == "01/15/2026"

    def test_compact(self):
        assert format_date_compact(self.d) == "20260115"

    def test_short_dmy(self):
        assert format_date_short_dmy(self.d) == "15/01/26"

    def test_optional_date_absent_is_empty(self):
        assert optional_date(None, format_date_iso) == ""

    def test_optional_date_present(self):
        assert optional_date(self.d, format_date_dmy) == "15/01/2026"

    def test_optional_code(self):
        assert optional_code(None) == ""
        assert optional_code(11) == "11"


class TestCurrency:

    def test_two_decimals(self):
        assert format_currency_2dp(Decimal("18500")) == "18500.00"

    def test_no_thousands_separator(self):
        assert format_currency_2dp(Decimal("1234567.8")) == "1234567.80"

    def test_rounds_half_up(self):
        assert format_currency_2dp(Decimal("10.005")) == "10.01"
        assert format_currency_2dp(Decimal("10.004")) == "10.00"

    def test_float_input_uses_shortest_repr(self):
        """2.675 as a float is 2.67499...; the string form rounds to 2.68."""
        assert format_currency_2dp(2.675) == "2.68"

    def test_zero(self):
        assert format_currency_2dp(0) == "0.00"

    def test_negative_not_special_cased(self):
        assert format_currency_2dp(Decimal("-5")) == "-5.00"


class TestHours:

    def test_whole_hours_have_no_decimal_point(self):
        assert format_hours(Decimal("160")) == "160"
        assert format_hours(Decimal("160.00")) == "160"

    def test_fractional_hours_trimmed(self):
        assert format_hours(Decimal("87.50")) == "87.5"

    def test_zero(self):
        assert format_hours(Decimal("0.00")) == "0"

    def test_integer_hours_round_half_up(self):
        assert format_hours_integer(Decimal("87.5")) == "88"
        assert format_hours_integer(Decimal("87.49")) == "87"
        assert format_hours_integer(160) == "160"


class TestPadOrTruncate:

    def test_left_align_pads_right(self):
        assert pad_or_truncate("Li", 5) == "Li   "

    def test_right_align_pads_left(self):
        assert pad_or_truncate("12.50", 8, align="right") == "   12.50"

    def test_exact_width_unchanged(self):
        assert pad_or_truncate("ABCDE", 5) == "ABCDE"

    def test_truncates_long_text(self):
        result = pad_or_truncate("Van der Westhuizen-Le", 20)
        assert result == "Van der Westhuizen-L"
        assert len(result) == 20

    def test_right_align_truncation_keeps_leading_chars(self):
        assert pad_or_truncate("1234567890", 4, align="right") == "1234"

    def test_custom_pad_char(self):
        assert pad_or_truncate("7", 3, align="right", pad_char="0") == "007"

    def test_zero_width(self):
        assert pad_or_truncate("anything", 0) == ""
        assert pad_or_truncate("", 0) == ""

    def test_empty_text_is_all_padding(self):
        assert pad_or_truncate("", 8) == " " * 8

    def test_negative_width_rejected(self):
        with pytest.raises(ValueError):
            pad_or_truncate("x", -1)

    def test_unknown_alignment_rejected(self):
        with pytest.raises(ValueError):
            pad_or_truncate("x", 3, align="center")


class TestEscapeDelimited:

    def test_plain_value_unchanged(self):
        assert escape_delimited("Naidoo", ",") == "Naidoo"

    def test_delimiter_triggers_quotes(self):
        assert escape_delimited("Smith, Jr", ",") == '"Smith, Jr"'

    def test_quotes_are_doubled(self):
        assert escape_delimited('O"Brien', ",") == '"O""Brien"'

    def test_newline_triggers_quotes(self):
        assert escape_delimited("line1\nline2", ",") == '"line1\nline2"'

    def test_other_delimiters(self):
        assert escape_delimited("a|b", "|") == '"a|b"'
        assert escape_delimited("a,b", "|") == "a,b"
        assert escape_delimited("a\tb", "\t") == '"a\tb"'

    def test_empty_value(self):
        assert escape_delimited("", ",") == ""

    def test_csv_parser_reconstructs_original(self):
        """Comma, quote and newline together survive a CSV round trip."""
        original = 'van "Wyk",\nSnr'
        line = ",".join(["EMP1", escape_delimited(original, ","), "100.00"])

        rows = list(csv.reader(io.StringIO(line, newline="")))

        assert rows == [["EMP1", original, "100.00"]]


class TestFirstNameFromInitials:

    def test_dotted_initials(self):
        assert first_name_from_initials("J.P.") == "J"

    def test_undotted_initials_kept_whole(self):
        assert first_name_from_initials("JP") == "JP"

    def test_leading_dot_falls_back_to_first_char(self):
        assert first_name_from_initials(".J") == "."

    def test_empty(self):
        assert first_name_from_initials("") == ""
