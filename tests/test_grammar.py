"""Tests for the input and format grammars."""

import pytest

from clocktime.grammar import (
    FormatSpec,
    ParsedTime,
    Period,
    is_valid,
    parse_format,
    parse_literal,
    parse_period,
    sanitize,
)


# ──── sanitize ────


class TestSanitize:
    def test_strips_all_whitespace(self):
        assert sanitize(" 7 : 30\tp m\n") == "7:30pm"

    def test_coerces_numbers(self):
        assert sanitize(1234) == "1234"


# ──── parse_literal ────


class TestParseLiteral:
    def test_bare_hour(self):
        assert parse_literal("7") == ParsedTime(7, 0, Period.UNKNOWN)

    def test_numeric_input(self):
        assert parse_literal(7) == ParsedTime(7, 0, Period.UNKNOWN)

    def test_numeric_hour_minutes(self):
        assert parse_literal(1234) == ParsedTime(12, 34, Period.UNKNOWN)

    def test_three_digit_number(self):
        assert parse_literal("415") == ParsedTime(4, 15, Period.UNKNOWN)

    def test_colon_separator(self):
        assert parse_literal("7:30") == ParsedTime(7, 30, Period.UNKNOWN)

    def test_dot_separator(self):
        assert parse_literal("12.14") == ParsedTime(12, 14, Period.UNKNOWN)

    def test_leading_zero(self):
        assert parse_literal("07:05") == ParsedTime(7, 5, Period.UNKNOWN)

    def test_separator_without_minutes(self):
        assert parse_literal("7:") == ParsedTime(7, 0, Period.UNKNOWN)

    @pytest.mark.parametrize("token,period", [
        ("am", Period.AM),
        ("AM", Period.AM),
        ("a", Period.AM),
        ("a.m.", Period.AM),
        ("pm", Period.PM),
        ("P", Period.PM),
        ("p.m", Period.PM),
        ("Pm.", Period.PM),
    ])
    def test_period_tokens(self, token, period):
        assert parse_literal(f"9:05 {token}") == ParsedTime(9, 5, period)

    def test_whitespace_ignored(self):
        assert parse_literal("  11 : 59  p m ") == ParsedTime(11, 59, Period.PM)

    @pytest.mark.parametrize("raw", [
        "", "0", "00", "13", "24:00", "7:60", "7:5", "7:305", "seven",
        "7pmx", "7 o'clock", "x7", "7..30", "7:30 pm pm", "7:30 b",
    ])
    def test_rejected(self, raw):
        assert parse_literal(raw) is None


# ──── is_valid ────


class TestIsValid:
    @pytest.mark.parametrize("raw", ["1", "12", "1:00", "12.59", "09:15am", "3 P.M.", 930])
    def test_accepts(self, raw):
        assert is_valid(raw) is True

    @pytest.mark.parametrize("raw", ["a:30", "0:30", "13:00", "10:61", "", None])
    def test_rejects(self, raw):
        assert is_valid(raw) is False


# ──── parse_period ────


class TestParsePeriod:
    def test_empty_is_unknown(self):
        assert parse_period("") is Period.UNKNOWN
        assert parse_period(None) is Period.UNKNOWN

    def test_passes_period_through(self):
        assert parse_period(Period.PM) is Period.PM

    def test_case_insensitive(self):
        assert parse_period("P.M.") is Period.PM
        assert parse_period("A") is Period.AM

    def test_non_period_is_unknown(self):
        assert parse_period("noon") is Period.UNKNOWN


# ──── parse_format ────


class TestParseFormat:
    def test_default_format(self):
        assert parse_format("h:mm am") == FormatSpec(
            hour_width=1, separator=":", show_minutes=True, period_space=True, period_token="am"
        )

    def test_bare_hour(self):
        assert parse_format("h") == FormatSpec(1, None, False, False, None)

    def test_padded_hour_with_dotted_period(self):
        spec = parse_format("hh:mm a.m.")
        assert spec.hour_width == 2
        assert spec.period_token == "a.m."

    def test_separator_without_minutes(self):
        spec = parse_format("h.")
        assert spec.separator == "."
        assert spec.show_minutes is False

    def test_period_without_space(self):
        spec = parse_format("hpm")
        assert spec.period_space is False
        assert spec.period_token == "pm"

    def test_uppercase_tokens(self):
        spec = parse_format("HH:MM A")
        assert spec.hour_width == 2
        assert spec.show_minutes is True
        assert spec.period_token == "A"

    @pytest.mark.parametrize("fmt", [
        "", "mm:h", "hhh", "h:mm x", "h-mm", "h:mm  am", "h:m", "h:mm am!", "hh:mm:ss",
    ])
    def test_rejected(self, fmt):
        assert parse_format(fmt) is None
