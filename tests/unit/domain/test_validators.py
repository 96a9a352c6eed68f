# nosec B101

from datetime import date, timedelta

import pytest

from exchangerate.domain.exceptions import (
    InvalidCodeError,
    InvalidDateError,
    InvalidDateFormatError,
    InvalidTimeFrameError,
    TimeframeExceededError,
)
from exchangerate.domain.validators import (
    validate_code,
    validate_date,
    validate_symbols,
    validate_time_frame,
)


# ============================================================================
# TEST: validate_code()
# ============================================================================

@pytest.mark.parametrize("code", ["USD", "EUR", "usd", "123", "A1!", "   "])
def test_validate_code_accepts_any_three_characters(code):
    assert validate_code(code) == code


@pytest.mark.parametrize("code", ["", "US", "USDT", "UNKNOWN", "B"])
def test_validate_code_rejects_other_lengths(code):
    with pytest.raises(InvalidCodeError) as exc_info:
        validate_code(code)

    assert exc_info.value.code == code


def test_validate_code_rejects_non_string():
    with pytest.raises(InvalidCodeError):
        validate_code(None)


def test_validate_symbols_returns_codes_in_order():
    assert validate_symbols(["EUR", "JPY", "USD"]) == ["EUR", "JPY", "USD"]


def test_validate_symbols_fails_on_first_invalid_entry():
    with pytest.raises(InvalidCodeError) as exc_info:
        validate_symbols(["EUR", "EURO", "X"])

    assert exc_info.value.code == "EURO"


def test_validate_symbols_empty_list_is_valid():
    assert validate_symbols([]) == []


# ============================================================================
# TEST: validate_date()
# ============================================================================

@pytest.mark.parametrize("value", ["1999-01-03", "1999-01-04", "2012-12-12", "2024-02-29"])
def test_validate_date_accepts_well_formed_dates(value):
    assert validate_date(value) == value


def test_validate_date_accepts_date_objects():
    assert validate_date(date(2012, 12, 12)) == "2012-12-12"


@pytest.mark.parametrize("value", ["1999-01-02", "1998-12-31", "1970-01-01", "0001-01-01"])
def test_validate_date_rejects_dates_before_oldest(value):
    with pytest.raises(InvalidDateError):
        validate_date(value)


@pytest.mark.parametrize(
    "value",
    [
        "2012/12/12",
        "12-12-2012",
        "2012-13-01",
        "2012-00-10",
        "2012-12-40",
        "2012-1-1",
        "2012-12-12T00:00:00",
        "",
    ],
)
def test_validate_date_rejects_bad_format(value):
    with pytest.raises(InvalidDateFormatError):
        validate_date(value)


@pytest.mark.parametrize("value", ["2023-02-30", "2012-12-00", "2012-04-31"])
def test_validate_date_rejects_impossible_calendar_days(value):
    with pytest.raises(InvalidDateFormatError):
        validate_date(value)


# ============================================================================
# TEST: validate_time_frame()
# ============================================================================

def test_validate_time_frame_accepts_ordered_pair():
    assert validate_time_frame("2012-12-10", "2012-12-12") == ("2012-12-10", "2012-12-12")


def test_validate_time_frame_accepts_same_day():
    assert validate_time_frame("2012-12-10", "2012-12-10") == ("2012-12-10", "2012-12-10")


def test_validate_time_frame_rejects_reversed_pair():
    with pytest.raises(InvalidTimeFrameError):
        validate_time_frame("2012-12-12", "2012-12-10")


@pytest.mark.parametrize("days", [1, 30, 200, 364])
def test_validate_time_frame_accepts_spans_under_a_year(days):
    start = date(2020, 1, 1)
    validate_time_frame(start, start + timedelta(days=days))


@pytest.mark.parametrize("days", [365, 366, 1000])
def test_validate_time_frame_rejects_spans_of_a_year_or_more(days):
    start = date(2020, 1, 1)
    with pytest.raises(TimeframeExceededError):
        validate_time_frame(start, start + timedelta(days=days))


def test_validate_time_frame_checks_format_of_both_dates():
    with pytest.raises(InvalidDateFormatError):
        validate_time_frame("2012-12-10", "2012/12/12")
