"""Tests for date/time parsing and display formatting."""

from datetime import date, time

import pytest

from tgfc_fixtures.errors import FatalError, FixtureParseError
from tgfc_fixtures.temporal import format_date, format_time, parse_date, parse_time


def test_parse_date_day_month_year():
    assert parse_date("01/05/2024") == date(2024, 5, 1)
    assert parse_date("29/02/2024") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "text",
    ["31/13/2024", "30/02/2024", "1/5/2024", "01-05-2024", "2024/05/01", "01/05/24", ""],
)
def test_parse_date_rejects_bad_text(text):
    with pytest.raises(FixtureParseError):
        parse_date(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2:00:00 PM", time(14, 0, 0)),
        ("02:00:00 PM", time(14, 0, 0)),
        ("10:00:00 AM", time(10, 0, 0)),
        ("12:00:00 AM", time(0, 0, 0)),
        ("12:30:15 PM", time(12, 30, 15)),
    ],
)
def test_parse_time_twelve_hour_clock(text, expected):
    assert parse_time(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "14:00:00",
        "13:00:00 PM",
        "0:30:00 AM",
        "2:00 PM",
        "2:5:7 PM",
        "2:00:00 pm",
        "2:00:00     PM",
        "2:60:00 PM",
        " 2:00:00 PM",
        "two o'clock",
        "",
    ],
)
def test_parse_time_rejects_bad_text(text):
    with pytest.raises(FixtureParseError) as exc_info:
        parse_time(text)
    assert isinstance(exc_info.value, FatalError)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (time(14, 30, 59), "2:30 PM"),
        (time(10, 0), "10:00 AM"),
        (time(9, 5), "9:05 AM"),
        (time(0, 0), "12:00 AM"),
        (time(12, 0), "12:00 PM"),
    ],
)
def test_format_time_drops_seconds_and_padding(value, expected):
    assert format_time(value) == expected


def test_format_date_computes_weekday():
    assert format_date(date(2024, 5, 1)) == "Wednesday 1 May"
    assert format_date(date(2025, 4, 12)) == "Saturday 12 April"


def test_canonical_values_order_like_the_calendar():
    dates = [parse_date(t) for t in ["01/01/2025", "31/12/2024", "15/06/2024"]]
    times = [parse_time(t) for t in ["1:00:00 PM", "11:59:59 AM", "12:00:00 AM"]]

    assert sorted(dates) == [date(2024, 6, 15), date(2024, 12, 31), date(2025, 1, 1)]
    assert sorted(times) == [time(0, 0), time(11, 59, 59), time(13, 0)]


def test_format_date_names_are_english_for_every_weekday_and_month():
    week = [format_date(date(2024, 4, day)) for day in range(1, 8)]
    months = [format_date(date(2024, month, 1)).split()[-1] for month in range(1, 13)]

    assert week[0] == "Monday 1 April"
    assert week[-1] == "Sunday 7 April"
    assert months == [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]
