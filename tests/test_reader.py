"""Tests for CSV input."""

import pytest

from tgfc_fixtures.errors import SourceReadError
from tgfc_fixtures.pipeline import build_locations
from tgfc_fixtures.reader import iter_records, read_records


def test_rows_of_any_length_with_line_numbers():
    lines = [
        "Park A,League,01/05/2024,2:00:00 PM,North Brisbane\n",
        "\n",
        "Park A,League\n",
        '"Oval, North",Cup,02/05/2024,9:00:00 AM,Souths,extra\n',
    ]

    records = list(iter_records(lines))

    assert records == [
        (1, ["Park A", "League", "01/05/2024", "2:00:00 PM", "North Brisbane"]),
        (3, ["Park A", "League"]),
        (4, ["Oval, North", "Cup", "02/05/2024", "9:00:00 AM", "Souths", "extra"]),
    ]


def test_header_row_skipped_when_configured():
    lines = ["venue,comp,date,time,opponent\n", "Oval,Cup,02/05/2024,9:00:00 AM,Souths\n"]

    assert [row for _, row in iter_records(lines, has_header=True)] == [
        ["Oval", "Cup", "02/05/2024", "9:00:00 AM", "Souths"]
    ]
    assert len(list(iter_records(lines))) == 2


def test_custom_delimiter():
    records = list(iter_records(["Oval;Cup;02/05/2024;9:00:00 AM;Souths\n"], delimiter=";"))

    assert records[0][1][0] == "Oval"
    assert len(records[0][1]) == 5


def test_read_records_from_file(tmp_path):
    path = tmp_path / "fixtures.csv"
    path.write_text("Oval,Cup,02/05/2024,9:00:00 AM,Souths\n", encoding="utf-8")

    assert read_records(path) == [(1, ["Oval", "Cup", "02/05/2024", "9:00:00 AM", "Souths"])]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(SourceReadError):
        read_records(tmp_path / "missing.csv")


def test_byte_order_mark_is_dropped(tmp_path):
    path = tmp_path / "excel.csv"
    path.write_bytes(
        b"\xef\xbb\xbfPark A,League,01/05/2024,2:00:00 PM,North Brisbane\r\n"
        b"Park A,League,01/05/2024,10:00:00 AM,Western Suburbs\r\n"
    )

    records = read_records(path)
    locations = build_locations(records, numbered=True)

    assert records[0][1][0] == "Park A"
    assert [loc.location for loc in locations] == ["Park A"]
    assert len(locations[0].days[0].fixtures) == 2
