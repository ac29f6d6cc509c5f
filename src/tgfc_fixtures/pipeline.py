"""Fixture ingestion pipeline: validate, normalize, classify, aggregate.

A run either completes or raises a FatalError; there is no partial result.
Per-record problems (short rows, blank rows) are skipped and counted.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from tgfc_fixtures.aggregator import aggregate_fixtures
from tgfc_fixtures.classifier import classify_opponent
from tgfc_fixtures.errors import IncompleteRecordError, MalformedRecordError
from tgfc_fixtures.logging import get_logger
from tgfc_fixtures.models import Fixture, Location, ValidatedRecord
from tgfc_fixtures.temporal import format_time, parse_date, parse_time
from tgfc_fixtures.validator import validate_record

log = get_logger(__name__)


class IngestResult(BaseModel):
    """Fixtures that passed validation, with counts of skipped rows."""

    entries: list[tuple[str, date, Fixture]] = Field(default_factory=list)
    malformed: int = 0
    incomplete: int = 0


def build_fixture(record: ValidatedRecord) -> tuple[str, date, Fixture]:
    """Normalize and classify one validated record.

    Returns:
        (venue, parsed date, fixture) ready for aggregation.

    Raises:
        FixtureParseError: If the date or time text is malformed.
    """
    fixture_date = parse_date(record.date_text)
    fixture_time = parse_time(record.time_text)

    fixture = Fixture(
        display_time=format_time(fixture_time),
        competition=record.competition,
        opponent=record.opponent,
        sort_time=fixture_time,
        class_=classify_opponent(record.opponent),
    )
    return record.venue, fixture_date, fixture


def ingest_records(
    records: Iterable[Sequence[str]] | Iterable[tuple[int, Sequence[str]]],
    *,
    numbered: bool = False,
) -> IngestResult:
    """Validate and normalize every record.

    Args:
        records: Raw rows, or (line_number, row) pairs when ``numbered``.
        numbered: True for the reader's (line_number, row) pairs; bare rows
            are numbered from 1 in input order.

    Raises:
        FatalError: On the first unparsable date/time; nothing is returned.
    """
    result = IngestResult()
    pairs = records if numbered else enumerate(records, start=1)

    for line, row in pairs:
        try:
            record = validate_record(row, line=line)
        except MalformedRecordError as e:
            log.warning("unexpected_record", line=line, record=e.record)
            result.malformed += 1
            continue
        except IncompleteRecordError:
            log.debug("blank_record_skipped", line=line)
            result.incomplete += 1
            continue

        venue, fixture_date, fixture = build_fixture(record)
        log.info(
            "fixture_found",
            line=line,
            field=venue,
            comp=record.competition,
            opponent=record.opponent,
            date=record.date_text,
            time=record.time_text,
        )
        result.entries.append((venue, fixture_date, fixture))

    log.info(
        "records_ingested",
        fixtures=len(result.entries),
        malformed=result.malformed,
        incomplete=result.incomplete,
    )
    return result


def build_locations(
    records: Iterable[Sequence[str]] | Iterable[tuple[int, Sequence[str]]],
    *,
    numbered: bool = False,
) -> list[Location]:
    """Run the full pipeline from raw rows to the ordered Location list."""
    return aggregate_fixtures(ingest_records(records, numbered=numbered).entries)


def build_context(locations: list[Location]) -> dict[str, Any]:
    """Expose locations to templates as plain dicts under ``locations``.

    Fields are dumped by alias, so a fixture's class key reads as ``class``.
    """
    return {"locations": [loc.model_dump(by_alias=True) for loc in locations]}
