"""Record validation: field presence checks on raw CSV rows."""

from collections.abc import Sequence

from tgfc_fixtures.errors import IncompleteRecordError, MalformedRecordError
from tgfc_fixtures.models import ValidatedRecord

# venue, competition, date, time, opponent
REQUIRED_FIELD_COUNT = 5


def validate_record(record: Sequence[str], line: int | None = None) -> ValidatedRecord:
    """Check a raw row and return its first five fields as a ValidatedRecord.

    Fields beyond the fifth are ignored. Only presence is checked; the
    content of the date and time fields is validated later.

    Args:
        record: Positional text fields of one CSV row.
        line: Source line number, carried through for diagnostics.

    Raises:
        MalformedRecordError: If the row has fewer than five fields.
        IncompleteRecordError: If any of the five fields is an empty string.
    """
    if len(record) < REQUIRED_FIELD_COUNT:
        raise MalformedRecordError(record, line=line)

    venue, competition, date_text, time_text, opponent = record[:REQUIRED_FIELD_COUNT]

    if not (venue and competition and date_text and time_text and opponent):
        raise IncompleteRecordError(f"Blank field in record at line {line}")

    return ValidatedRecord(
        venue=venue,
        competition=competition,
        date_text=date_text,
        time_text=time_text,
        opponent=opponent,
        line=line,
    )
