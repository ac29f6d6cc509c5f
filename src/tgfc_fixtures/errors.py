"""Error hierarchy for fixture ingestion.

Separates per-record problems the pipeline skips over (recoverable) from
problems that abort the whole run before any output is written (fatal).

Example usage:
    try:
        record = validate_record(row)
    except MalformedRecordError:
        log.warning("unexpected_record", record=row)
    except IncompleteRecordError:
        pass
"""


class FixturesError(Exception):
    """Base exception for all fixture pipeline errors."""

    pass


class RecoverableError(FixturesError):
    """Problem confined to a single record; the record is skipped.

    Examples: too few fields, a blank placeholder row.
    """

    pass


class MalformedRecordError(RecoverableError):
    """Record has fewer fields than venue, competition, date, time, opponent.

    Reported as a warning, then skipped.
    """

    def __init__(self, record, line: int | None = None) -> None:
        self.record = list(record)
        self.line = line
        super().__init__(f"Unexpected record {self.record!r}")


class IncompleteRecordError(RecoverableError):
    """Record has all five fields but at least one is empty.

    Treated as an intentionally blank row and skipped silently.
    """

    pass


class FatalError(FixturesError):
    """Failure that aborts the whole run. No partial output is produced."""

    pass


class FixtureParseError(FatalError):
    """Date or time text does not match the expected format."""

    pass


class ClassificationError(FatalError):
    """Opponent text produced no words to classify."""

    pass


class SourceReadError(FatalError):
    """CSV input or template file could not be read."""

    pass


class OutputWriteError(FatalError):
    """Rendered schedule could not be written to the output path."""

    pass


class RenderError(FatalError):
    """Template failed to compile or evaluate against the schedule context."""

    pass
