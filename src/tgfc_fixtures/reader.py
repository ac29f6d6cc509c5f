"""CSV input for the fixture pipeline."""

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path

from tgfc_fixtures.errors import SourceReadError
from tgfc_fixtures.logging import get_logger

log = get_logger(__name__)


def iter_records(
    lines: Iterable[str],
    *,
    delimiter: str = ",",
    has_header: bool = False,
) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, fields) for each non-blank CSV row.

    Rows may have any number of fields; length checks belong to the validator.

    Args:
        lines: Text lines, e.g. an open file.
        delimiter: Field delimiter.
        has_header: If True, the first non-blank row is skipped.
    """
    reader = csv.reader(lines, delimiter=delimiter)
    header_pending = has_header
    for row in reader:
        if not row:
            continue
        if header_pending:
            header_pending = False
            log.debug("csv_header_skipped", header=row)
            continue
        yield reader.line_num, row


def read_records(
    path: str | Path,
    *,
    encoding: str = "utf-8-sig",
    delimiter: str = ",",
    has_header: bool = False,
) -> list[tuple[int, list[str]]]:
    """Read every row of a fixtures CSV file.

    Raises:
        SourceReadError: If the file cannot be opened, decoded or parsed as CSV.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding, newline="") as f:
            records = list(iter_records(f, delimiter=delimiter, has_header=has_header))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise SourceReadError(f"Unable to load file {path}: {e}") from e

    log.info("csv_loaded", path=str(path), rows=len(records))
    return records
