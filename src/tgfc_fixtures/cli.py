"""Render a fixtures CSV into a schedule document through a template.

Run with: tgfc-fixtures fixtures.csv template.html schedule.html
Header:   tgfc-fixtures fixtures.csv template.html schedule.html --header
JSON log: tgfc-fixtures fixtures.csv template.html schedule.html --log-json

CSV columns (positional): venue, competition, date (DD/MM/YYYY),
time (H:MM:SS AM|PM), opponent. Extra columns are ignored.

Exit codes:
  0 = success (output file written)
  1 = fatal error (bad date/time, unreadable input, template failure,
      invalid TGFC_* setting);
      the output file is not written
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from tgfc_fixtures import __version__
from tgfc_fixtures.config import get_config
from tgfc_fixtures.errors import FixturesError, OutputWriteError
from tgfc_fixtures.logging import bind_run_context, get_logger, setup_logging
from tgfc_fixtures.pipeline import build_context, build_locations
from tgfc_fixtures.reader import read_records
from tgfc_fixtures.render import load_template, render_schedule

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        prog="tgfc-fixtures",
        description="Render a fixtures CSV into a schedule using a template.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("csv_path", type=Path, help="Fixtures CSV file.")
    parser.add_argument("template_path", type=Path, help="Jinja2 template file.")
    parser.add_argument("output_path", type=Path, help="Rendered output file.")
    parser.add_argument(
        "--header",
        action="store_true",
        default=None,
        help="Skip the first CSV row as a header row.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Output logs as JSON lines.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default from TGFC_LOG_LEVEL, else INFO).",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(args: argparse.Namespace) -> None:
    """Load inputs, build the schedule and write the rendered output.

    The output file is only written after rendering succeeds.

    Raises:
        FixturesError: On any fatal pipeline error.
    """
    config = get_config()
    has_header = config.csv_has_header if args.header is None else args.header

    template_text = load_template(args.template_path, encoding=config.input_encoding)
    records = read_records(
        args.csv_path,
        encoding=config.input_encoding,
        delimiter=config.csv_delimiter,
        has_header=has_header,
    )

    locations = build_locations(records, numbered=True)
    output = render_schedule(
        template_text,
        build_context(locations),
        autoescape=config.template_autoescape,
    )

    output_path: Path = args.output_path
    try:
        output_path.write_text(output, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Unable to write file {output_path}: {e}") from e

    log.info(
        "schedule_written",
        path=str(output_path),
        locations=len(locations),
        fixtures=sum(len(d.fixtures) for loc in locations for d in loc.days),
    )


def run(argv: list[str] | None = None) -> int:
    """Console entry point. Returns the process exit code."""
    args = _parse_args(argv)
    try:
        config = get_config()
    except ValidationError as e:
        setup_logging(log_level=args.log_level or "INFO")
        log.error("run_aborted", error=str(e), error_type="ConfigError")
        return 1

    setup_logging(
        json_output=config.log_json if args.log_json is None else args.log_json,
        log_level=args.log_level or config.log_level,
    )
    bind_run_context(version=__version__)
    log.info("tgfc_fixtures_started", csv=str(args.csv_path), template=str(args.template_path))

    try:
        main(args)
    except FixturesError as e:
        log.error("run_aborted", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
