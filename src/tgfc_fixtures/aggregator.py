"""Groups normalized fixtures into the Location -> Day -> Fixture schedule.

Intermediate grouping uses plain dicts keyed by venue and date. Every visible
ordering comes from the explicit sorts below, applied once all fixtures are
known:

  locations  by venue name (code point order)
  days       by calendar date
  fixtures   by time of day, ties keep input order
"""

from collections.abc import Iterable
from datetime import date

from tgfc_fixtures.logging import get_logger
from tgfc_fixtures.models import Day, Fixture, Location
from tgfc_fixtures.temporal import format_date

log = get_logger(__name__)


def aggregate_fixtures(
    entries: Iterable[tuple[str, date, Fixture]],
) -> list[Location]:
    """Group (venue, date, fixture) entries by venue, then by date.

    Args:
        entries: Each fixture tagged with its source venue and parsed date.

    Returns:
        Locations sorted by name, each with days sorted by date, each with
        fixtures sorted by time.
    """
    # venue -> date -> fixtures in input order
    fixture_map: dict[str, dict[date, list[Fixture]]] = {}

    for venue, fixture_date, fixture in entries:
        fixture_map.setdefault(venue, {}).setdefault(fixture_date, []).append(fixture)

    locations: list[Location] = []
    for venue, days_by_date in fixture_map.items():
        days = [
            Day(
                display_date=format_date(fixture_date),
                # sorted() is stable, so equal times keep their input order
                fixtures=sorted(fixtures, key=lambda f: f.sort_time),
                sort_date=fixture_date,
            )
            for fixture_date, fixtures in days_by_date.items()
        ]
        days.sort(key=lambda d: d.sort_date)
        locations.append(Location(location=venue, days=days))

    locations.sort(key=lambda loc: loc.location)

    log.info(
        "fixtures_aggregated",
        locations=len(locations),
        days=sum(len(loc.days) for loc in locations),
    )
    return locations
