"""Birth date derivations.

Two derivations coexist on purpose. The entity derivation gives an animal a
notional exact birthday for its own profile: it accounts for whether this year's
birthday has passed and picks a random day. The report derivation pins each
season to a fixed anchor day so the population report is reproducible.
"""

import random
from datetime import date

from zookeeper.species.models import BirthSeason

# Calendar month standing in for each season in entity birth dates
SEASON_MONTHS: dict[BirthSeason, int] = {
    BirthSeason.SPRING: 3,
    BirthSeason.SUMMER: 6,
    BirthSeason.FALL: 9,
    BirthSeason.WINTER: 12,
}
DEFAULT_SEASON_MONTH = 1

# Nominal month length used when picking a random birth day
SEASON_DAYS: dict[BirthSeason, int] = {
    BirthSeason.SPRING: 30,
    BirthSeason.SUMMER: 31,
    BirthSeason.FALL: 30,
    BirthSeason.WINTER: 31,
}

# Month-day anchors used in the population report
REPORT_ANCHORS: dict[BirthSeason, str] = {
    BirthSeason.SPRING: "04-01",
    BirthSeason.SUMMER: "07-01",
    BirthSeason.FALL: "10-01",
    BirthSeason.WINTER: "01-01",
}
DEFAULT_REPORT_ANCHOR = "06-01"


def get_season_month(season: BirthSeason) -> int:
    return SEASON_MONTHS.get(season, DEFAULT_SEASON_MONTH)


def get_random_day_in_season(season: BirthSeason, rng: random.Random) -> int:
    """Pick a birth day uniformly within the season's month, or 1 if unknown."""
    days = SEASON_DAYS.get(season)
    if not days:
        return 1
    return max(1, rng.randint(1, days))


def derive_entity_birth_date(
    age: int, season: BirthSeason, today: date | None = None, rng: random.Random | None = None
) -> str:
    """Derive a notional exact birth date as ``YYYY-M-D`` without zero padding.

    If the season's month has not been reached yet this year, the animal has not
    had its birthday and was born ``age + 1`` years ago.

    Args:
        age: Age in years
        season: Birth season
        today: Reference date (defaults to the local current date)
        rng: Random source for the day (defaults to a fresh entropy-seeded generator)
    """
    if today is None:
        today = date.today()
    month = get_season_month(season)
    year = today.year
    if today.month < month:
        year -= age + 1
    else:
        year -= age
    day = get_random_day_in_season(season, rng or random.Random())
    return f"{year}-{month}-{day}"


def derive_report_birth_date(age: int, season: BirthSeason, current_year: int) -> str:
    """Derive the report birth date as ``YYYY-MM-DD`` from the season anchor."""
    anchor = REPORT_ANCHORS.get(season, DEFAULT_REPORT_ANCHOR)
    return f"{current_year - age}-{anchor}"
