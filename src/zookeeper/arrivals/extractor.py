"""Extraction of arrival records from free-text lines.

Arrival lines follow the shape::

    4 year old female hyena, born in spring, tan color, 70 pounds, from Friguia Park, Tunisia

Lines that do not follow it are commentary and are skipped.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from zookeeper.arrivals.models import AnimalRecord
from zookeeper.exceptions import MalformedNumericFieldError
from zookeeper.species.parser import parse_season_token, parse_species_token

logger = logging.getLogger(__name__)

ARRIVAL_PATTERN = re.compile(
    r"(?P<age>\d+) year old (?P<gender>\w+) (?P<species>hyena|lion|bear|tiger), "
    r"born in (?P<season>spring|summer|fall|winter|unknown), "
    r"(?P<color>[A-Za-z]+(?: [A-Za-z]+)*) color, "
    r"(?P<weight>[\d.]+) pounds, "
    r"from (?P<origin>.+)"
)


def _parse_int(field: str, value: str, line: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise MalformedNumericFieldError(field, value, line) from e


def _parse_float(field: str, value: str, line: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise MalformedNumericFieldError(field, value, line) from e


def parse_line(line: str) -> AnimalRecord | None:
    """Parse one arrival line.

    Args:
        line: Raw line, with or without its trailing newline

    Returns:
        AnimalRecord with name and intake number unset, or None if the line does
        not describe an arrival

    Raises:
        MalformedNumericFieldError: If the line matched but age or weight does not parse
    """
    line = line.rstrip("\r\n")
    match = ARRIVAL_PATTERN.search(line)
    if match is None:
        return None

    species = parse_species_token(match["species"])
    if species is None:
        return None

    return AnimalRecord(
        species=species,
        age=_parse_int("age", match["age"], line),
        gender=match["gender"],
        birth_season=parse_season_token(match["season"]),
        color=match["color"],
        weight=_parse_float("weight", match["weight"], line),
        origin=match["origin"],
    )


def extract_records(lines: Iterable[str]) -> Iterator[AnimalRecord]:
    """Yield a record for every arrival line, in input order.

    Non-matching lines are skipped silently. Lines with malformed numbers are
    dropped with a warning and extraction carries on.
    """
    for line in lines:
        logger.debug("Reading line: %s", line.rstrip("\r\n"))
        try:
            record = parse_line(line)
        except MalformedNumericFieldError as e:
            logger.warning("Dropping arrival record: %s", e)
            continue
        if record is None:
            continue
        logger.debug("Extracted species: %s", record.species.value)
        yield record
