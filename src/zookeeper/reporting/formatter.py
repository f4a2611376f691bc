"""Population report and animal profile rendering."""

import random
from collections.abc import Iterable, Sequence
from datetime import date
from typing import NamedTuple

from zookeeper.arrivals.birth_dates import derive_entity_birth_date, derive_report_birth_date
from zookeeper.arrivals.models import UNNAMED, AnimalRecord
from zookeeper.species.models import REPORT_ORDER, Species

SEPARATOR = "-" * 29


class ReportEntry(NamedTuple):
    """A record paired with its report-time ID, e.g. "Li2"."""

    report_id: str
    record: AnimalRecord


def format_weight(weight: float) -> str:
    """Format a weight in its shortest general form (420.0 -> "420")."""
    return f"{weight:g}"


def group_by_species(records: Iterable[AnimalRecord]) -> dict[Species, list[ReportEntry]]:
    """Group records per species and number them from 1 within each species.

    Numbering follows the order of the record collection, so IDs are recomputed
    on every call and never depend on intake numbers.
    """
    groups: dict[Species, list[ReportEntry]] = {species: [] for species in REPORT_ORDER}
    for record in records:
        entries = groups[record.species]
        report_id = f"{record.species.id_prefix}{len(entries) + 1}"
        entries.append(ReportEntry(report_id, record))
    return groups


def format_report_line(entry: ReportEntry, current_year: int) -> str:
    record = entry.record
    birth_date = derive_report_birth_date(record.age, record.birth_season, current_year)
    return (
        f"{entry.report_id}; {record.name or UNNAMED}; age {record.age}; "
        f"birth date {birth_date}; {record.color} color; {record.gender}; "
        f"{format_weight(record.weight)} pounds; from {record.origin}"
    )


def render_report(records: Sequence[AnimalRecord], current_year: int | None = None) -> str:
    """Render the population report grouped by habitat.

    Args:
        records: Named records in collection order
        current_year: Year used for birth dates (defaults to the current year)

    Returns:
        Report text with one section per species followed by a dashed separator
    """
    if current_year is None:
        current_year = date.today().year

    lines: list[str] = []
    for species, entries in group_by_species(records).items():
        lines.append(f"{species.value} Habitat:")
        lines.extend(format_report_line(entry, current_year) for entry in entries)
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def format_profile(
    record: AnimalRecord, today: date | None = None, rng: random.Random | None = None
) -> str:
    """Describe one animal with its intake number, habitat and notional birthday."""
    birth_date = derive_entity_birth_date(record.age, record.birth_season, today, rng)
    return (
        f"{record.intake_number}; {record.name or UNNAMED}; {record.species.value}; "
        f"habitat: {record.habitat}; born {birth_date}"
    )


def render_profiles(
    records: Iterable[AnimalRecord], today: date | None = None, rng: random.Random | None = None
) -> str:
    """Render one profile line per record in collection order."""
    rng = rng or random.Random()
    return "".join(f"{format_profile(record, today, rng)}\n" for record in records)
