"""Arrival records: extraction, identity assignment and birth dates."""

from zookeeper.arrivals.birth_dates import derive_entity_birth_date, derive_report_birth_date
from zookeeper.arrivals.extractor import extract_records, parse_line
from zookeeper.arrivals.identity import IdentityAssigner, IntakeCounter
from zookeeper.arrivals.models import UNNAMED, AnimalRecord

__all__ = [
    "UNNAMED",
    "AnimalRecord",
    "IdentityAssigner",
    "IntakeCounter",
    "derive_entity_birth_date",
    "derive_report_birth_date",
    "extract_records",
    "parse_line",
]
