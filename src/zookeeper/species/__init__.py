"""Species domain package.

This package contains the species taxonomy used by the intake pipeline:
- Species, BirthSeason: Closed enumerations of supported species and seasons
- SPECIES_REGISTRY: Lookup table of ID prefixes, habitats and intake offsets
- Token parsing helpers for arrival records and name-list headers
"""

from zookeeper.species.models import (
    REPORT_ORDER,
    SPECIES_REGISTRY,
    BirthSeason,
    Species,
    SpeciesProfile,
)
from zookeeper.species.parser import parse_season_token, parse_species_token

__all__ = [
    "REPORT_ORDER",
    "SPECIES_REGISTRY",
    "BirthSeason",
    "Species",
    "SpeciesProfile",
    "parse_season_token",
    "parse_species_token",
]
