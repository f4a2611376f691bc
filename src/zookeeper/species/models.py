"""Species taxonomy for the zoo intake pipeline.

The set of species is closed and small, so each species is an enum member and
everything else about it (input token, report ID prefix, habitat, intake number
offset) lives in a single lookup table rather than in per-species classes.
"""

from enum import Enum
from typing import NamedTuple


class Species(str, Enum):
    """Supported species, in report order."""

    HYENA = "Hyena"
    LION = "Lion"
    TIGER = "Tiger"
    BEAR = "Bear"

    @property
    def id_prefix(self) -> str:
        return SPECIES_REGISTRY[self].id_prefix

    @property
    def habitat(self) -> str:
        return SPECIES_REGISTRY[self].habitat


class BirthSeason(str, Enum):
    """Birth season tokens accepted in arrival records."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"
    UNKNOWN = "unknown"


class SpeciesProfile(NamedTuple):
    """Static facts about one species."""

    species: Species
    token: str  # Lowercase token used in arrival records, e.g. "lion"
    id_prefix: str  # Report ID prefix, e.g. "Li"
    habitat: str
    intake_offset: int  # Intake numbers for this species start at offset + 1


SPECIES_REGISTRY: dict[Species, SpeciesProfile] = {
    Species.HYENA: SpeciesProfile(
        species=Species.HYENA,
        token="hyena",
        id_prefix="Hy",
        habitat="Savannas, grasslands, and woodlands in Africa",
        intake_offset=1000,
    ),
    Species.LION: SpeciesProfile(
        species=Species.LION,
        token="lion",
        id_prefix="Li",
        habitat="Grasslands, savannas, and open woodlands in Africa and India",
        intake_offset=2000,
    ),
    Species.TIGER: SpeciesProfile(
        species=Species.TIGER,
        token="tiger",
        id_prefix="Ti",
        habitat="Tropical forests, grasslands, and mangrove swamps in Asia",
        intake_offset=3000,
    ),
    Species.BEAR: SpeciesProfile(
        species=Species.BEAR,
        token="bear",
        id_prefix="Be",
        habitat="Forests, mountains, and tundras in North America, Europe, and Asia",
        intake_offset=4000,
    ),
}

# Fixed order of the species sections in the population report
REPORT_ORDER: tuple[Species, ...] = (Species.HYENA, Species.LION, Species.TIGER, Species.BEAR)
