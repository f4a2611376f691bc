"""Mapping of free-form tokens onto the species taxonomy."""

from zookeeper.species.models import SPECIES_REGISTRY, BirthSeason, Species

_SPECIES_BY_TOKEN: dict[str, Species] = {
    profile.token: species for species, profile in SPECIES_REGISTRY.items()
}

NAME_SECTION_MARKER = "Names:"


def parse_species_token(token: str) -> Species | None:
    """Return the species for a lowercase arrival token such as "lion".

    Matching is case-sensitive, as arrival records always use lowercase tokens.
    Unknown tokens return None.
    """
    return _SPECIES_BY_TOKEN.get(token)


def parse_season_token(token: str) -> BirthSeason:
    """Return the birth season for a token, falling back to UNKNOWN."""
    try:
        return BirthSeason(token)
    except ValueError:
        return BirthSeason.UNKNOWN


def is_section_header(line: str) -> bool:
    """Check whether a name-list line is a section header."""
    return NAME_SECTION_MARKER in line


def parse_section_header(line: str) -> Species | None:
    """Return the species named by a section header like "Lion Names:".

    Headers that do not name a registered species return None.
    """
    for species in Species:
        if f"{species.value} Names" in line:
            return species
    return None
