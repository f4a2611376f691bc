from dataclasses import dataclass

from zookeeper.species.models import BirthSeason, Species

UNNAMED = "Unnamed"


@dataclass(frozen=True)
class AnimalRecord:
    """One arriving animal as described in the arrivals record.

    Extraction leaves ``name`` and ``intake_number`` unset; identity assignment
    fills them in once by producing a new record.
    """

    species: Species
    age: int  # Years
    gender: str  # Free-form token as written, e.g. "female"
    birth_season: BirthSeason
    color: str  # May contain spaces, e.g. "dark brown"
    weight: float  # Pounds
    origin: str  # Remainder of the line, e.g. "Friguia Park, Tunisia"
    name: str | None = None
    intake_number: int | None = None

    @property
    def habitat(self) -> str:
        return self.species.habitat
