"""Name and intake number assignment for extracted arrival records."""

import logging
import random
from collections.abc import Iterable
from dataclasses import replace

from zookeeper.arrivals.models import UNNAMED, AnimalRecord
from zookeeper.names.pool import NamePool
from zookeeper.species.models import SPECIES_REGISTRY, Species

logger = logging.getLogger(__name__)


class IntakeCounter:
    """Per-run count of animals taken in for each species.

    Intake numbers carry a species offset (Hyena 1001, Lion 2001, ...) and are
    unrelated to the sequential IDs printed in the population report.
    """

    def __init__(self) -> None:
        self._taken: dict[Species, int] = {species: 0 for species in Species}

    def next_number(self, species: Species) -> int:
        self._taken[species] += 1
        return SPECIES_REGISTRY[species].intake_offset + self._taken[species]

    def taken(self, species: Species) -> int:
        """Number of animals of a species taken in so far."""
        return self._taken[species]


class IdentityAssigner:
    """Draws names from the species pools and stamps intake numbers.

    The assigner owns the pools for one pass; drawn names are removed so no name
    is given to two animals.
    """

    def __init__(
        self,
        name_pools: dict[Species, NamePool],
        rng: random.Random | None = None,
        counter: IntakeCounter | None = None,
    ):
        """Initialize IdentityAssigner.

        Args:
            name_pools: Name pool per species, consumed by assignment
            rng: Random source; an entropy-seeded generator is created if None
            counter: Intake counter for this run; a fresh one is created if None
        """
        self.name_pools = name_pools
        self.rng = rng or random.Random()
        self.counter = counter or IntakeCounter()

    def draw_name(self, species: Species) -> str:
        """Draw an unused name for a species, or "Unnamed" if none is left."""
        pool = self.name_pools.get(species)
        name = pool.draw(self.rng) if pool is not None else None
        if name is None:
            logger.debug("No names left for %s, using %s", species.value, UNNAMED)
            return UNNAMED
        return name

    def assign(self, record: AnimalRecord) -> AnimalRecord:
        """Return a copy of the record with its name and intake number set."""
        return replace(
            record,
            name=self.draw_name(record.species),
            intake_number=self.counter.next_number(record.species),
        )

    def assign_all(self, records: Iterable[AnimalRecord]) -> list[AnimalRecord]:
        """Assign identities to records in the order given."""
        return [self.assign(record) for record in records]
