"""Loading of sectioned name lists into per-species name pools.

A name list looks like::

    Hyena Names:
    Shenzi
    Banzai

    Lion Names:
    Simba
"""

import logging
from collections.abc import Iterable

from zookeeper.exceptions import SourceUnavailableError
from zookeeper.names.pool import NamePool
from zookeeper.species.models import Species
from zookeeper.species.parser import is_section_header, parse_section_header
from zookeeper.system.file_manager import FileManager

logger = logging.getLogger(__name__)


def empty_name_pools() -> dict[Species, NamePool]:
    """Return one empty pool per species."""
    return {species: NamePool() for species in Species}


def parse_name_pools(lines: Iterable[str]) -> dict[Species, NamePool]:
    """Parse name-list lines into one pool per species, preserving input order."""
    pools = empty_name_pools()
    current_species: Species | None = None

    for raw_line in lines:
        if not raw_line.strip():
            continue
        if is_section_header(raw_line):
            # Unrecognized headers clear the context so their names are dropped
            current_species = parse_section_header(raw_line)
            if current_species is None:
                logger.debug("Ignoring unrecognized name section: %s", raw_line.strip())
            continue

        name = raw_line.rstrip(" \t\r\n")
        if current_species is not None and name:
            pools[current_species].append(name)

    return pools


class NamePoolLoader:
    """Reads the name list file and builds the species name pools."""

    def __init__(self, file_manager: FileManager) -> None:
        self.file_manager = file_manager

    def load(self, names_path) -> dict[Species, NamePool]:
        """Load name pools from a file.

        A missing or unreadable file is reported and yields empty pools, so every
        animal in the run is left "Unnamed" rather than aborting the run.
        """
        try:
            lines = self.file_manager.read_lines(names_path)
        except SourceUnavailableError as e:
            logger.error("Name list unavailable, animals will be unnamed: %s", e)
            return empty_name_pools()

        pools = parse_name_pools(lines)
        for species, pool in pools.items():
            logger.debug("%s names loaded: %s", species.value, " ".join(pool.names))
        return pools
