"""Arrivals intake pipeline.

Runs the whole intake as one linear pass: load the name pools, extract arrival
records, assign names and intake numbers, then render and write the population
report.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from zookeeper.arrivals.extractor import extract_records
from zookeeper.arrivals.identity import IdentityAssigner, IntakeCounter
from zookeeper.arrivals.models import AnimalRecord
from zookeeper.config.models import ZookeeperConfig
from zookeeper.exceptions import SourceUnavailableError
from zookeeper.names.loader import NamePoolLoader
from zookeeper.reporting.formatter import render_profiles, render_report
from zookeeper.species.models import Species
from zookeeper.system.file_manager import FileManager
from zookeeper.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


@dataclass
class IntakeResult:
    """Outcome of one intake pass."""

    records: list[AnimalRecord] = field(default_factory=list)
    counter: IntakeCounter = field(default_factory=IntakeCounter)
    report_path: Path | None = None

    def count(self, species: Species) -> int:
        return self.counter.taken(species)


class IntakeManager:
    """Coordinates the intake pipeline for one configuration."""

    def __init__(
        self,
        config: ZookeeperConfig,
        path_resolver: PathResolver | None = None,
        file_manager: FileManager | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.path_resolver = path_resolver or PathResolver()
        self.file_manager = file_manager or FileManager(self.path_resolver)
        self.rng = rng or random.Random(config.random_seed)
        self.name_pool_loader = NamePoolLoader(self.file_manager)

    @property
    def names_path(self) -> Path:
        return self.path_resolver.get_names_path(self.config.names_file)

    @property
    def arrivals_path(self) -> Path:
        return self.path_resolver.get_arrivals_path(self.config.arrivals_file)

    @property
    def report_path(self) -> Path:
        return self.path_resolver.get_report_path(self.config.report_file)

    def read_arrival_lines(self) -> list[str]:
        """Read the arrivals record; an unavailable file yields no lines."""
        try:
            return self.file_manager.read_lines(self.arrivals_path)
        except SourceUnavailableError as e:
            logger.error("Arrivals record unavailable, report will be empty: %s", e)
            return []

    def process_arrivals(self) -> IntakeResult:
        """Extract arrival records and give each a name and intake number."""
        name_pools = self.name_pool_loader.load(self.names_path)
        assigner = IdentityAssigner(name_pools, rng=self.rng)
        records = assigner.assign_all(extract_records(self.read_arrival_lines()))
        logger.info("Processed %d arriving animals", len(records))
        return IntakeResult(records=records, counter=assigner.counter)

    def generate_report(self, today: date | None = None) -> IntakeResult:
        """Run the full pipeline and write the population report.

        The report is rendered completely before the destination is opened, so
        a destination failure leaves no partial output.

        Raises:
            DestinationUnavailableError: If the report file cannot be written
        """
        today = today or date.today()
        result = self.process_arrivals()
        report = render_report(result.records, current_year=today.year)
        result.report_path = self.file_manager.write_text(self.report_path, report)
        logger.info("Population report written to %s", result.report_path)
        return result

    def generate_profiles(self, today: date | None = None) -> str:
        """Run extraction and identity assignment and describe each animal."""
        result = self.process_arrivals()
        return render_profiles(result.records, today=today, rng=self.rng)
