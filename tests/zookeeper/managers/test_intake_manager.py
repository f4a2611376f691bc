"""Tests for the intake pipeline."""

import logging
import random
from datetime import date

import pytest

from zookeeper.arrivals.models import UNNAMED
from zookeeper.config import ZookeeperConfig
from zookeeper.exceptions import DestinationUnavailableError
from zookeeper.managers.intake_manager import IntakeManager
from zookeeper.reporting.formatter import SEPARATOR
from zookeeper.species.models import Species

TODAY = date(2026, 10, 19)


@pytest.fixture
def manager(config, path_resolver, names_file, arrivals_file):
    return IntakeManager(config, path_resolver=path_resolver)


class TestProcessArrivals:
    """Test extraction and identity assignment over the sample files."""

    def test_records_named_from_pools(self, manager):
        """Should name every animal from its species pool."""
        result = manager.process_arrivals()

        assert len(result.records) == 6
        lions = [r for r in result.records if r.species is Species.LION]
        assert {r.name for r in lions} <= {"Scar", "Mufasa", "Simba", "Kiara"}
        assert len({r.name for r in lions}) == 2

    def test_intake_numbers(self, manager):
        """Should number animals per species from the species offset."""
        result = manager.process_arrivals()

        assert [r.intake_number for r in result.records] == [1001, 1002, 2001, 3001, 4001, 2002]
        assert result.counter.taken(Species.LION) == 2
        assert result.count(Species.HYENA) == 2

    def test_missing_names_file(self, config, path_resolver, arrivals_file, caplog):
        """Should leave every animal Unnamed when the name list is missing."""
        manager = IntakeManager(config, path_resolver=path_resolver)

        with caplog.at_level(logging.ERROR):
            result = manager.process_arrivals()

        assert len(result.records) == 6
        assert {r.name for r in result.records} == {UNNAMED}
        assert "Name list unavailable" in caplog.text

    def test_missing_arrivals_file(self, config, path_resolver, names_file, caplog):
        """Should produce no records when the arrivals record is missing."""
        manager = IntakeManager(config, path_resolver=path_resolver)

        with caplog.at_level(logging.ERROR):
            result = manager.process_arrivals()

        assert result.records == []
        assert "Arrivals record unavailable" in caplog.text

    def test_seed_from_config(self, path_resolver, names_file, arrivals_file):
        """Should give the same names for the same configured seed."""
        config = ZookeeperConfig(random_seed=99)
        first = IntakeManager(config, path_resolver=path_resolver).process_arrivals()
        second = IntakeManager(config, path_resolver=path_resolver).process_arrivals()

        assert [r.name for r in first.records] == [r.name for r in second.records]


class TestGenerateReport:
    """Test writing the population report."""

    def test_report_written(self, manager, tmp_path):
        """Should write the grouped report to the configured file."""
        result = manager.generate_report(today=TODAY)

        assert result.report_path == tmp_path / "zooPopulation.txt"
        lines = result.report_path.read_text().splitlines()
        assert lines[0] == "Hyena Habitat:"
        assert lines[1].startswith("Hy1; ")
        assert lines[1].endswith(
            "; age 4; birth date 2022-04-01; tan color; female; 70 pounds; "
            "from Friguia Park, Tunisia"
        )
        assert lines[3] == "Lion Habitat:"
        assert lines[4].startswith("Li1; ")
        assert lines[5].startswith("Li2; ")
        assert "birth date 2019-06-01" in lines[5]
        assert lines[6] == "Tiger Habitat:"
        assert lines[7].startswith("Ti1; ")
        assert lines[8] == "Bear Habitat:"
        assert "180.5 pounds; from Alaska Zoo, Alaska" in lines[9]
        assert lines[-1] == SEPARATOR

    def test_report_reproducible_with_seed(self, config, path_resolver, names_file, arrivals_file):
        """Should write byte-identical reports for identical seeds and inputs."""
        first = IntakeManager(config, path_resolver=path_resolver).generate_report(today=TODAY)
        first_text = first.report_path.read_text()
        second = IntakeManager(config, path_resolver=path_resolver).generate_report(today=TODAY)

        assert second.report_path.read_text() == first_text

    def test_empty_report_when_no_arrivals(self, config, path_resolver):
        """Should still write a well-formed empty report."""
        result = IntakeManager(config, path_resolver=path_resolver).generate_report(today=TODAY)

        assert result.report_path.read_text() == (
            "Hyena Habitat:\nLion Habitat:\nTiger Habitat:\nBear Habitat:\n" + SEPARATOR + "\n"
        )

    def test_latin1_names_file(self, config, path_resolver, arrivals_file, tmp_path):
        """Should still write the report when the name list is Latin-1 encoded."""
        (tmp_path / "animalNames.txt").write_bytes("Lion Names:\nZoë\nNala\n".encode("latin-1"))
        manager = IntakeManager(config, path_resolver=path_resolver)

        result = manager.generate_report(today=TODAY)

        lions = [r for r in result.records if r.species is Species.LION]
        assert {r.name for r in lions} == {"Zo\ufffd", "Nala"}
        assert "Li1; " in result.report_path.read_text()

    def test_latin1_arrivals_file(self, config, path_resolver, names_file, tmp_path):
        """Should still write the report when the arrivals record is Latin-1 encoded."""
        (tmp_path / "arrivingAnimals.txt").write_bytes(
            "4 year old male lion, born in spring, tan color, 300 pounds, from Zoë Park\n".encode(
                "latin-1"
            )
        )
        manager = IntakeManager(config, path_resolver=path_resolver)

        result = manager.generate_report(today=TODAY)

        assert len(result.records) == 1
        assert "from Zo\ufffd Park" in result.report_path.read_text(encoding="utf-8")

    def test_destination_unavailable(self, path_resolver, names_file, arrivals_file, tmp_path):
        """Should raise and leave no output when the report cannot be written."""
        config = ZookeeperConfig(report_file="missing/dir/report.txt")
        manager = IntakeManager(config, path_resolver=path_resolver)

        with pytest.raises(DestinationUnavailableError):
            manager.generate_report(today=TODAY)

        assert not (tmp_path / "missing").exists()


class TestGenerateProfiles:
    """Test the animal profile listing."""

    def test_profiles(self, config, path_resolver, names_file, arrivals_file):
        """Should describe every animal with its intake number and habitat."""
        manager = IntakeManager(config, path_resolver=path_resolver, rng=random.Random(5))

        lines = manager.generate_profiles(today=TODAY).splitlines()

        assert len(lines) == 6
        assert lines[0].startswith("1001; ")
        assert "; Hyena; habitat: Savannas, grasslands, and woodlands in Africa; born 2022-3-" in (
            lines[0]
        )
        assert lines[5].startswith("2002; ")
        assert lines[5].endswith("born 2019-1-1")
