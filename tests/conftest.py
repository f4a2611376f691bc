import random
from pathlib import Path

import pytest

from zookeeper.config import ZookeeperConfig
from zookeeper.system.file_manager import FileManager
from zookeeper.system.path_resolver import PathResolver

NAMES_TEXT = """Hyena Names:
Shenzi
Banzai
Ed
Zig

Lion Names:
Scar
Mufasa
Simba
Kiara

Bear Names:
Yogi
Smokey
Paddington
Baloo

Tiger Names:
Tony
Tigger
Amber
Cosimia
"""

ARRIVALS_TEXT = """4 year old female hyena, born in spring, tan color, 70 pounds, from Friguia Park, Tunisia
12 year old male hyena, born in fall, tan color, 150 pounds, from Kenya
Arrivals list, updated by the keeper on duty
4 year old male lion, born in spring, tan color, 300 pounds, from Zanzibar, Tanzania
3 year old male tiger, born in fall, orange with black stripes color, 270 pounds, from Dhaka, Bangladesh
2 year old female bear, born in winter, brown color, 180.5 pounds, from Alaska Zoo, Alaska
7 year old female lion, born in unknown, golden color, 275 pounds, from Pretoria, South Africa
"""


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver rooted in a temporary data directory.

    Every input, output and config path resolves inside tmp_path so tests never
    touch files in the working directory.
    """
    return PathResolver(data_dir=tmp_path)


@pytest.fixture
def file_manager(path_resolver: PathResolver) -> FileManager:
    return FileManager(path_resolver)


@pytest.fixture
def names_file(tmp_path: Path) -> Path:
    """Write the sample name list and return its path."""
    path = tmp_path / "animalNames.txt"
    path.write_text(NAMES_TEXT)
    return path


@pytest.fixture
def arrivals_file(tmp_path: Path) -> Path:
    """Write the sample arrivals record and return its path."""
    path = tmp_path / "arrivingAnimals.txt"
    path.write_text(ARRIVALS_TEXT)
    return path


@pytest.fixture
def config() -> ZookeeperConfig:
    return ZookeeperConfig(random_seed=42)


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)
