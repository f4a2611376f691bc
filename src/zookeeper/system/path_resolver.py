from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in the intake pipeline.

    Relative paths are resolved against the data directory, which defaults to the
    current working directory.
    """

    DEFAULT_CONFIG_NAME = "zookeeper.yaml"
    DEFAULT_NAMES_FILE = "animalNames.txt"
    DEFAULT_ARRIVALS_FILE = "arrivingAnimals.txt"
    DEFAULT_REPORT_FILE = "zooPopulation.txt"

    def __init__(self, data_dir: Path | str | None = None, config_path: Path | str | None = None):
        """Initialize PathResolver.

        Args:
            data_dir: Base directory for input and output files
            config_path: Explicit configuration file location
        """
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd()
        self._config_path = Path(config_path) if config_path is not None else None

    def resolve(self, path: Path | str) -> Path:
        """Resolve a path against the data directory unless it is absolute."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.data_dir / path

    def get_config_path(self) -> Path:
        """Get the path to the configuration file."""
        if self._config_path is not None:
            return self._config_path
        return self.data_dir / self.DEFAULT_CONFIG_NAME

    def get_names_path(self, names_file: Path | str | None = None) -> Path:
        """Get the path to the sectioned name list."""
        return self.resolve(names_file or self.DEFAULT_NAMES_FILE)

    def get_arrivals_path(self, arrivals_file: Path | str | None = None) -> Path:
        """Get the path to the arriving animals record."""
        return self.resolve(arrivals_file or self.DEFAULT_ARRIVALS_FILE)

    def get_report_path(self, report_file: Path | str | None = None) -> Path:
        """Get the path where the population report is written."""
        return self.resolve(report_file or self.DEFAULT_REPORT_FILE)
