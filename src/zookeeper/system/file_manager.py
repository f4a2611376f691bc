from pathlib import Path

from zookeeper.exceptions import DestinationUnavailableError, SourceUnavailableError
from zookeeper.system.path_resolver import PathResolver


class FileManager:
    """Manages flat-text file operations using PathResolver."""

    def __init__(
        self, path_resolver: PathResolver, encoding: str = "utf-8", errors: str = "replace"
    ) -> None:
        self.path_resolver = path_resolver
        self.encoding = encoding
        self.errors = errors  # "replace" reads undecodable bytes as U+FFFD

    def read_lines(self, path: Path | str) -> list[str]:
        """Read all lines of a text file, keeping line endings.

        Bytes that are not valid in the configured encoding are replaced by default.

        Raises:
            SourceUnavailableError: If the file cannot be opened for reading, or cannot
                be decoded when strict decoding is configured
        """
        full_path = self.path_resolver.resolve(path)
        try:
            with open(full_path, encoding=self.encoding, errors=self.errors) as f:
                return f.readlines()
        except OSError as e:
            raise SourceUnavailableError(full_path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(full_path, str(e)) from e

    def write_text(self, path: Path | str, content: str) -> Path:
        """Write content to a text file in one step.

        Raises:
            DestinationUnavailableError: If the file cannot be opened for writing
        """
        full_path = self.path_resolver.resolve(path)
        try:
            with open(full_path, "w", encoding=self.encoding) as f:
                f.write(content)
        except OSError as e:
            raise DestinationUnavailableError(full_path, e.strerror or str(e)) from e
        return full_path
