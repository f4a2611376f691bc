"""System domain package.

This package contains system-level components:
- FileManager: Flat-text file reading and writing
- PathResolver: Path resolution against the data directory
"""

from zookeeper.system.file_manager import FileManager
from zookeeper.system.path_resolver import PathResolver

__all__ = [
    "FileManager",
    "PathResolver",
]
