"""Zookeeper configuration package.

This package provides configuration management with:
- Pydantic models with validation
- YAML parsing and serialization
- Default file creation and backups
"""

from .manager import ConfigManager
from .models import LoggingConfig, ZookeeperConfig

__all__ = [
    "ConfigManager",
    "LoggingConfig",
    "ZookeeperConfig",
]
