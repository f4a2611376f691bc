"""Configuration loading."""

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from zookeeper.config.models import LoggingConfig, ZookeeperConfig
from zookeeper.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and validates the YAML configuration file."""

    CURRENT_VERSION = "1.0.0"

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_config_path()

    def load(self) -> ZookeeperConfig:
        """Load and validate configuration, creating a default file if missing.

        Returns:
            ZookeeperConfig: Loaded and validated configuration

        Raises:
            ValueError: If the configuration cannot be parsed or does not validate
        """
        self._ensure_config_exists()
        raw_config = self._read_yaml()
        return self._create_config_object(raw_config)

    def _ensure_config_exists(self) -> None:
        """Write a default config file if none exists."""
        if not self.config_path.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            defaults = ZookeeperConfig(config_version=self.CURRENT_VERSION).model_dump()
            config_yaml = yaml.dump(defaults, default_flow_style=False, sort_keys=False)
            self.config_path.write_text(config_yaml)
            logger.info("Created default configuration at %s", self.config_path)

    def _read_yaml(self) -> dict[str, Any]:
        """Read the YAML config file.

        Raises:
            ValueError: If the file is not valid YAML or its top level is not a mapping
        """
        config_text = self.config_path.read_text()
        try:
            raw_config = yaml.safe_load(config_text)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse {self.config_path}: {e}") from e

        if raw_config is None:
            return {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration in {self.config_path} must be a mapping, "
                f"not {type(raw_config).__name__}"
            )
        return raw_config

    def _create_config_object(self, raw_config: dict[str, Any]) -> ZookeeperConfig:
        """Create ZookeeperConfig object from dictionary.

        Args:
            raw_config: Configuration dictionary

        Returns:
            ZookeeperConfig: Typed configuration object
        """
        expected_fields = set(ZookeeperConfig.model_fields.keys())
        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}

        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning("Filtered out unexpected config fields: %s", unexpected_fields)

        try:
            if isinstance(filtered_config.get("logging"), dict):
                filtered_config["logging"] = LoggingConfig(**filtered_config["logging"])
            return ZookeeperConfig(**filtered_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
