"""Configuration models for the zoo intake pipeline.

This module contains the Pydantic models for the YAML configuration file.
"""

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool = False  # JSON lines instead of human-readable console output
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "zookeeper"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}."
            )
        return level


class ZookeeperConfig(BaseModel):
    """Configuration settings for an intake run."""

    # Version tracking
    config_version: str = "1.0.0"  # Configuration schema version

    # Input and output files, relative to the data directory unless absolute
    names_file: str = "animalNames.txt"
    arrivals_file: str = "arrivingAnimals.txt"
    report_file: str = "zooPopulation.txt"

    # Seed for name and birthday draws; None draws from OS entropy
    random_seed: int | None = None

    # Logging settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("names_file", "arrivals_file", "report_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """Reject empty file names."""
        if not v.strip():
            raise ValueError("File paths must not be empty")
        return v
