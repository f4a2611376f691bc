"""Structlog-based logging configuration for the intake CLI.

Modules log through the standard ``logging`` module; this configures structlog
processors and the root handler so those records come out either as
human-readable console lines or as JSON lines. Logs go to stderr so report output
written to stdout stays clean.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

from zookeeper.config.models import ZookeeperConfig


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _shared_processors(config: ZookeeperConfig) -> list:
    """Processors applied to both structlog and standard library log entries."""
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(dict(config.logging.extra_fields)),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    return processors


def _get_renderer(config: ZookeeperConfig) -> Callable:
    """Select JSON or human-readable output."""
    if config.logging.json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _configure_processors(config: ZookeeperConfig) -> list:
    """Configure structlog processors from the logging settings."""
    return [*_shared_processors(config), _get_renderer(config)]


def _configure_handlers(config: ZookeeperConfig) -> None:
    """Route standard library logging through a single stderr handler."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    processor_formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.add_logger_name, *_shared_processors(config)],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(config),
        ],
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(processor_formatter)
    root_logger.addHandler(console_handler)


def configure_structlog(config: ZookeeperConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The ZookeeperConfig instance containing logging settings.
    """
    processors = _configure_processors(config)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.logging.level,
        json_output=config.logging.json_logs,
    )
