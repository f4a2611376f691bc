"""Population report rendering."""

from zookeeper.reporting.formatter import (
    SEPARATOR,
    ReportEntry,
    group_by_species,
    render_profiles,
    render_report,
)

__all__ = [
    "SEPARATOR",
    "ReportEntry",
    "group_by_species",
    "render_profiles",
    "render_report",
]
