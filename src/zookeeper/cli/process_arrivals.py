r"""Zoo arrivals intake CLI.

Names arriving animals and writes the population report grouped by habitat.

Usage:
    zookeeper report \
        --names-file animalNames.txt \
        --arrivals-file arrivingAnimals.txt \
        --report-file zooPopulation.txt
"""

import sys
from pathlib import Path
from typing import Any

import click

from zookeeper.config import ConfigManager, ZookeeperConfig
from zookeeper.exceptions import DestinationUnavailableError
from zookeeper.managers.intake_manager import IntakeManager
from zookeeper.species.models import REPORT_ORDER
from zookeeper.system.path_resolver import PathResolver
from zookeeper.utils.structlog_configurator import configure_structlog


def _apply_overrides(config: ZookeeperConfig, **overrides: Any) -> ZookeeperConfig:
    """Return a copy of the config with the given non-None options applied."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    return config.model_copy(update=updates) if updates else config


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the YAML configuration file (created with defaults if missing)",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory that relative input and output paths resolve against",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, data_dir: Path | None) -> None:
    """Zoo arrivals intake.

    Names arriving animals and reports the zoo population by habitat.
    """
    resolver = PathResolver(data_dir=data_dir, config_path=config_path)
    try:
        config = ConfigManager(resolver).load()
    except ValueError as e:
        click.echo(click.style(f"✗ Invalid configuration: {e}", fg="red"), err=True)
        sys.exit(1)

    configure_structlog(config)

    ctx.ensure_object(dict)
    ctx.obj["resolver"] = resolver
    ctx.obj["config"] = config


@cli.command()
@click.option("--names-file", help="Sectioned list of names per species")
@click.option("--arrivals-file", help="Free-text record of arriving animals")
@click.option("--report-file", help="Where to write the population report")
@click.option("--seed", type=int, help="Seed for name draws, for reproducible runs")
@click.pass_obj
def report(
    obj: dict[str, Any],
    names_file: str | None,
    arrivals_file: str | None,
    report_file: str | None,
    seed: int | None,
) -> None:
    """Name arriving animals and write the population report."""
    config = _apply_overrides(
        obj["config"],
        names_file=names_file,
        arrivals_file=arrivals_file,
        report_file=report_file,
        random_seed=seed,
    )
    manager = IntakeManager(config, path_resolver=obj["resolver"])

    try:
        result = manager.generate_report()
    except DestinationUnavailableError as e:
        click.echo(click.style(f"✗ {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"✓ Report written to {result.report_path}", fg="green"))
    for species in REPORT_ORDER:
        click.echo(f"  {species.value}: {result.count(species)}")


@cli.command()
@click.option("--names-file", help="Sectioned list of names per species")
@click.option("--arrivals-file", help="Free-text record of arriving animals")
@click.option("--seed", type=int, help="Seed for name and birthday draws")
@click.pass_obj
def profile(
    obj: dict[str, Any],
    names_file: str | None,
    arrivals_file: str | None,
    seed: int | None,
) -> None:
    """Describe each arriving animal with its habitat and birthday."""
    config = _apply_overrides(
        obj["config"],
        names_file=names_file,
        arrivals_file=arrivals_file,
        random_seed=seed,
    )
    manager = IntakeManager(config, path_resolver=obj["resolver"])
    click.echo(manager.generate_profiles(), nl=False)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
