"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=CssBuilderConfig.log_level,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """cssbuilder - build CSS selector strings from validated fragments."""
    config = CssBuilderConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format=config.log_format)


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402

cli.add_command(build)
