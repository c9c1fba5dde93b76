"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=None,
    help="Override CSSBUILDER_LOG_LEVEL",
)
def cli(log_level: str | None) -> None:
    """cssbuilder - build CSS selectors from fragments and combinators."""
    config = CssBuilderConfig.from_env()
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format=config.log_format,
    )


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.order import order  # noqa: E402

cli.add_command(build)
cli.add_command(order)
