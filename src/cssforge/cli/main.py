"""cssforge CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssforge import __version__
from cssforge.config import CssForgeConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="cssforge")
@click.option(
    "--log-level",
    default=CssForgeConfig.log_level,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssforge - build CSS selectors and serialize simple objects."""
    config = CssForgeConfig(log_level=log_level.upper())
    logging.getLogger("cssforge").setLevel(config.log_level)
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssforge.cli.build import build  # noqa: E402
from cssforge.cli.combine import combine  # noqa: E402
from cssforge.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rectangle)
