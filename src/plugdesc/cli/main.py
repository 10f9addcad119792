"""plugdesc CLI - Main entry point."""

import logging

import click

from plugdesc import __version__

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Configure the root logger with a console handler."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__, prog_name="plugdesc")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """plugdesc - plugin description file tools

    Validate, inspect, and rewrite plugin.yml files.
    """
    _setup_logging(verbose)


from .description_commands import init, normalize, show, validate  # noqa: E402

cli.add_command(validate)
cli.add_command(show)
cli.add_command(normalize)
cli.add_command(init)
