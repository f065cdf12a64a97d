"""Bubblewrap CLI --- Toolchain setup and PWA validation for TWA projects.

Entry point for the ``bubblewrap`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    config   --- Show the toolchain config, creating it on first run.
    validate --- Check a URL's PWA and performance scores.

Usage::

    bubblewrap config
    bubblewrap config --path ./config.json --format json
    bubblewrap validate https://example.com
    bubblewrap --verbose validate https://example.com --format json
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from bubblewrap import __version__
from bubblewrap.cli.config_cmd import config_command
from bubblewrap.cli.validate_cmd import validate_command


def _configure_logging(verbose: bool) -> None:
    """Route package logging to the terminal through Rich."""
    handler = RichHandler(show_time=False, show_path=verbose, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("bubblewrap")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.propagate = False


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Bubblewrap: set up the Android toolchain and validate web apps.

    Keeps the JDK and Android SDK locations Bubblewrap builds with in
    ~/.bubblewrap/config.json, and checks that a site meets the PWA
    quality bar for a Trusted Web Activity.
    """
    _configure_logging(verbose)


# Register all subcommands
cli.add_command(config_command)
cli.add_command(validate_command)
