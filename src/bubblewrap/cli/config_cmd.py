"""``bubblewrap config`` --- Show the active config, creating it on first run.

Migrates a config left by the tool's previous name, loads the config file,
or walks the user through creating one (JDK and Android SDK locations).

Exit Codes:
    0 --- Config loaded or created.
    1 --- Config could not be loaded or created.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from bubblewrap.cli.config import default_config_file_path, load_or_create_config
from bubblewrap.exceptions import BubblewrapError


@click.command("config")
@click.option(
    "--path", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="BUBBLEWRAP_CONFIG",
    help="Config file to use (default: ~/.bubblewrap/config.json).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def config_command(config_path: Path | None, output_format: str) -> None:
    """Show the JDK and Android SDK Bubblewrap builds with.

    On first run, asks whether to download a JDK or use an existing one,
    then asks for the Android SDK location, and saves the answers.

    Exit code 0 on success, 1 if the config cannot be loaded or created.
    """
    path = config_path or default_config_file_path()
    try:
        config = asyncio.run(load_or_create_config(path=path))
    except BubblewrapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({"path": str(path), **config.to_dict()}, indent=2))
    else:
        from bubblewrap.cli.output import print_config
        print_config(config, path)
    sys.exit(0)
