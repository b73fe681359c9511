"""ttempdir CLI main entry point with global options."""

import sys
from pathlib import Path

import click

from ..config import ConfigError, load_config
from ..context import TTempdirContext
from ..logging import configure_logging


@click.group()
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: nearest .ttempdir.toml)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="ttempdir")
@click.pass_context
def cli(ctx, config_path, debug):
    """ttempdir - suggest t.TempDir() over os.MkdirTemp, ioutil.TempDir and os.TempDir."""
    ctx.ensure_object(TTempdirContext)

    if debug:
        configure_logging("DEBUG")

    ctx.obj.config_path = config_path
    try:
        ctx.obj.config = load_config(ctx.obj.config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check

cli.add_command(check)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
