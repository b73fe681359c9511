"""Analyzer flag definitions shared by the CLI and the plugin loader."""

from typing import List, Sequence

import click
from click.core import ParameterSource

from ..config import (
    FLAG_ALL_NAME,
    FLAG_MAX_RECURSION_LEVEL_NAME,
    AnalyzerConfig,
    ConfigError,
    flag_name,
)

# Parameter names stay fixed whatever the flag prefix.
ANALYZER_PARAMS = ("all_functions", "max_recursion_level")


def flag_options(prefix: str = "") -> List[click.Option]:
    """Build the ``all`` and ``max-recursion-level`` options.

    Args:
        prefix: Optional namespace, e.g. ``linter`` gives ``--linter-all``
    """
    return [
        click.Option(
            [
                f"--{flag_name(FLAG_ALL_NAME, prefix)}/--no-{flag_name(FLAG_ALL_NAME, prefix)}",
                "all_functions",
            ],
            default=False,
            help="the all option will run against all method in test file",
        ),
        click.Option(
            [f"--{flag_name(FLAG_MAX_RECURSION_LEVEL_NAME, prefix)}", "max_recursion_level"],
            type=click.IntRange(min=0),
            default=AnalyzerConfig().max_recursion_level,
            show_default=True,
            help="max recursion level when checking nested arg calls",
        ),
    ]


def apply_flags(ctx: click.Context, base: AnalyzerConfig) -> AnalyzerConfig:
    """Override ``base`` with the analyzer flags given on the command line."""
    overrides = {
        name: ctx.params[name]
        for name in ANALYZER_PARAMS
        if ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE
    }
    if not overrides:
        return base
    return base.merged(**overrides)


def parse_flags(
    args: Sequence[str],
    prefix: str = "",
    base: AnalyzerConfig = None,
) -> AnalyzerConfig:
    """Parse analyzer flags from an argument list.

    Raises:
        ConfigError: If the arguments are not valid flags
    """
    command = click.Command("ttempdir", params=flag_options(prefix))
    try:
        ctx = command.make_context("ttempdir", list(args))
    except click.ClickException as e:
        raise ConfigError(f"cannot parse flags of ttempdir: {e.format_message()}") from e

    return apply_flags(ctx, base or AnalyzerConfig())
