"""Check command - find deprecated temp dir constructors in Go tests."""

import sys

import click

from ... import check_files
from ...config import ConfigError
from ...context import pass_context
from ...logging import logger
from ...report import format_json, format_summary, format_text
from ...scanner import expand_targets
from ...whitelist import Whitelist
from ..flags import apply_flags, flag_options


def build_check_command(flag_prefix: str = "") -> click.Command:
    """Create the ``check`` command, optionally namespacing analyzer flags."""

    @click.command(name="check")
    @click.argument("targets", nargs=-1)
    @click.option("--format", "output_format", type=click.Choice(["text", "json", "summary"]), default="text",
                  help="Output format (default: text)")
    @click.option("--verbose", "-v", is_flag=True, help="Show suggested fixes and clean files")
    @pass_context
    def check(ctx, targets, output_format, verbose, all_functions, max_recursion_level):
        """Check Go sources for os.MkdirTemp, ioutil.TempDir and os.TempDir.

        TARGETS are files, directories or package patterns such as ./...
        (default: current directory).

        Examples:
            ttempdir check                   # Check the current module
            ttempdir check ./...             # Same, go-style pattern
            ttempdir check --all pkg/        # Also check helpers in _test.go files
            ttempdir check --format json .   # JSON output for CI
        """
        try:
            config = apply_flags(click.get_current_context(), ctx.config)
            whitelist = Whitelist(ctx.config_path)
        except ConfigError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(2)

        logger.debug(f"analyzer config: {config.model_dump(by_alias=True)}")

        try:
            files_to_check = expand_targets(targets or (".",))
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if not files_to_check:
            click.echo("No Go files found to check", err=True)
            sys.exit(1)

        results = check_files(files_to_check, config=config, whitelist=whitelist)

        if output_format == "json":
            output = format_json(results)
        elif output_format == "summary":
            output = format_summary(results)
        else:
            output = format_text(results, verbose=verbose)

        click.echo(output)

        total_errors = sum(r.error_count for r in results)
        sys.exit(1 if total_errors > 0 else 0)

    check.params.extend(flag_options(flag_prefix))
    return check


check = build_check_command()
