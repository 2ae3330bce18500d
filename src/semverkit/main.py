# SPDX-License-Identifier: MIT
"""CLI entry point for the semverkit command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import CLIConfig, ConfigError, load_config
from .errors import ParseError
from .semver import Version, parse, parse_loosely


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def use_loose(self, loose: Optional[bool]) -> bool:
        """Resolve the parse mode, letting an explicit flag override config."""
        if loose is not None:
            return loose
        return self.load_config().loose

    def parse_version(self, text: str, loose: Optional[bool]) -> Version:
        """Parse ``text`` in the resolved mode, raising ClickException on failure."""
        try:
            return parse_loosely(text) if self.use_loose(loose) else parse(text)
        except ParseError as e:
            raise click.ClickException(f"{e.message} [{e.kind.value}]") from e


pass_context = click.make_pass_decorator(Context, ensure=True)

loose_option = click.option(
    "--loose/--strict",
    default=None,
    help="Use the lenient parser (default from [tool.semverkit].loose, else strict).",
)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(package_name="semverkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, format and compare semantic versions.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit format --concise 1.0.0
        semverkit compare 1.0.0-alpha 1.0.0
        semverkit compatible 1.2.3 1.4.0
        semverkit sort 1.10.0 1.2.0 1.2.0-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    _configure_logging(verbose)


# Import and register commands
from .commands import compare as compare_commands
from .commands import format as format_command
from .commands import parse as parse_command
from .commands import sort as sort_command

cli.add_command(parse_command.parse)
cli.add_command(format_command.format_version)
cli.add_command(compare_commands.compare)
cli.add_command(compare_commands.compatible)
cli.add_command(sort_command.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
