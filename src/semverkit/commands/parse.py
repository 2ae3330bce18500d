# SPDX-License-Identifier: MIT
"""Parse a version and show its components."""

from __future__ import annotations

import json
from typing import Optional

import click

from ..main import Context, echo_info, loose_option, pass_context


@click.command()
@click.argument("version", required=False)
@loose_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as a JSON object.",
)
@pass_context
def parse(ctx: Context, version: Optional[str], loose: Optional[bool], as_json: bool) -> None:
    """Parse VERSION and print its components.

    Without VERSION, the [project].version of the nearest pyproject.toml is
    parsed instead.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit parse --loose v1.2
        semverkit parse --json
    """
    if version is None:
        config = ctx.load_config()
        if not config.has_pyproject():
            raise click.UsageError("No VERSION given and no pyproject.toml found")
        if not config.project_version:
            raise click.ClickException("Missing required field: [project].version")
        version = config.project_version

    parsed = ctx.parse_version(version, loose)

    if as_json:
        echo_info(
            json.dumps(
                {
                    "major": parsed.major,
                    "minor": parsed.minor,
                    "patch": parsed.patch,
                    "pre": parsed.pre,
                    "build": parsed.build,
                },
                indent=2,
            )
        )
        return

    echo_info(f"major: {parsed.major}")
    echo_info(f"minor: {parsed.minor}")
    echo_info(f"patch: {parsed.patch}")
    echo_info(f"pre:   {parsed.pre}")
    echo_info(f"build: {parsed.build}")
