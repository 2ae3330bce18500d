# SPDX-License-Identifier: MIT
"""Print a version in canonical or concise form."""

from __future__ import annotations

from typing import Optional

import click

from ..main import Context, echo_info, loose_option, pass_context
from ..semver import to_string, to_string_concise


@click.command(name="format")
@click.argument("version")
@click.option(
    "--concise/--canonical",
    default=None,
    help="Drop zero minor/patch numbers (default from [tool.semverkit].concise).",
)
@loose_option
@pass_context
def format_version(
    ctx: Context,
    version: str,
    concise: Optional[bool],
    loose: Optional[bool],
) -> None:
    """Print VERSION in canonical (or concise) form.

    \b
    Examples:
        semverkit format --loose v1.2         # 1.2.0
        semverkit format --concise 1.0.0-rc.1 # 1-rc.1
    """
    parsed = ctx.parse_version(version, loose)

    if concise is None:
        concise = ctx.load_config().concise

    echo_info(to_string_concise(parsed) if concise else to_string(parsed))
