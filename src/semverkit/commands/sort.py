# SPDX-License-Identifier: MIT
"""Sort versions by SemVer precedence."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import version_key
from ..main import Context, echo_info, loose_option, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@loose_option
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, loose: Optional[bool]) -> None:
    """Print VERSIONS one per line, lowest precedence first.

    Versions with equal precedence keep their input order. Each version is
    printed as it was given.

    \b
    Examples:
        semverkit sort 1.10.0 1.2.0 1.2.0-rc.1
        semverkit sort --reverse --loose v2 v1.5
    """
    parsed = [(ctx.parse_version(text, loose), text) for text in versions]
    parsed.sort(key=lambda item: version_key(item[0]), reverse=reverse)

    for _, text in parsed:
        echo_info(text)
