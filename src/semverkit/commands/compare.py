# SPDX-License-Identifier: MIT
"""Compare two versions by SemVer precedence."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import Order, are_compatible, compare as compare_versions
from ..main import Context, echo_info, loose_option, pass_context

_ORDER_NAMES = {
    Order.LT: "lt",
    Order.EQ: "eq",
    Order.GT: "gt",
}


@click.command()
@click.argument("version1")
@click.argument("version2")
@loose_option
@pass_context
def compare(ctx: Context, version1: str, version2: str, loose: Optional[bool]) -> None:
    """Print lt, eq or gt for VERSION1 relative to VERSION2.

    Build metadata is ignored.

    \b
    Examples:
        semverkit compare 1.0.0-alpha 1.0.0   # lt
        semverkit compare 1.0.0+a 1.0.0+b     # eq
    """
    v1 = ctx.parse_version(version1, loose)
    v2 = ctx.parse_version(version2, loose)
    echo_info(_ORDER_NAMES[compare_versions(v1, v2)])


@click.command()
@click.argument("version1")
@click.argument("version2")
@loose_option
@pass_context
def compatible(ctx: Context, version1: str, version2: str, loose: Optional[bool]) -> None:
    """Check that VERSION1 is on VERSION2's major line and not newer.

    Exits with status 1 when the versions are incompatible.

    \b
    Examples:
        semverkit compatible 1.2.3 1.4.0   # compatible
        semverkit compatible 2.0.0 1.9.9   # incompatible
    """
    v1 = ctx.parse_version(version1, loose)
    v2 = ctx.parse_version(version2, loose)

    if are_compatible(v1, v2):
        echo_info("compatible")
        return

    echo_info("incompatible")
    raise SystemExit(1)
