# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, format, parse, sort

__all__ = ["compare", "format", "parse", "sort"]
