# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and comparison.

This package parses, serializes and orders version identifiers following
the SemVer 2.0.0 specification, with a lenient parser for the non-conformant
forms commonly found in the wild (``v1.2``, ``1.2.3.4``).

Example:
    >>> from semverkit import parse, parse_loosely, compare, to_string_concise
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre
    'alpha.1'
    >>>
    >>> to_string_concise(parse_loosely("v2"))
    '2'
    >>>
    >>> compare(parse("1.0.0"), parse("1.0.0-rc.1"))
    <Order.GT: 1>
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    ParseErrorKind,
)
from .semver import (
    EMPTY_VERSION,
    Version,
    coerce,
    is_valid,
    is_valid_loose,
    parse,
    parse_component,
    parse_loosely,
    scan,
    split_tags,
    to_string,
    to_string_concise,
)
from .compare import (
    Order,
    are_compatible,
    are_equal,
    are_equal_core,
    compare,
    compare_core,
    compare_pre_release_strings,
    guard_compatible,
    guard_eq,
    guard_gt,
    guard_gte,
    guard_lt,
    guard_lte,
    is_eq,
    is_gt,
    is_gte,
    is_lt,
    is_lte,
    max_version,
    min_version,
    version_key,
)

__all__ = [
    # Errors
    "ParseError",
    "ParseErrorKind",
    # Parsing and formatting
    "EMPTY_VERSION",
    "Version",
    "coerce",
    "is_valid",
    "is_valid_loose",
    "parse",
    "parse_component",
    "parse_loosely",
    "scan",
    "split_tags",
    "to_string",
    "to_string_concise",
    # Comparison
    "Order",
    "are_compatible",
    "are_equal",
    "are_equal_core",
    "compare",
    "compare_core",
    "compare_pre_release_strings",
    "guard_compatible",
    "guard_eq",
    "guard_gt",
    "guard_gte",
    "guard_lt",
    "guard_lte",
    "is_eq",
    "is_gt",
    "is_gte",
    "is_lt",
    "is_lte",
    "max_version",
    "min_version",
    "version_key",
]
