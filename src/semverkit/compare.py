# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import string
from enum import IntEnum
from functools import cmp_to_key
from typing import Callable, Iterable, TypeVar, Union

from .semver import Version, coerce

T = TypeVar("T")

_DIGITS = frozenset(string.digits)


class Order(IntEnum):
    """Result of a comparison, usable as a classic -1/0/1 cmp value."""

    LT = -1
    EQ = 0
    GT = 1


def _order(left, right) -> Order:
    if left < right:
        return Order.LT
    if left > right:
        return Order.GT
    return Order.EQ


def _is_numeric(identifier: str) -> bool:
    return identifier != "" and all(ch in _DIGITS for ch in identifier)


def _compare_identifiers(id1: str, id2: str) -> Order:
    """Compare a single pair of dot-separated pre-release identifiers."""
    is_num1 = _is_numeric(id1)
    is_num2 = _is_numeric(id2)

    if is_num1 and is_num2:
        return _order(int(id1), int(id2))
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return Order.LT
    if is_num2:
        return Order.GT
    return _order(id1, id2)


def compare_core(version1: Version, version2: Version) -> Order:
    """Compare ``major.minor.patch`` only, ignoring pre-release and build."""
    return _order(
        (version1.major, version1.minor, version1.patch),
        (version2.major, version2.minor, version2.patch),
    )


def compare_pre_release_strings(pre1: str, pre2: str) -> Order:
    """Compare two pre-release strings by SemVer precedence.

    An empty string means "no pre-release", which ranks above any
    pre-release (1.0.0 > 1.0.0-alpha). Otherwise identifiers are compared
    left to right: numeric ones numerically, alphanumeric ones by code point,
    and a numeric identifier always ranks below an alphanumeric one. When
    one list is a prefix of the other, the shorter list ranks lower.

    Examples:
        >>> compare_pre_release_strings("alpha.10", "alpha.8")
        <Order.GT: 1>
        >>> compare_pre_release_strings("", "rc.1")
        <Order.GT: 1>
    """
    if pre1 == "" and pre2 == "":
        return Order.EQ
    if pre1 == "":
        return Order.GT
    if pre2 == "":
        return Order.LT

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifiers(p1, p2)
        if result != Order.EQ:
            return result

    return _order(len(parts1), len(parts2))


def compare(version1: Version, version2: Version) -> Order:
    """Compare two versions by SemVer precedence.

    Examples:
        >>> compare(Version(1, 0, 0, "rc.1"), Version(1, 0, 0))
        <Order.LT: -1>
    """
    result = compare_core(version1, version2)
    if result != Order.EQ:
        return result
    return compare_pre_release_strings(version1.pre, version2.pre)


def are_equal_core(version1: Version, version2: Version) -> bool:
    """Return True if both versions share ``major.minor.patch``."""
    return compare_core(version1, version2) == Order.EQ


def are_equal(version1: Version, version2: Version) -> bool:
    """Return True if every field matches, build metadata included.

    This is stricter than precedence: ``1.0.0+a`` and ``1.0.0+b`` compare
    equal but are not equal.
    """
    return (
        are_equal_core(version1, version2)
        and version1.pre == version2.pre
        and version1.build == version2.build
    )


def are_compatible(version1: Version, version2: Version) -> bool:
    """Return True if ``version1`` is on the same major line and not newer.

    Examples:
        >>> are_compatible(Version(1, 2, 3), Version(1, 2, 4))
        True
        >>> are_compatible(Version(2, 0, 0), Version(1, 9, 9))
        False
    """
    return version1.major == version2.major and compare(version1, version2) != Order.GT


def is_lt(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) == Order.LT


def is_lte(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) != Order.GT


def is_eq(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) == Order.EQ


def is_gt(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) == Order.GT


def is_gte(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) != Order.LT


def guard_compatible(
    version1: Version, version2: Version, fallback: T, callback: Callable[[], T]
) -> T:
    """Run ``callback`` only when ``are_compatible(version1, version2)`` holds.

    Returns ``callback()``'s result in that case and ``fallback`` otherwise,
    in which case ``callback`` is never called.

    Examples:
        >>> guard_compatible(Version(1, 0, 0), Version(1, 1, 0), "upgrade needed", lambda: "ok")
        'ok'
    """
    if are_compatible(version1, version2):
        return callback()
    return fallback


def guard_lt(version1: Version, version2: Version, fallback: T, callback: Callable[[], T]) -> T:
    """Like :func:`guard_compatible`, for ``version1 < version2``."""
    if is_lt(version1, version2):
        return callback()
    return fallback


def guard_lte(version1: Version, version2: Version, fallback: T, callback: Callable[[], T]) -> T:
    """Like :func:`guard_compatible`, for ``version1 <= version2``."""
    if is_lte(version1, version2):
        return callback()
    return fallback


def guard_eq(version1: Version, version2: Version, fallback: T, callback: Callable[[], T]) -> T:
    """Like :func:`guard_compatible`, for equal precedence."""
    if is_eq(version1, version2):
        return callback()
    return fallback


def guard_gt(version1: Version, version2: Version, fallback: T, callback: Callable[[], T]) -> T:
    """Like :func:`guard_compatible`, for ``version1 > version2``."""
    if is_gt(version1, version2):
        return callback()
    return fallback


def guard_gte(version1: Version, version2: Version, fallback: T, callback: Callable[[], T]) -> T:
    """Like :func:`guard_compatible`, for ``version1 >= version2``."""
    if is_gte(version1, version2):
        return callback()
    return fallback


_compare_key = cmp_to_key(compare)


def version_key(version: Union[str, Version]):
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string (parsed strictly) or Version object

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _compare_key(coerce(version))


def max_version(versions: Iterable[Version]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    items = list(versions)
    if not items:
        raise ValueError("max_version() arg is an empty iterable")
    return max(items, key=version_key)


def min_version(versions: Iterable[Version]) -> Version:
    """Return the version with the lowest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    items = list(versions)
    if not items:
        raise ValueError("min_version() arg is an empty iterable")
    return min(items, key=version_key)
