# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Two parsers share one pipeline. :func:`parse` follows the SemVer 2.0.0
grammar strictly. :func:`parse_loosely` accepts a leading ``v``, missing
minor/patch numbers and trailing text that has no ``-``/``+`` separator.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ParseError, ParseErrorKind, internal_error

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)

# Characters allowed in pre-release and build tags (dot is the identifier separator)
_TAG_CHARS = frozenset(string.ascii_letters + string.digits + ".-")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" if none
        build: Build metadata (e.g., "build.123", "20240101"), "" if none
    """

    major: int
    minor: int
    patch: int
    pre: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return to_string(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre != ""

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


EMPTY_VERSION = Version(0, 0, 0)


def _fail(kind: ParseErrorKind, message: str) -> ParseError:
    logger.debug("Rejected version (%s): %s", kind.name, message)
    return ParseError(kind, message)


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def scan(text: str) -> tuple[str, str, str, str]:
    """Split ``text`` into major, minor and patch digit runs plus the remainder.

    Only ASCII digits are taken as part of a number. The scan stops at the
    first position that does not continue the ``digits(.digits(.digits))``
    shape, and whatever is left over is returned untouched as the remainder.
    This never fails: "abc" scans to ``("", "", "", "abc")``.

    Examples:
        >>> scan("1.2.3-rc.1")
        ('1', '2', '3', '-rc.1')
        >>> scan("1-beta")
        ('1', '', '', '-beta')
    """
    fields: list[str] = []
    pos = 0
    for index in range(3):
        if index > 0:
            if text[pos : pos + 1] != ".":
                break
            pos += 1
        end = _digit_run_end(text, pos)
        fields.append(text[pos:end])
        pos = end

    fields.extend([""] * (3 - len(fields)))
    if len(fields) != 3:
        raise internal_error(f"scanner produced {len(fields)} core fields for {text!r}")

    major, minor, patch = fields
    return major, minor, patch, text[pos:]


def parse_component(field: str) -> int:
    """Convert a digit run to an integer, treating "" as 0.

    Raises:
        ValueError: If ``field`` is not made of ASCII digits only
    """
    if field == "":
        return 0
    if not all(ch in _DIGITS for ch in field):
        raise ValueError(f'"{field}" is not a non-negative integer')
    return int(field)


def _first_invalid_char(tag: str) -> Optional[str]:
    for ch in tag:
        if ch not in _TAG_CHARS:
            return ch
    return None


def _check_build(build: str) -> None:
    bad = _first_invalid_char(build)
    if bad is not None:
        raise _fail(
            ParseErrorKind.INVALID_BUILD,
            f'Invalid character "{bad}" in build metadata "{build}"',
        )


def split_tags(remainder: str, strict: bool) -> tuple[str, str]:
    """Split the text following the core version into pre-release and build.

    Args:
        remainder: Text left over after the ``major.minor.patch`` digits
        strict: Enforce non-empty tags, valid characters and separators

    Returns:
        A ``(pre, build)`` tuple, each "" when absent

    Raises:
        ParseError: In strict mode only, when the tags are malformed
    """
    if remainder == "":
        return "", ""

    if remainder.startswith("+"):
        build = remainder[1:]
        if strict:
            if build == "":
                raise _fail(
                    ParseErrorKind.MISSING_BUILD,
                    f'Missing build metadata after "+" in "{remainder}"',
                )
            _check_build(build)
        return "", build

    if remainder.startswith("-"):
        pre, sep, build = remainder[1:].partition("+")
        if strict:
            if pre == "":
                raise _fail(
                    ParseErrorKind.MISSING_PRE_RELEASE,
                    f'Missing pre-release after "-" in "{remainder}"',
                )
            if sep and build == "":
                raise _fail(
                    ParseErrorKind.MISSING_BUILD,
                    f'Missing build metadata after "+" in "{remainder}"',
                )
            bad = _first_invalid_char(pre)
            if bad is not None:
                raise _fail(
                    ParseErrorKind.INVALID_PRE_RELEASE,
                    f'Invalid character "{bad}" in pre-release "{pre}"',
                )
            _check_build(build)
        return pre, build

    if strict:
        raise _fail(
            ParseErrorKind.MISSING_PRE_OR_BUILD_SEPARATOR,
            f'Expected "-" or "+" before "{remainder}"',
        )

    logger.debug("Treating unseparated trailing text %r as build metadata", remainder)
    return "", remainder


def _parse_core_field(digits: str, kind: ParseErrorKind, name: str) -> int:
    try:
        return parse_component(digits)
    except ValueError as e:
        raise _fail(kind, f'Invalid {name} version "{digits}"') from e


def _parse(text: str, strict: bool) -> Version:
    major_digits, minor_digits, patch_digits, remainder = scan(text)

    if major_digits == "":
        raise _fail(ParseErrorKind.MISSING_MAJOR, f'Missing major version in "{text}"')
    if strict:
        if minor_digits == "":
            raise _fail(ParseErrorKind.MISSING_MINOR, f'Missing minor version in "{text}"')
        if patch_digits == "":
            raise _fail(ParseErrorKind.MISSING_PATCH, f'Missing patch version in "{text}"')

    major = _parse_core_field(major_digits, ParseErrorKind.INVALID_MAJOR, "major")
    minor = _parse_core_field(minor_digits, ParseErrorKind.INVALID_MINOR, "minor")
    patch = _parse_core_field(patch_digits, ParseErrorKind.INVALID_PATCH, "patch")

    pre, build = split_tags(remainder, strict)
    return Version(major, minor, patch, pre, build)


def _require_str(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, got {type(text).__name__}")


def parse(text: str) -> Version:
    """Parse a strict SemVer 2.0.0 version string.

    Args:
        text: A string in ``MAJOR.MINOR.PATCH[-prerelease][+build]`` format

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string is not a valid semantic version
        TypeError: If ``text`` is not a string

    Examples:
        >>> parse("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, pre='alpha.1', build='')

        >>> parse("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, pre='rc.1', build='build.456')
    """
    _require_str(text)
    if text == "":
        raise _fail(ParseErrorKind.EMPTY_INPUT, "Version string cannot be empty")
    return _parse(text, strict=True)


def parse_loosely(text: str) -> Version:
    """Parse a version string, accepting common non-conformant forms.

    A single leading ``v`` is stripped, missing minor and patch numbers
    default to 0, tags are not validated, and trailing text that is not
    introduced by ``-`` or ``+`` is kept verbatim as build metadata. Only a
    missing major number is rejected. "" and "v" parse to ``EMPTY_VERSION``.

    Examples:
        >>> parse_loosely("v1.2")
        Version(major=1, minor=2, patch=0, pre='', build='')

        >>> parse_loosely("1.2.3.4")
        Version(major=1, minor=2, patch=3, pre='', build='.4')
    """
    _require_str(text)
    if text in ("", "v"):
        return EMPTY_VERSION
    if text.startswith("v"):
        text = text[1:]
    return _parse(text, strict=False)


def to_string(version: Version) -> str:
    """Render the canonical ``major.minor.patch[-pre][+build]`` form."""
    return _with_tags(version.base_version, version)


def to_string_concise(version: Version) -> str:
    """Render the shortest form that :func:`parse_loosely` reads back.

    Zero minor and patch numbers are dropped. When only the minor number is
    zero it is kept as a ``.0`` placeholder so the patch stays in place.

    Examples:
        >>> to_string_concise(Version(1, 0, 0))
        '1'
        >>> to_string_concise(Version(1, 0, 4, "rc.1"))
        '1.0.4-rc.1'
    """
    text = str(version.major)
    if version.minor != 0:
        text += f".{version.minor}"
    if version.patch != 0:
        if version.minor == 0:
            text += ".0"
        text += f".{version.patch}"
    return _with_tags(text, version)


def _with_tags(core: str, version: Version) -> str:
    if version.pre:
        core += f"-{version.pre}"
    if version.build:
        core += f"+{version.build}"
    return core


def is_valid(text: str) -> bool:
    """Check if a string is a valid strict semantic version.

    Examples:
        >>> is_valid("1.0.0")
        True
        >>> is_valid("1.0")
        False
    """
    try:
        parse(text)
    except (ParseError, TypeError):
        return False
    return True


def is_valid_loose(text: str) -> bool:
    """Check if a string is accepted by :func:`parse_loosely`."""
    try:
        parse_loosely(text)
    except (ParseError, TypeError):
        return False
    return True


def coerce(value: Union[str, Version], loose: bool = False) -> Version:
    """Return ``value`` as a Version, parsing it first if it is a string.

    Raises:
        ParseError: If ``value`` is a malformed version string
        TypeError: If ``value`` is neither a string nor a Version
    """
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse_loosely(value) if loose else parse(value)
    raise TypeError(f"Expected a version string or Version, got {type(value).__name__}")
