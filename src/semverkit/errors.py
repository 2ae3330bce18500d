# SPDX-License-Identifier: MIT
"""Error taxonomy for semantic version parsing.

Every parse failure is reported as a :class:`ParseError` whose ``kind`` is one
member of the closed :class:`ParseErrorKind` enum. Callers that need to react
to a specific failure dispatch on ``err.kind`` rather than on the message.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """The cause of a failed parse."""

    EMPTY_INPUT = "empty_input"
    MISSING_MAJOR = "missing_major"
    MISSING_MINOR = "missing_minor"
    MISSING_PATCH = "missing_patch"
    MISSING_PRE_OR_BUILD_SEPARATOR = "missing_pre_or_build_separator"
    MISSING_PRE_RELEASE = "missing_pre_release"
    MISSING_BUILD = "missing_build"
    INVALID_MAJOR = "invalid_major"
    INVALID_MINOR = "invalid_minor"
    INVALID_PATCH = "invalid_patch"
    INVALID_PRE_RELEASE = "invalid_pre_release"
    INVALID_BUILD = "invalid_build"
    INTERNAL_CODE_POINT_ERROR = "internal_code_point_error"
    INTERNAL_ERROR = "internal_error"

    @property
    def is_internal(self) -> bool:
        """Return True for kinds that indicate a bug in this library."""
        return self in (ParseErrorKind.INTERNAL_CODE_POINT_ERROR, ParseErrorKind.INTERNAL_ERROR)


class ParseError(ValueError):
    """Raised when a string cannot be parsed as a semantic version.

    Attributes:
        kind: Which parse rule was violated
        message: Human-readable description, quoting the offending text
    """

    def __init__(self, kind: ParseErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.message!r})"


def internal_error(detail: str) -> ParseError:
    """Build the error raised when the scanner reaches an impossible state."""
    return ParseError(
        ParseErrorKind.INTERNAL_ERROR,
        f"Internal error, please report this as a bug: {detail}",
    )
