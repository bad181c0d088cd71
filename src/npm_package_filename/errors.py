# SPDX-License-Identifier: MIT
"""Exceptions raised by the tarball filename codec.

Argument problems are reported as MissingValueError or WrongTypeError.
Encoding failures carry an EncodeErrorKind so callers can branch on the
kind of failure instead of matching message text. Decoding never raises
for an unrecognized filename; parse() returns None instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class FilenameError(Exception):
    """Base class for errors raised by npm_package_filename."""

    pass


class MissingValueError(FilenameError, ValueError):
    """Raised when a required argument or field is absent, None, or empty."""

    pass


class WrongTypeError(FilenameError, TypeError):
    """Raised when an argument or field is present but of the wrong kind."""

    pass


class EncodeErrorKind(str, Enum):
    """Reasons make_tarball_name() can refuse a well-formed descriptor."""

    INVALID_NAME = "invalid_name"
    INVALID_VERSION = "invalid_version"
    INVALID_DOMAIN = "invalid_domain"
    INVALID_PATH = "invalid_path"
    INVALID_COMMIT = "invalid_commit"
    INVALID_URL = "invalid_url"
    UNKNOWN_TYPE = "unknown_type"


class EncodeError(FilenameError, ValueError):
    """Raised when a descriptor fails semantic validation during encoding."""

    def __init__(self, kind: EncodeErrorKind, value: Any, message: str = ""):
        self.kind = kind
        self.value = value
        self.message = message or f"{kind.value}: {value!r}"
        super().__init__(self.message)


def expect_string(value: Any, label: str) -> str:
    """Require a str, raising MissingValueError for None."""
    if value is None:
        raise MissingValueError(f"no {label} given")
    if not isinstance(value, str):
        raise WrongTypeError(f"{label} must be a string, got {type(value).__name__}")
    return value


def expect_nonempty_string(value: Any, label: str) -> str:
    """Require a non-empty str."""
    expect_string(value, label)
    if not value:
        raise MissingValueError(f"{label} must not be empty")
    return value
