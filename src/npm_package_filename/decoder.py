# SPDX-License-Identifier: MIT
"""Decode a tarball filename into the descriptor it was built from.

Grammars are tried in a fixed order:
1. Reject filenames carrying characters that should have been escaped
2. Percent-decode
3. Semver: strict grammar if the version signal is present; otherwise the
   loose grammar, unless the name/version split is ambiguous
4. Git repository at a commit
5. Anything shaped like host/path

A filename that matches none of these decodes to None.
"""

from __future__ import annotations

import logging
import posixpath
import re
from typing import Optional
from urllib.parse import unquote, urlsplit

from .descriptors import Descriptor, GitDescriptor, SemverDescriptor, UrlDescriptor
from .errors import expect_string
from .grammar import (
    AMBIGUOUS_VERSION_PATTERN,
    GIT_FILENAME_PATTERN,
    INVALID_CHARS_PATTERN,
    LOOSE_FILENAME_PATTERN,
    STRICT_FILENAME_PATTERN,
    VERSION_SIGNAL,
)

logger = logging.getLogger(__name__)

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")


def _percent_decode(filename: str) -> Optional[str]:
    """Percent-decode, returning None for malformed escape sequences."""
    if _MALFORMED_ESCAPE.search(filename):
        return None
    try:
        return unquote(filename, errors="strict")
    except UnicodeDecodeError:
        return None


def decode_semver(decoded: str) -> Optional[SemverDescriptor]:
    """Match an already-decoded filename against the semver grammars.

    A filename containing the version signal is only tried against the
    strict grammar. Without the signal, an ambiguous name/version split is
    refused rather than guessed.
    """
    if VERSION_SIGNAL in decoded:
        match = STRICT_FILENAME_PATTERN.fullmatch(decoded)
    elif AMBIGUOUS_VERSION_PATTERN.search(decoded):
        logger.debug("Ambiguous name/version split in %r", decoded)
        return None
    else:
        match = LOOSE_FILENAME_PATTERN.fullmatch(decoded)

    if not match:
        return None

    numeric = match.group("version")
    prerelease = match.group("prerelease")
    return SemverDescriptor(
        package_name=match.group("name"),
        version_comparable=f"{numeric}-{prerelease}" if prerelease else numeric,
        version_numeric=numeric,
        prerelease=prerelease or None,
        build=match.group("build") or None,
        extension=match.group("extension"),
    )


def decode_git(decoded: str) -> Optional[GitDescriptor]:
    """Match an already-decoded filename against the git grammar."""
    match = GIT_FILENAME_PATTERN.fullmatch(decoded)
    if not match:
        return None
    return GitDescriptor(
        domain=match.group("domain"),
        path=match.group("path"),
        commit=match.group("commit"),
        extension=match.group("extension"),
    )


def decode_url(decoded: str) -> Optional[UrlDescriptor]:
    """Accept any string whose path has both a directory and a final component.

    A query counts as part of the path, so "host?x=/a/b" is accepted.
    This does not assert that the string is a reachable URL, or that it
    has a scheme.
    """
    try:
        parts = urlsplit(decoded)
    except ValueError:
        return None

    path = parts.path
    if parts.query:
        path += "?" + parts.query

    directory, base = posixpath.split(path.rstrip("/"))
    if directory and base:
        return UrlDescriptor(url=decoded)
    return None


def parse(filename: str) -> Optional[Descriptor]:
    """Parse a tarball filename into a descriptor.

    Args:
        filename: A percent-encoded filename, as produced by make_tarball_name()

    Returns:
        A SemverDescriptor, GitDescriptor or UrlDescriptor, or None if the
        filename is not a recognized tarball filename

    Raises:
        MissingValueError: If filename is None
        WrongTypeError: If filename is not a string

    Examples:
        >>> parse("my-package-1.2.3.tgz").version_comparable
        '1.2.3'
        >>> parse("package.json") is None
        True
    """
    expect_string(filename, "argument")

    # Only '%' and '@' are allowed to stand in for escaped content
    if INVALID_CHARS_PATTERN.search(filename):
        logger.debug("Rejected %r: contains characters that must be escaped", filename)
        return None

    decoded = _percent_decode(filename)
    if decoded is None:
        logger.debug("Rejected %r: malformed percent-encoding", filename)
        return None

    descriptor: Optional[Descriptor] = (
        decode_semver(decoded) or decode_git(decoded) or decode_url(decoded)
    )
    if descriptor is None:
        logger.debug("No grammar matched %r", decoded)
    else:
        logger.debug("Parsed %r as %s", filename, descriptor.type)
    return descriptor
