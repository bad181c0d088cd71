# SPDX-License-Identifier: MIT
"""Encode a package descriptor into a canonical tarball filename.

Filename forms, before percent-encoding:
- semver: {name}-{version}.tar.gz, or {name}%{version}.tar.gz when a
  plain hyphen would not decode back to the same name and version
- git: {domain}/{path}#{commit}.tar.gz
- url: {host}{path}, with .tar.gz appended unless it already ends in a
  tarball extension

The result is fully percent-encoded, so it is safe as a bare filename or as
a single URL path segment.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable
from urllib.parse import quote, urlsplit, urlunsplit

from .decoder import decode_semver
from .errors import (
    EncodeError,
    EncodeErrorKind,
    MissingValueError,
    WrongTypeError,
    expect_nonempty_string,
)
from .grammar import (
    COMMIT_HASH_PATTERN,
    DEFAULT_EXTENSION,
    PACKAGE_NAME_PATTERN,
    SEMVER_PATTERN,
    VERSION_SIGNAL,
)
from .predicates import has_tarball_extension, is_version_ambiguous

logger = logging.getLogger(__name__)

# Left unescaped, matching what browsers leave alone in a URI component
_SAFE_CHARS = "!*'()"

# Not escaped by quote(), but refused by parse() at the start of a filename
_LEADING_UNSAFE = (".", "_")


def _needs_version_signal(name: str, version: str) -> bool:
    """Check whether a plain hyphen join would lose the name/version split."""
    if is_version_ambiguous(name, version):
        return True
    decoded = decode_semver(f"{name}-{version}{DEFAULT_EXTENSION}")
    return decoded is None or decoded.package_name != name or decoded.full_version != version


def _compose_semver(data: Mapping[str, Any]) -> str:
    name = expect_nonempty_string(data.get("name"), "name field")
    version = expect_nonempty_string(data.get("version"), "version field")

    if not PACKAGE_NAME_PATTERN.fullmatch(name):
        raise EncodeError(
            EncodeErrorKind.INVALID_NAME, name, f"name is not a valid package name: {name}"
        )
    if not SEMVER_PATTERN.fullmatch(version):
        raise EncodeError(
            EncodeErrorKind.INVALID_VERSION,
            version,
            f"version is not valid by semver 2.0: {version}",
        )

    if _needs_version_signal(name, version):
        logger.debug("Signalling version boundary for %r at %r", name, version)
        return f"{name}{VERSION_SIGNAL}{version}{DEFAULT_EXTENSION}"
    return f"{name}-{version}{DEFAULT_EXTENSION}"


def _compose_git(data: Mapping[str, Any]) -> str:
    domain = expect_nonempty_string(data.get("domain"), "domain field")
    path = expect_nonempty_string(data.get("path"), "path field")
    commit = expect_nonempty_string(data.get("commit"), "commit field")

    if not COMMIT_HASH_PATTERN.fullmatch(commit):
        raise EncodeError(
            EncodeErrorKind.INVALID_COMMIT,
            commit,
            f"commit is not a valid commit hash: {commit}",
        )
    if domain.startswith(_LEADING_UNSAFE) or "/" in domain:
        raise EncodeError(
            EncodeErrorKind.INVALID_DOMAIN,
            domain,
            f"domain cannot start with . or _ or contain /: {domain}",
        )
    if "#" in path:
        raise EncodeError(
            EncodeErrorKind.INVALID_PATH, path, f"path cannot contain #: {path}"
        )

    return f"{domain}/{path}#{commit}{DEFAULT_EXTENSION}"


def _url_host_and_path(url: str) -> str:
    """Return host + path (+ query) for a URL that survives re-serialization.

    Rejects anything without a scheme, a //host, or a path beyond "/", and
    anything a URL serializer would write differently (e.g. an upper-case
    scheme or host), since the decoded filename could not reproduce it.
    An empty host, or one starting with . or _, is also refused.
    """
    unusable = EncodeError(
        EncodeErrorKind.INVALID_URL, url, f"value given for url does not look usable: {url}"
    )
    try:
        parts = urlsplit(url)
    except ValueError:
        raise unusable from None

    if not (parts.scheme and parts.netloc and parts.path) or parts.path == "/":
        raise unusable

    userinfo, at, host = parts.netloc.rpartition("@")
    canonical = urlunsplit(
        (parts.scheme, userinfo + at + host.lower(), parts.path, parts.query, parts.fragment)
    )
    if canonical != url:
        raise unusable
    if not host or host.startswith(_LEADING_UNSAFE):
        raise unusable

    raw = host + parts.path
    if parts.query:
        raw += "?" + parts.query
    return raw


def _compose_url(data: Mapping[str, Any]) -> str:
    url = expect_nonempty_string(data.get("url"), "url field")
    raw = _url_host_and_path(url)
    if not has_tarball_extension(raw):
        raw += DEFAULT_EXTENSION
    return raw


_COMPOSERS: dict[str, Callable[[Mapping[str, Any]], str]] = {
    "semver": _compose_semver,
    "git": _compose_git,
    "url": _compose_url,
}


def make_tarball_name(data: Mapping[str, Any]) -> str:
    """Build a percent-encoded tarball filename from a descriptor mapping.

    Args:
        data: Mapping with a ``type`` of "semver" (``name``, ``version``),
            "git" (``domain``, ``path``, ``commit``) or "url" (``url``)

    Returns:
        Filename ending in a tarball extension that parse() decodes back
        to the same name and version, repository and commit, or host and path

    Raises:
        MissingValueError: If data or a required field is missing or empty
        WrongTypeError: If data is not a mapping or a field is not a string
        EncodeError: If a field fails validation or the type is unknown

    Examples:
        >>> make_tarball_name({"type": "semver", "name": "my-package", "version": "1.2.3"})
        'my-package-1.2.3.tar.gz'
        >>> make_tarball_name({"type": "semver", "name": "pkg", "version": "1.2.3-4.5.6"})
        'pkg%251.2.3-4.5.6.tar.gz'
    """
    if data is None:
        raise MissingValueError("information required")
    if not isinstance(data, Mapping):
        raise WrongTypeError(f"argument must be a mapping, got {type(data).__name__}")

    kind = expect_nonempty_string(data.get("type"), "type field")
    compose = _COMPOSERS.get(kind)
    if compose is None:
        raise EncodeError(EncodeErrorKind.UNKNOWN_TYPE, kind, f"Type '{kind}' not recognized")

    return quote(compose(data), safe=_SAFE_CHARS)
