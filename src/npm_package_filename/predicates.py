# SPDX-License-Identifier: MIT
"""Cheap checks that do not require a full parse."""

from __future__ import annotations

from typing import Optional

from .errors import expect_string
from .grammar import AMBIGUOUS_VERSION_PATTERN, TARBALL_EXT_PATTERN


def has_tarball_extension(filename: str) -> bool:
    """Check whether a string ends in .tar, .tgz or .tar.gz (any case).

    Works on filenames that do not otherwise follow the package naming
    rules, so it can be used to pre-filter a directory listing.

    Examples:
        >>> has_tarball_extension("my-package-1.2.3.TGZ")
        True
        >>> has_tarball_extension("my-package-1.2.3.tar.bz2")
        False
    """
    expect_string(filename, "argument")
    return TARBALL_EXT_PATTERN.search(filename) is not None


def is_version_ambiguous(name: str, version: Optional[str] = None) -> bool:
    """Check whether a name/version pair has more than one hyphen split.

    ``my-package-1.2.3-4.5.6`` reads either as ``my-package`` at
    ``1.2.3-4.5.6`` or as ``my-package-1.2.3`` at ``4.5.6``. When a version is
    given it is hyphen-joined to the name before testing; otherwise the
    name is tested as-is.

    Examples:
        >>> is_version_ambiguous("my-package", "1.2.3")
        False
        >>> is_version_ambiguous("my-package-1.2.3-4.5.6.tgz")
        True
    """
    expect_string(name, "argument")
    if version is not None:
        expect_string(version, "second argument")

    candidate = f"{name}-{version}" if version else name
    return AMBIGUOUS_VERSION_PATTERN.search(candidate) is not None
