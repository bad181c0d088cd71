# SPDX-License-Identifier: MIT
"""Reversible tarball filenames for npm packages.

This package encodes where a package tarball came from (a registry version,
a git commit, or a URL) into a single URL-safe filename, and decodes such
filenames back, so a flat directory of tarballs needs no side metadata.

Example:
    >>> from npm_package_filename import make_tarball_name, parse
    >>>
    >>> filename = make_tarball_name(
    ...     {"type": "semver", "name": "@my-scope/my-package", "version": "1.2.3-beta.4"}
    ... )
    >>> filename
    '%40my-scope%2Fmy-package-1.2.3-beta.4.tar.gz'
    >>>
    >>> descriptor = parse(filename)
    >>> descriptor.package_name
    '@my-scope/my-package'
    >>> descriptor.prerelease
    'beta.4'
"""

__version__ = "0.1.0"

from .decoder import parse
from .descriptors import (
    Descriptor,
    GitDescriptor,
    SemverDescriptor,
    UrlDescriptor,
)
from .encoder import make_tarball_name
from .errors import (
    EncodeError,
    EncodeErrorKind,
    FilenameError,
    MissingValueError,
    WrongTypeError,
)
from .grammar import DEFAULT_EXTENSION, VERSION_SIGNAL
from .predicates import has_tarball_extension, is_version_ambiguous

__all__ = [
    # Codec
    "parse",
    "make_tarball_name",
    "has_tarball_extension",
    "is_version_ambiguous",
    # Descriptors
    "Descriptor",
    "SemverDescriptor",
    "GitDescriptor",
    "UrlDescriptor",
    # Errors
    "FilenameError",
    "MissingValueError",
    "WrongTypeError",
    "EncodeError",
    "EncodeErrorKind",
    # Constants
    "DEFAULT_EXTENSION",
    "VERSION_SIGNAL",
]
