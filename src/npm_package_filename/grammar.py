# SPDX-License-Identifier: MIT
"""Pattern grammar for npm package tarball filenames.

Fragments are plain strings so they can be composed; the compiled patterns
at the bottom of the module are built once at import time and shared by the
encoder, the decoder and the predicates.

Filename patterns are meant to be applied to filenames that have already
been percent-decoded. Capture groups:
- name: the bare package name, possibly scoped (@scope/name)
- version: the numeric triplet of the version
- prerelease: pre-release identifiers (optional)
- build: build metadata (optional)
- extension: the tarball extension, including the leading dot

References:
- SemVer 2.0.0: https://semver.org/
"""

from __future__ import annotations

import re

# Reserved between name and version when a plain hyphen would be ambiguous
VERSION_SIGNAL = "%"

DEFAULT_EXTENSION = ".tar.gz"

VALID_NAME = r"[a-zA-Z0-9~!*()'-][a-zA-Z0-9~!*()'_.-]*"

NUMBER = r"(?:0|[1-9][0-9]*)"

# A name whose hyphen-led segments can never end in a full numeric triplet,
# so the boundary before the version can be inferred without a signal.
NAME_BEFORE_VERSION = "".join(
    [
        VALID_NAME,
        r"(?:-(?:",
        NUMBER,
        r"(?:\.(?:",
        NUMBER,
        r"\.?)?)?|(?:[a-zA-Z~!*()'_.]|",
        NUMBER,
        r"(?:[a-zA-Z~!*()'_]|\.(?:[a-zA-Z~!*()'_.]|",
        NUMBER,
        r"(?:[a-zA-Z~!*()'_]|\.[a-zA-Z~!*()'_.]))))[a-zA-Z0-9~!*()'_.]*))*",
    ]
)

NUMERIC_TRIPLET = r"\.".join([NUMBER, NUMBER, NUMBER])

PRERELEASE_ID = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"

SEMVER_PRERELEASE = PRERELEASE_ID + r"(?:\." + PRERELEASE_ID + r")*"

SEMVER_BUILD = r"[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*"

COMMIT_HASH = r"[0-9a-fA-F]{40}"

TARBALL_EXT = r"\.[tT](?:[gG][zZ]|[aA][rR](?:\.[gG][zZ])?)"

SCOPED_NAME = "@" + VALID_NAME + "/" + VALID_NAME

_VERSION_TAIL = "".join(
    [
        r"(?:-(?P<prerelease>",
        SEMVER_PRERELEASE,
        r"))?",
        r"(?:\+(?P<build>",
        SEMVER_BUILD,
        r"))?",
        r"(?P<extension>",
        TARBALL_EXT,
        r")",
    ]
)

# Full-string patterns; apply with fullmatch()
SEMVER_PATTERN = re.compile(
    NUMERIC_TRIPLET + r"(?:-" + SEMVER_PRERELEASE + r")?(?:\+" + SEMVER_BUILD + r")?"
)

PACKAGE_NAME_PATTERN = re.compile(r"(?:" + VALID_NAME + r"|" + SCOPED_NAME + r")")

COMMIT_HASH_PATTERN = re.compile(COMMIT_HASH)

STRICT_FILENAME_PATTERN = re.compile(
    r"(?P<name>" + VALID_NAME + r"|" + SCOPED_NAME + r")"
    + re.escape(VERSION_SIGNAL)
    + r"(?P<version>" + NUMERIC_TRIPLET + r")"
    + _VERSION_TAIL
)

LOOSE_FILENAME_PATTERN = re.compile(
    r"(?P<name>" + NAME_BEFORE_VERSION + r"|@" + VALID_NAME + r"/" + NAME_BEFORE_VERSION + r")"
    + r"-(?P<version>" + NUMERIC_TRIPLET + r")"
    + _VERSION_TAIL
)

GIT_FILENAME_PATTERN = re.compile(
    r"(?P<domain>[^/]+)/(?P<path>[^#]+)#(?P<commit>" + COMMIT_HASH + r")"
    r"(?P<extension>" + TARBALL_EXT + r")"
)

# Search patterns; apply with search()
AMBIGUOUS_VERSION_PATTERN = re.compile(
    r"(?:^|-)" + NUMERIC_TRIPLET + r"-" + NUMERIC_TRIPLET
    + r"(?=[+-]|" + TARBALL_EXT + r"\Z|\Z)"
)

TARBALL_EXT_PATTERN = re.compile(TARBALL_EXT + r"\Z")

# Characters that must arrive percent-encoded in a filename
INVALID_CHARS_PATTERN = re.compile(r"^[_.]|[#$^&+{}|:\"<>?`=\[\]\\;,/]")
