# SPDX-License-Identifier: MIT
"""Descriptors recovered from (or encoded into) tarball filenames.

Three mutually exclusive variants, each tagged by a class-level ``type``:
- SemverDescriptor: a registry package at a semantic version
- GitDescriptor: a git repository at a specific commit
- UrlDescriptor: any other remote location, host and path only
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Optional, Union


@dataclass(frozen=True, slots=True)
class SemverDescriptor:
    """A package tarball identified by name and semantic version.

    Attributes:
        package_name: Package name, possibly scoped (e.g. "@scope/name")
        version_comparable: Numeric triplet plus pre-release (no build metadata)
        version_numeric: Bare numeric triplet (e.g. "1.2.3")
        prerelease: Pre-release identifiers, or None
        build: Build metadata, or None
        extension: Tarball extension as it appeared in the filename
    """

    type: ClassVar[str] = "semver"

    package_name: str
    version_comparable: str
    version_numeric: str
    prerelease: Optional[str]
    build: Optional[str]
    extension: str

    @property
    def full_version(self) -> str:
        """Return the version with build metadata re-attached."""
        if self.build:
            return f"{self.version_comparable}+{self.build}"
        return self.version_comparable

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **asdict(self)}


@dataclass(frozen=True, slots=True)
class GitDescriptor:
    """A tarball of a git repository at a given commit.

    Attributes:
        domain: Host of the repository (e.g. "github.com")
        path: Repository path on that host (e.g. "user/project")
        commit: 40-character hexadecimal commit hash
        extension: Tarball extension as it appeared in the filename
    """

    type: ClassVar[str] = "git"

    domain: str
    path: str
    commit: str
    extension: str

    @property
    def repo(self) -> str:
        return f"{self.domain}/{self.path}"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **asdict(self), "repo": self.repo}


@dataclass(frozen=True, slots=True)
class UrlDescriptor:
    """A tarball fetched from an arbitrary URL.

    ``url`` is the decoded host and path; it does not carry a scheme.
    """

    type: ClassVar[str] = "url"

    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "url": self.url}


Descriptor = Union[SemverDescriptor, GitDescriptor, UrlDescriptor]
