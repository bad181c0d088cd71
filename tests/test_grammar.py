# SPDX-License-Identifier: MIT
"""Unit tests for the filename grammar patterns."""

import pytest

from npm_package_filename.grammar import (
    COMMIT_HASH_PATTERN,
    GIT_FILENAME_PATTERN,
    INVALID_CHARS_PATTERN,
    LOOSE_FILENAME_PATTERN,
    PACKAGE_NAME_PATTERN,
    SEMVER_PATTERN,
    STRICT_FILENAME_PATTERN,
)


class TestSemverPattern:
    """Tests for the SemVer 2.0.0 grammar."""

    @pytest.mark.parametrize(
        "version",
        [
            "0.0.0",
            "1.2.3",
            "999.888.777",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-0.3.7",
            "1.0.0-x.7.z.92",
            "1.0.0-x-y-z.-",
            "1.0.0+20130313144700",
            "1.0.0-beta+exp.sha.5114f85",
            "1.0.0+21AF26D3---117B344092BD",
        ],
    )
    def test_valid(self, version):
        assert SEMVER_PATTERN.fullmatch(version)

    @pytest.mark.parametrize(
        "version",
        ["", "42", "1.2", "1.2.F", "forty-two", "01.0.0", "1.0.0-01", "1.2.3.4", "1.0.0+", "1.2.3\n"],
    )
    def test_invalid(self, version):
        assert SEMVER_PATTERN.fullmatch(version) is None

    def test_rejects_non_ascii_digits(self):
        """Unicode digits are not version numbers."""
        assert SEMVER_PATTERN.fullmatch("١.2.3") is None


class TestPackageNamePattern:
    @pytest.mark.parametrize(
        "name", ["my-package", "@my-scope/my-package", "UPPER", "a", "x~y!z*(1)'", "-odd"]
    )
    def test_valid(self, name):
        assert PACKAGE_NAME_PATTERN.fullmatch(name)

    @pytest.mark.parametrize(
        "name", [".hidden", "_private", "my package", "foo%bar", "@scope", "a/b", "@a/b/c"]
    )
    def test_invalid(self, name):
        assert PACKAGE_NAME_PATTERN.fullmatch(name) is None


class TestCommitHashPattern:
    def test_forty_hex(self):
        assert COMMIT_HASH_PATTERN.fullmatch("ab" * 20)
        assert COMMIT_HASH_PATTERN.fullmatch("AB" * 20)

    @pytest.mark.parametrize("commit", ["a" * 39, "a" * 41, "g" + "a" * 39, ""])
    def test_rejected(self, commit):
        assert COMMIT_HASH_PATTERN.fullmatch(commit) is None


class TestFilenamePatterns:
    """Tests for the composite strict, loose and git grammars."""

    def test_strict_requires_signal(self):
        assert STRICT_FILENAME_PATTERN.fullmatch("my-package-1.2.3.tgz") is None
        match = STRICT_FILENAME_PATTERN.fullmatch("my-package%1.2.3-4.5.6.tgz")
        assert match.group("name") == "my-package"
        assert match.group("version") == "1.2.3"
        assert match.group("prerelease") == "4.5.6"

    def test_loose_captures(self):
        match = LOOSE_FILENAME_PATTERN.fullmatch("my-package-1.2.3-beta.4+build.7.tar.gz")
        assert match.group("name") == "my-package"
        assert match.group("version") == "1.2.3"
        assert match.group("prerelease") == "beta.4"
        assert match.group("build") == "build.7"
        assert match.group("extension") == ".tar.gz"

    def test_loose_scoped_name(self):
        match = LOOSE_FILENAME_PATTERN.fullmatch("@my-scope/my-package-1.2.3.tgz")
        assert match.group("name") == "@my-scope/my-package"

    def test_loose_name_with_partial_version(self):
        match = LOOSE_FILENAME_PATTERN.fullmatch("my-package-1.2-1.2.3.tgz")
        assert match.group("name") == "my-package-1.2"

    def test_loose_rejects_signal(self):
        assert LOOSE_FILENAME_PATTERN.fullmatch("my-package%1.2.3.tgz") is None

    def test_git_captures(self):
        commit = "ab" * 20
        match = GIT_FILENAME_PATTERN.fullmatch(f"example.com/user/project#{commit}.tar")
        assert match.group("domain") == "example.com"
        assert match.group("path") == "user/project"
        assert match.group("commit") == commit
        assert match.group("extension") == ".tar"


class TestInvalidCharsPattern:
    @pytest.mark.parametrize("char", list("#$^&+{}|:\"<>?`=[]\\;,/"))
    def test_rejects_unescaped(self, char):
        assert INVALID_CHARS_PATTERN.search(f"my{char}package")

    @pytest.mark.parametrize("filename", ["_private.tgz", ".hidden.tgz"])
    def test_rejects_leading(self, filename):
        assert INVALID_CHARS_PATTERN.search(filename)

    def test_allows_escapes_and_at(self):
        assert INVALID_CHARS_PATTERN.search("%40my-scope%2Fpkg-1.2.3.tgz") is None
        assert INVALID_CHARS_PATTERN.search("my-package@6.6.6") is None
