# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for tarball filename tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def semver_data() -> dict[str, str]:
    return {"type": "semver", "name": "my-package", "version": "1.2.3"}


@pytest.fixture
def git_data() -> dict[str, str]:
    return {
        "type": "git",
        "domain": "github.com",
        "path": "myuser/my-project",
        "commit": "fedcba9876543210fedcba9876543210fedcba98",
    }


@pytest.fixture
def url_data() -> dict[str, str]:
    return {"type": "url", "url": "https://example.com/user/project/archive/123abc.tgz"}
