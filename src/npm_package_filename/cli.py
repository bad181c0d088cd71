# SPDX-License-Identifier: MIT
"""CLI entry point for the npm-package-filename command."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

import click

from .decoder import parse
from .encoder import make_tarball_name
from .errors import FilenameError
from .predicates import has_tarball_extension, is_version_ambiguous


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _encode_or_exit(data: dict[str, Any]) -> None:
    try:
        echo_info(make_tarball_name(data))
    except FilenameError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="npm-package-filename")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Encode and decode npm package tarball filenames.

    \b
    Examples:
        npm-package-filename parse my-package-1.2.3.tgz
        npm-package-filename make semver @my-scope/my-package 1.2.3
        npm-package-filename make git github.com user/project <commit>
        npm-package-filename check my-package-1.2.3-4.5.6.tgz
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("parse")
@click.argument("filenames", nargs=-1, required=True)
@click.option("--compact", is_flag=True, help="Print each descriptor on one line.")
def parse_command(filenames: tuple[str, ...], compact: bool) -> None:
    """Decode one or more tarball filenames into JSON descriptors."""
    failed = False
    for filename in filenames:
        descriptor = parse(filename)
        if descriptor is None:
            echo_error(f"not a recognized tarball filename: {filename}")
            failed = True
            continue
        echo_info(json.dumps(descriptor.to_dict(), indent=None if compact else 2))

    if failed:
        raise SystemExit(1)


@cli.group()
def make() -> None:
    """Build a tarball filename from a package descriptor."""


@make.command("semver")
@click.argument("name")
@click.argument("version")
def make_semver(name: str, version: str) -> None:
    """Filename for a registry package NAME at VERSION."""
    _encode_or_exit({"type": "semver", "name": name, "version": version})


@make.command("git")
@click.argument("domain")
@click.argument("path")
@click.argument("commit")
def make_git(domain: str, path: str, commit: str) -> None:
    """Filename for the repository DOMAIN/PATH at COMMIT."""
    _encode_or_exit({"type": "git", "domain": domain, "path": path, "commit": commit})


@make.command("url")
@click.argument("url")
def make_url(url: str) -> None:
    """Filename for a tarball downloaded from URL."""
    _encode_or_exit({"type": "url", "url": url})


@cli.command()
@click.argument("value")
@click.argument("version", required=False)
def check(value: str, version: Optional[str]) -> None:
    """Report whether VALUE has a tarball extension and an ambiguous version.

    When VERSION is given, ambiguity is tested on VALUE-VERSION.
    """
    extension = has_tarball_extension(value)
    ambiguous = is_version_ambiguous(value, version)
    echo_info(f"tarball extension: {'yes' if extension else 'no'}")
    echo_info(f"ambiguous version: {'yes' if ambiguous else 'no'}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except FilenameError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
