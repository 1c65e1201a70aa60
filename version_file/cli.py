"""CLI entry point for version-file."""

from __future__ import annotations

import sys
from pathlib import Path

from version_file.arguments import parse_arguments
from version_file.config import load_settings
from version_file.errors import VersionFileError
from version_file.pipeline import describe_invocation, run_command
from version_file.shell import fatal
from version_file.workspace import discover_modules


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point.

    Examples:
        version-file --create 1.0.0
        version-file --bump minor --target pkg-alpha
    """
    args = argv if argv is not None else sys.argv[1:]
    root = Path.cwd()

    try:
        modules = None
        # Diagnostics come first so they still show when parsing fails
        if "--verbose" in args:
            modules = discover_modules(root)
            describe_invocation(args, modules)
        invocation = parse_arguments(args)
        settings = load_settings(root)
        if modules is None:
            modules = discover_modules(root)
        run_command(invocation, modules, settings=settings)
    except VersionFileError as exc:
        fatal(exc.message)


if __name__ == "__main__":
    cli()
