"""Command-line argument parsing.

Turns the flat argument list into an Invocation holding exactly one
Command. Options are pulled out of the list by name in a fixed order:
--target, then --bump, then --create. If both --bump and --create are
given, --bump wins. argparse only handles --help and --version.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from importlib.metadata import version as pkg_version

from .errors import ArgumentValidationError
from .models import Bump, Command, Create, Invocation, ReleaseKind

__version__ = pkg_version("version-file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser used for --help and --version."""
    parser = argparse.ArgumentParser(
        prog="version-file",
        description="Generate and bump per-package version records.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--bump",
        metavar="RELEASE",
        help="Bump the version: "
        + " | ".join(release.value for release in ReleaseKind)
        + ".",
    )
    parser.add_argument(
        "--create",
        metavar="VERSION",
        help="Create the version record with the given version.",
    )
    parser.add_argument(
        "--target",
        action="append",
        metavar="NAME",
        help="Only process the named package (repeatable). Default: all.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print diagnostics before running."
    )
    return parser


def extract_option(args: list[str], name: str) -> list[str]:
    """Remove every occurrence of an option from args and return its values.

    Both `--name value` and `--name=value` are accepted. The token after
    `--name` is always its value, even when it starts with a dash. Scanning
    stops at a `--` terminator. A trailing `--name` with no value is removed
    without producing one.

    Example:
        args = ["--target", "a", "--bump", "patch", "--target=b"]
        extract_option(args, "target") → ["a", "b"]; args == ["--bump", "patch"]
    """
    option = f"--{name}"
    values: list[str] = []
    i = 0
    while i < len(args) and args[i] != "--":
        arg = args[i]
        if arg == option:
            if i + 1 < len(args) and args[i + 1] != "--":
                values.append(args[i + 1])
                del args[i : i + 2]
            else:
                del args[i]
        elif arg.startswith(f"{option}="):
            values.append(arg[len(option) + 1 :])
            del args[i]
        else:
            i += 1
    return values


def extract_command(bumps: list[str], creates: list[str]) -> Command:
    """Pick the single command from the --bump and --create values.

    --bump is checked first; --create only counts when there is no --bump
    value. The first occurrence of each option wins.

    Raises:
        ArgumentValidationError: If the bump value is not a release type, or
            neither option has a value.
    """
    if bumps:
        try:
            return Bump(release=ReleaseKind(bumps[0]))
        except ValueError:
            valid = " | ".join(release.value for release in ReleaseKind)
            raise ArgumentValidationError(
                f"Invalid bump value `{bumps[0]}` - valid options are: {valid}"
            ) from None

    if creates:
        return Create(version=creates[0])
    raise ArgumentValidationError("Unknown arguments")


def parse_arguments(argv: Sequence[str]) -> Invocation:
    """Parse a raw argument list into an Invocation.

    Unrecognised arguments are ignored.

    Examples:
        ["--bump", "patch"] → Invocation(command=Bump(release=PATCH))
        ["--create", "-rc1", "--target", "pkg-a"]
            → Invocation(command=Create(version="-rc1"), targets=["pkg-a"])
    """
    args = list(argv)
    verbose = "--verbose" in args
    targets = extract_option(args, "target")
    bumps = extract_option(args, "bump")
    creates = extract_option(args, "create")
    # Whatever is left may still ask for --help or --version
    build_parser().parse_known_args(args)
    command = extract_command(bumps, creates)
    return Invocation(command=command, targets=targets, verbose=verbose)
