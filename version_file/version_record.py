"""Reading and writing version records.

A version record is a generated Python module inside each package that
holds the package's current version as a class constant:

    from .version import Version
    Version.number  # "1.2.3"
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from .errors import VersionParseError, VersionRecordIOError

VERSION_FILE = "version.py"

# Digit runs, each optionally followed by dots: "1.2.3" in "1.2.3-beta+7"
VERSION_PATTERN = re.compile(r"([0-9]+\.*)+")

TEMPLATE = '''\
# This file was generated by the `version-file` command.


class Version:
    """Namespace for the current version of the package containing this file."""

    #: The current version number.
    number = "{version}"
'''


def version_path(directory: Path, filename: str = VERSION_FILE) -> Path:
    """Return the path of the version record for a module directory."""
    return Path(directory) / filename


def read_version(path: Path) -> str:
    """Return the current version number from the version record at path.

    The first run of digits and dots in the file is taken, wherever it
    appears, so pre-release and build suffixes are not included.

    Raises:
        VersionRecordIOError: If the file is missing or unreadable.
        VersionParseError: If the file contains no version number.
    """
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise VersionRecordIOError(f"Unable to read {path}: {exc}") from exc

    match = VERSION_PATTERN.search(contents)
    if match is None:
        raise VersionParseError(
            f"Unable to parse current version number from {contents}"
        )
    return match.group(0)


def render_version(version: str) -> str:
    """Return the contents of a version record for the given version."""
    return TEMPLATE.format(version=version)


def write_version(version: str, path: Path) -> None:
    """Write a version record for version to path, replacing it atomically.

    The contents go to a temporary file in the same directory, which is then
    renamed over the destination. A failure at any point leaves the
    destination with its previous contents and removes the temporary file.

    Raises:
        VersionRecordIOError: If the record cannot be written.
    """
    path = Path(path)
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_path = Path(fh.name)
            fh.write(render_version(version))
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise VersionRecordIOError(f"Unable to write {path}: {exc}") from exc
    finally:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
