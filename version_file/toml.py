"""TOML reading utilities.

Uses tomlkit to read the workspace and package pyproject.toml files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from packaging.utils import canonicalize_name
from tomlkit.exceptions import ParseError as TOMLParseError

from .errors import WorkspaceError

TOOL_TABLE = "version-file"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file.

    Raises:
        WorkspaceError: If the file is missing or not valid TOML.
    """
    try:
        return tomlkit.parse(path.read_text())
    except OSError as exc:
        raise WorkspaceError(f"Unable to read {path}: {exc}") from exc
    except TOMLParseError as exc:
        raise WorkspaceError(f"Invalid TOML in {path}: {exc}") from exc


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Extract the canonical package name from [project].name.

    Names are normalized per PEP 503 (lowercase, hyphens instead of
    underscores) for consistent comparison.

    Args:
        doc: Parsed pyproject.toml document.
        fallback: Value to return if name is not specified.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def has_scripts(doc: tomlkit.TOMLDocument) -> bool:
    """Return True if the project declares any [project.scripts] entry."""
    return bool(doc.get("project", {}).get("scripts"))


def get_tool_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Return the [tool.version-file] table as a plain dict (empty if absent)."""
    table = doc.get("tool", {}).get(TOOL_TABLE, {})
    return dict(table.unwrap()) if hasattr(table, "unwrap") else dict(table)


def get_workspace_member_globs(doc: tomlkit.TOMLDocument) -> list[str]:
    """Extract workspace member glob patterns from [tool.uv.workspace].

    These patterns (e.g., "packages/*", "libs/*") define which directories
    contain workspace packages. Returns an empty list when the project is
    not a workspace.
    """
    members = doc.get("tool", {}).get("uv", {}).get("workspace", {}).get("members")
    return [str(member) for member in members or []]
