"""Workspace discovery.

Builds the module list the pipeline works on from a uv workspace: the root
pyproject.toml names member directories in [tool.uv.workspace].members, and
each member's own pyproject.toml gives its name and kind.
"""

from __future__ import annotations

import glob
from pathlib import Path

import tomlkit

from .errors import WorkspaceError
from .models import Module, ModuleKind
from .toml import (
    get_project_name,
    get_tool_table,
    get_workspace_member_globs,
    has_scripts,
    load_pyproject,
)


def find_package_dir(member_dir: Path, name: str) -> Path | None:
    """Return the import package directory of a member, if it has one.

    Looks for both flat (<member>/<pkg>) and src (<member>/src/<pkg>)
    layouts, where <pkg> is the name with hyphens replaced by underscores.
    """
    package = name.replace("-", "_")
    for candidate in (member_dir / package, member_dir / "src" / package):
        if candidate.is_dir():
            return candidate
    return None


def module_kind(doc: tomlkit.TOMLDocument) -> ModuleKind:
    """Determine a member's kind.

    An explicit [tool.version-file].kind wins. Otherwise packages declaring
    console scripts are executables and everything else is generic.

    Raises:
        WorkspaceError: If the declared kind is not a known ModuleKind.
    """
    kind = get_tool_table(doc).get("kind")
    if kind is not None:
        try:
            return ModuleKind(kind)
        except ValueError:
            valid = " | ".join(k.value for k in ModuleKind)
            raise WorkspaceError(
                f"Invalid kind `{kind}` - valid options are: {valid}"
            ) from None
    return ModuleKind.EXECUTABLE if has_scripts(doc) else ModuleKind.GENERIC


def load_module(member_dir: Path) -> Module:
    """Build a Module from a member directory containing a pyproject.toml."""
    doc = load_pyproject(member_dir / "pyproject.toml")
    name = get_project_name(doc, member_dir.name)
    package_dir = find_package_dir(member_dir, name)
    return Module(
        name=name,
        directory=package_dir or member_dir,
        kind=module_kind(doc),
        is_source=package_dir is not None,
    )


def discover_modules(root: Path) -> list[Module]:
    """Scan the workspace at root and return its modules in workspace order.

    Member globs are expanded in the order they are declared, with matches
    of each glob sorted. A project without [tool.uv.workspace] is treated as
    a single-module workspace.

    Raises:
        WorkspaceError: If root has no pyproject.toml or a member's
            pyproject.toml is invalid.
    """
    root_pyproject = root / "pyproject.toml"
    if not root_pyproject.exists():
        raise WorkspaceError(f"No pyproject.toml found in {root}")

    member_globs = get_workspace_member_globs(load_pyproject(root_pyproject))
    if not member_globs:
        return [load_module(root)]

    # Expand globs to find all package directories
    member_dirs: list[Path] = []
    for pattern in member_globs:
        for match in sorted(glob.glob(str(root / pattern))):
            p = Path(match)
            if (p / "pyproject.toml").exists():
                member_dirs.append(p)

    return [load_module(d) for d in member_dirs]
