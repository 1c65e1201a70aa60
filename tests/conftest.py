"""Shared test fixtures."""

from __future__ import annotations

import stat
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
import tomlkit

from version_file.models import Module, ModuleKind, ToolResult
from version_file.version_record import render_version

# A calculator good enough for tests: bumps the numeric parts of X.Y.Z and
# fails for any version starting with "99".
SEMVER_STUB = """\
import sys

_, release, version = sys.argv[1:4]
if version.startswith("99"):
    print("cannot bump", version, file=sys.stderr)
    sys.exit(3)
major, minor, patch = (int(p) for p in version.split("."))
if release == "major":
    major, minor, patch = major + 1, 0, 0
elif release == "minor":
    minor, patch = minor + 1, 0
else:
    patch += 1
print(f"{major}.{minor}.{patch}")
"""


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
version = "2.0.0"
dependencies = ["click>=8.0", "pydantic>=2.0"]

[project.scripts]
my-package = "my_package.cli:main"

[tool.uv.workspace]
members = ["packages/*", "libs/*"]

[tool.version-file]
tool = "semver"
timeout = 10
"""
    return tomlkit.parse(content)


@pytest.fixture
def make_tool(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory writing an executable Python script into tmp_path/bin."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)

    def _make(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def semver_tool(make_tool: Callable[[str, str], Path]) -> Path:
    """An executable stub calculator named `semver`."""
    return make_tool("semver", SEMVER_STUB)


@pytest.fixture
def make_module(tmp_path: Path) -> Callable[..., Module]:
    """Return a factory creating a module directory, optionally with a record."""

    def _make(
        name: str,
        version: str | None = None,
        kind: ModuleKind = ModuleKind.GENERIC,
    ) -> Module:
        directory = tmp_path / "src" / name
        directory.mkdir(parents=True)
        if version is not None:
            (directory / "version.py").write_text(render_version(version))
        return Module(name=name, directory=directory, kind=kind)

    return _make


class FakeRunner:
    """Stand-in for run_tool that records calls and returns canned results."""

    def __init__(self, results: dict[str, ToolResult]) -> None:
        self.results = results
        self.calls: list[tuple[str, list[str], float | None]] = []

    def __call__(
        self, executable: str, args: list[str], *, timeout: float | None = None
    ) -> ToolResult:
        self.calls.append((executable, list(args), timeout))
        return self.results[args[-1]]


@pytest.fixture
def fake_runner() -> Callable[[dict[str, ToolResult]], FakeRunner]:
    """Return a factory for FakeRunner keyed by the current version argument."""
    return FakeRunner
