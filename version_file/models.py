"""Data models for version-file.

These Pydantic models represent the command, module and result types passed
between the argument parser, the workspace reader and the pipeline.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ReleaseKind(str, Enum):
    """A semantic version release type.

    The value is the token passed on the command line and forwarded to the
    calculator. Declaration order is the order used in error messages.
    """

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    RELEASE = "release"
    PRERELEASE = "prerel"


class ModuleKind(str, Enum):
    """Kind of a workspace module."""

    GENERIC = "generic"
    EXECUTABLE = "executable"
    TEST = "test"


class Bump(BaseModel):
    """Bump the existing version record with the given release type."""

    model_config = ConfigDict(frozen=True)

    release: ReleaseKind


class Create(BaseModel):
    """Write a version record holding the given version string verbatim."""

    model_config = ConfigDict(frozen=True)

    version: str


Command = Bump | Create


class Invocation(BaseModel):
    """A fully parsed command line.

    Attributes:
        command: The single command to run.
        targets: Names of modules to restrict processing to. Empty means all.
        verbose: Whether to print diagnostics before running.
    """

    command: Command
    targets: list[str] = Field(default_factory=list)
    verbose: bool = False


class Module(BaseModel):
    """A module in the host workspace.

    Attributes:
        name: Canonical module name, unique within the workspace.
        directory: Directory the version record is written into. For source
                   modules this is the import package directory.
        kind: Module kind; test modules never get a version record.
        is_source: False for configuration-only members that have no
                   importable package.
    """

    name: str
    directory: Path
    kind: ModuleKind = ModuleKind.GENERIC
    is_source: bool = True

    @property
    def debug_description(self) -> str:
        if self.is_source:
            return (
                f'SourceModule(name: "{self.name}", directory: {self.directory}, '
                f"kind: ModuleKind.{self.kind.value})"
            )
        return f'Module(name: "{self.name}", directory: {self.directory})'


class VersionBump(BaseModel):
    """Records a version change for a module.

    Attributes:
        name: The module that was bumped.
        old: The version before bumping.
        new: The version after bumping.
    """

    name: str
    old: str
    new: str


class ToolResult(BaseModel):
    """Outcome of running an external command.

    Attributes:
        stdout: Captured standard output.
        returncode: Exit status, or None if the process was killed on timeout.
        signal: Signal number when the process was terminated by a signal.
        timed_out: True if the process was killed after exceeding its timeout.
    """

    stdout: str = ""
    returncode: int | None = 0
    signal: int | None = None
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.signal is None and self.returncode == 0

    @property
    def reason(self) -> str:
        """Short description of how the process terminated."""
        if self.timed_out:
            return "timeout"
        if self.signal is not None:
            return f"signal:{self.signal}"
        return f"exit:{self.returncode}"
