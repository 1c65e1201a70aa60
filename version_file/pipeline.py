"""Version record pipeline: parse → resolve targets → read → bump → write.

This module orchestrates a version-file run:
1. Resolve which modules to process from the workspace module list
2. For a bump, read each module's current version, ask the external
   calculator for the next one, and rewrite the record
3. For a create, write the record with the given version

Targets are processed one at a time in workspace order. The first failure
aborts the run; records already written earlier in the run are kept.
"""

from __future__ import annotations

from collections.abc import Sequence

from .calculator import Runner, bump_version, find_tool
from .config import Settings
from .models import Bump, Create, Invocation, Module, VersionBump
from .shell import run_tool, step
from .targets import resolve_targets
from .version_record import read_version, version_path, write_version


def describe_invocation(argv: Sequence[str], modules: Sequence[Module]) -> None:
    """Print the raw arguments and the full module list (--verbose)."""
    step("Invocation")
    print(f"  arguments: {list(argv)}")
    step("Workspace modules")
    for module in modules:
        print(f"  - {module.debug_description}")
    print()


def bump_module(
    module: Module, command: Bump, tool: str, settings: Settings, runner: Runner
) -> VersionBump:
    """Bump a single module's version record and return the change."""
    path = version_path(module.directory, settings.filename)
    current = read_version(path)
    new = bump_version(
        tool, command.release, current, timeout=settings.timeout, runner=runner
    )
    write_version(new, path)
    return VersionBump(name=module.name, old=current, new=new)


def run_command(
    invocation: Invocation,
    modules: Sequence[Module],
    *,
    settings: Settings | None = None,
    runner: Runner = run_tool,
) -> list[VersionBump]:
    """Execute an invocation against the workspace modules.

    Args:
        invocation: Parsed command line.
        modules: All workspace modules, in workspace order.
        settings: Tool settings; defaults if omitted.
        runner: Function used to spawn the calculator. Tests pass a fake.

    Returns:
        The version changes made, one per bumped module. Empty for create.

    Raises:
        VersionFileError: On the first failing module. Modules processed
            before it keep their new records.
    """
    settings = settings or Settings()
    command = invocation.command
    targets = resolve_targets(modules, invocation.targets)

    bumped: list[VersionBump] = []
    if isinstance(command, Bump):
        tool = find_tool(settings.tool)
        for module in targets:
            change = bump_module(module, command, tool, settings, runner)
            print(change.new)
            bumped.append(change)
    elif isinstance(command, Create):
        for module in targets:
            path = version_path(module.directory, settings.filename)
            write_version(command.version, path)

    return bumped
