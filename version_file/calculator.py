"""Invocation of the external version calculator.

The semantic-version arithmetic itself is delegated to an executable
(`semver` by default) called as `<tool> bump <release> <current>`, which
prints the new version on stdout.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from .errors import ExternalToolError
from .models import ReleaseKind, ToolResult
from .shell import diagnostic, run_tool

Runner = Callable[..., ToolResult]


def find_tool(name: str) -> str:
    """Resolve the calculator executable.

    Names containing a path separator are used as-is if they exist; bare
    names are looked up on PATH.

    Raises:
        ExternalToolError: If the executable cannot be found.
    """
    if Path(name).name != name:
        if Path(name).is_file():
            return name
    else:
        found = shutil.which(name)
        if found:
            return found
    raise ExternalToolError(
        f"Version calculator `{name}` not found", tool=name, reason="not-found"
    )


def invoke(
    executable: str,
    args: Sequence[str],
    *,
    timeout: float | None = None,
    runner: Runner = run_tool,
) -> str:
    """Run the calculator and return its stripped stdout.

    Args:
        executable: Path to the calculator.
        args: Arguments, e.g. ["bump", "patch", "1.2.3"].
        timeout: Optional limit in seconds before the process is killed.
        runner: Function used to spawn the process. Tests pass a fake.

    Raises:
        ExternalToolError: On non-zero exit, signal termination or timeout.
            The failure is also reported on stderr before raising.
    """
    result = runner(executable, list(args), timeout=timeout)
    if result.ok:
        return result.stdout.strip()

    problem = result.reason
    if result.timed_out:
        problem = f"timeout:{timeout}"
    diagnostic(f"{executable} invocation failed: {problem}")
    raise ExternalToolError(
        f"{executable} {' '.join(args)} failed ({problem})",
        tool=executable,
        reason=problem,
    )


def bump_version(
    executable: str,
    release: ReleaseKind,
    current: str,
    *,
    timeout: float | None = None,
    runner: Runner = run_tool,
) -> str:
    """Ask the calculator for the next version.

    Example:
        bump_version("semver", ReleaseKind.PATCH, "1.2.3") → "1.2.4"
    """
    return invoke(
        executable,
        ["bump", release.value, current],
        timeout=timeout,
        runner=runner,
    )
