"""Subprocess and console output utilities.

Provides a wrapper around subprocess for running external tools with a
structured result, plus output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

from .models import ToolResult


def run_tool(
    executable: str, args: Sequence[str], *, timeout: float | None = None
) -> ToolResult:
    """Run an external tool and capture its stdout.

    Nothing is piped to stdin and stderr is left attached to the terminal so
    the tool's own error messages stay visible. Blocks until the process
    exits, or until timeout seconds have passed, in which case the process
    is killed.

    Args:
        executable: Path or name of the executable.
        args: Arguments passed to the executable exactly as given.
        timeout: Optional limit in seconds.

    Returns:
        ToolResult describing how the process terminated. A non-zero exit is
        reported in the result, not raised.
    """
    try:
        result = subprocess.run(
            [executable, *args],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = exc.stdout or ""
        if isinstance(stdout, bytes):
            stdout = stdout.decode(errors="replace")
        return ToolResult(stdout=stdout, returncode=None, timed_out=True)

    # Negative return codes mean the child was killed by a signal (POSIX)
    if result.returncode < 0:
        return ToolResult(
            stdout=result.stdout, returncode=result.returncode, signal=-result.returncode
        )
    return ToolResult(stdout=result.stdout, returncode=result.returncode)


def step(msg: str) -> None:
    """Print a visually distinct section header.

    Used by --verbose to separate the diagnostic sections.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def diagnostic(msg: str) -> None:
    """Print a diagnostic message to stderr without exiting."""
    print(f"error: {msg}", file=sys.stderr)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the run.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
