"""Exception hierarchy for version-file.

Every error is fatal to a run. The CLI catches VersionFileError and exits
with its message; nothing is retried.
"""

from __future__ import annotations


class VersionFileError(Exception):
    """Base class for all version-file errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArgumentValidationError(VersionFileError):
    """Raised for missing, conflicting or invalid command-line values."""


class VersionRecordIOError(VersionFileError, OSError):
    """Raised when a version record cannot be read or written."""


class VersionParseError(VersionFileError):
    """Raised when no version number can be found in a version record."""


class ExternalToolError(VersionFileError):
    """Raised when the version calculator is missing or does not exit cleanly.

    Attributes:
        tool: The executable that was run.
        reason: How it terminated, e.g. "exit:1" or "signal:9".
    """

    def __init__(self, message: str, *, tool: str = "", reason: str = "") -> None:
        super().__init__(message)
        self.tool = tool
        self.reason = reason


class WorkspaceError(VersionFileError):
    """Raised when the workspace manifest cannot be read."""


class ConfigError(VersionFileError):
    """Raised for invalid [tool.version-file] settings."""
