"""Settings read from [tool.version-file] in the root pyproject.toml.

Example:

    [tool.version-file]
    tool = "semver"
    filename = "version.py"
    timeout = 30
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .toml import get_tool_table, load_pyproject
from .version_record import VERSION_FILE


class Settings(BaseModel):
    """Tool settings.

    Attributes:
        tool: Name or path of the version calculator executable.
        filename: Name of the version record inside each package directory.
        timeout: Seconds to wait for the calculator before killing it.
                 None waits indefinitely.
    """

    model_config = ConfigDict(extra="forbid")

    tool: str = "semver"
    filename: str = VERSION_FILE
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError("must be a plain file name")
        return value


def load_settings(root: Path) -> Settings:
    """Load settings from root/pyproject.toml.

    Missing file or table means defaults. The [tool.version-file] table may
    also hold a per-package "kind" key; it is ignored here.

    Raises:
        ConfigError: If a setting has an invalid value or an unknown key.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return Settings()

    table = get_tool_table(load_pyproject(pyproject))
    table.pop("kind", None)
    try:
        return Settings(**table)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.version-file] in {pyproject}:\n{exc}") from exc
