"""Tests for version_file.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from version_file.config import Settings, load_settings
from version_file.errors import ConfigError


class TestLoadSettings:
    def test_defaults_without_pyproject(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path) == Settings()

    def test_defaults_without_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        settings = load_settings(tmp_path)
        assert settings.tool == "semver"
        assert settings.filename == "version.py"
        assert settings.timeout is None

    def test_reads_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.version-file]\n"
            'tool = "bin/semver"\n'
            'filename = "_version.py"\n'
            "timeout = 30\n"
        )
        settings = load_settings(tmp_path)
        assert settings == Settings(tool="bin/semver", filename="_version.py", timeout=30)

    def test_kind_key_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.version-file]\nkind = "executable"\n'
        )
        assert load_settings(tmp_path) == Settings()

    def test_unknown_key(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.version-file]\ncolour = "red"\n')
        with pytest.raises(ConfigError, match="colour"):
            load_settings(tmp_path)

    def test_negative_timeout(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.version-file]\ntimeout = -1\n")
        with pytest.raises(ConfigError, match="timeout"):
            load_settings(tmp_path)

    def test_filename_must_not_be_a_path(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.version-file]\nfilename = "../version.py"\n'
        )
        with pytest.raises(ConfigError, match="plain file name"):
            load_settings(tmp_path)
