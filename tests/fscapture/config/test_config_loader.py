"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

import fscapture.logging as logging_module
from fscapture.config import FSCaptureConfig, LoggingConfig, apply_config, load_config
from fscapture.config.loader import _parse_bool_env
from fscapture.exceptions import ConfigurationError

_ENV_VARS = (
    "FSCAPTURE_CONFIG_PATH",
    "FSCAPTURE_LOG_LEVEL",
    "FSCAPTURE_LOG_FORMAT",
    "FSCAPTURE_LOG_FILE",
    "FSCAPTURE_LOG_COLOR",
    "FSCAPTURE_LOG_TIMESTAMP",
    "FSCAPTURE_LOG_RICH",
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestParseBoolEnv:
    @pytest.mark.parametrize("value", ["true", "1", "YES", " on ", "enabled"])
    def test_truthy(self, value: str) -> None:
        assert _parse_bool_env(value) is True

    @pytest.mark.parametrize("value", ["false", "0", "No", "off", "disabled"])
    def test_falsy(self, value: str) -> None:
        assert _parse_bool_env(value) is False

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid boolean value"):
            _parse_bool_env("maybe")


class TestLoggingConfig:
    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.format == "structured"
        assert config.output_file is None

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown level"):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown format"):
            LoggingConfig(format="xml")  # type: ignore[arg-type]


class TestDiscovery:
    def test_defaults_without_any_file(self) -> None:
        assert load_config() == FSCaptureConfig()

    def test_pyproject_without_table_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "app"\n')
        assert load_config() == FSCaptureConfig()

    def test_pyproject_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.fscapture.logging]\nlevel = "debug"\nformat = "json"\n'
        )
        config = load_config()
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "fscapture.toml"
        path.write_text('[logging]\nlevel = "INFO"\n')
        monkeypatch.setenv("FSCAPTURE_CONFIG_PATH", str(path))
        assert load_config().logging.level == "INFO"

    def test_env_config_path_missing_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FSCAPTURE_CONFIG_PATH", "nowhere.toml")
        assert load_config() == FSCaptureConfig()

    def test_explicit_missing_path_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("nowhere.toml")


class TestFileFormats:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.yaml"
        path.write_text("fscapture:\n  logging:\n    level: ERROR\n    use_color: false\n")
        config = load_config(path)
        assert config.logging.level == "ERROR"
        assert config.logging.use_color is False

    def test_flat_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.yml"
        path.write_text("logging:\n  format: console\n")
        assert load_config(path).logging.format == "console"

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.toml"
        path.write_text("[logging\n")
        with pytest.raises(ConfigurationError, match="invalid TOML"):
            load_config(path)

    def test_invalid_level_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n')
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_env_placeholder_substitution(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APP_LOG_DIR", str(tmp_path / "logs"))
        path = tmp_path / "fscapture.toml"
        path.write_text('[logging]\noutput_file = "${APP_LOG_DIR}/capture.log"\n')
        assert load_config(path).logging.output_file == f"{tmp_path / 'logs'}/capture.log"

    def test_unset_placeholder_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "fscapture.toml"
        path.write_text('[logging]\noutput_file = "${FSCAPTURE_TEST_UNSET}/x.log"\n')
        assert load_config(path).logging.output_file == "${FSCAPTURE_TEST_UNSET}/x.log"


class TestEnvOverrides:
    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.fscapture.logging]\nlevel = "INFO"\n')
        monkeypatch.setenv("FSCAPTURE_LOG_LEVEL", "error")
        monkeypatch.setenv("FSCAPTURE_LOG_FORMAT", "RICH")
        monkeypatch.setenv("FSCAPTURE_LOG_FILE", "out.log")
        monkeypatch.setenv("FSCAPTURE_LOG_COLOR", "off")
        monkeypatch.setenv("FSCAPTURE_LOG_TIMESTAMP", "0")
        monkeypatch.setenv("FSCAPTURE_LOG_RICH", "yes")

        log = load_config().logging
        assert log.level == "ERROR"
        assert log.format == "rich"
        assert log.output_file == "out.log"
        assert log.use_color is False
        assert log.include_timestamp is False
        assert log.use_rich is True

    def test_invalid_bool_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FSCAPTURE_LOG_COLOR", "sometimes")
        assert load_config().logging.use_color is True


class TestApplyConfig:
    def test_configures_logging(self) -> None:
        apply_config(FSCaptureConfig(logging=LoggingConfig(level="DEBUG", format="console")))
        assert logging_module._CURRENT_CONFIG is not None
        assert logging_module._CURRENT_CONFIG["level"] == "DEBUG"
        assert logging_module._CURRENT_CONFIG["format"] == "console"
