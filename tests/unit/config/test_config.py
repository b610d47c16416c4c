from pathlib import Path

import pytest

from gitbadges.config import Config, LogFormat, LogLevel, safe_load_config
from gitbadges.exceptions import ConfigLoadError, ConfigValidationError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    _ = path.write_text(
        '[logging]\nlevel = "warning"\nformat = "text"\n\n'
        '[observation]\nobserved_directories = ["/work"]\n'
    )
    return path


class TestDefaults:
    def test_from_empty_dict(self) -> None:
        config = Config.from_dict({})

        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.JSON
        assert config.logging.file == ""
        assert config.logging.max_bytes == 10 * 1024 * 1024
        assert config.logging.backup_count == 3
        assert config.observation.background_builds is True
        assert config.observation.observed_directories == ("/",)

    def test_is_frozen(self) -> None:
        config = Config.from_dict({})
        with pytest.raises(ValueError, match="frozen"):
            config.logging = config.logging  # pyright: ignore[reportAttributeAccessIssue]

    def test_unknown_keys_are_ignored(self) -> None:
        config = Config.from_dict({"extra": {"x": 1}, "logging": {"colour": "red"}})
        assert config.logging.level is LogLevel.INFO


class TestValidation:
    def test_invalid_level(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"logging": {"level": "loud"}})

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.value == "loud"

    def test_negative_backup_count(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"logging": {"backup_count": -1}})

        assert exc_info.value.key == "logging.backup_count"

    def test_empty_observed_directories(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"observation": {"observed_directories": []}})

        assert exc_info.value.key == "observation.observed_directories"


class TestFromFile:
    def test_reads_file_over_defaults(self, config_file: Path) -> None:
        config = Config.from_file(config_file)

        assert config.logging.level is LogLevel.WARNING
        assert config.logging.format is LogFormat.TEXT
        assert config.logging.backup_count == 3
        assert config.observation.observed_directories == ("/work",)

    def test_validation_error_names_source(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        _ = path.write_text('[logging]\nformat = "xml"\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_file(path)

        assert exc_info.value.source == str(path)


class TestLoad:
    def test_missing_default_file_uses_defaults(self) -> None:
        config = Config.load()
        assert config == Config.from_dict({})

    def test_environment_overrides_file(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITBADGES_LOGGING__LEVEL", "error")

        config = Config.load(config_path=config_file)

        assert config.logging.level is LogLevel.ERROR
        assert config.logging.format is LogFormat.TEXT

    def test_environment_can_be_excluded(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITBADGES_LOGGING__LEVEL", "error")

        config = Config.load(config_path=config_file, include_env=False)

        assert config.logging.level is LogLevel.WARNING

    def test_config_env_var_selects_file(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITBADGES_CONFIG", str(config_file))

        config = Config.load()

        assert config.observation.observed_directories == ("/work",)

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = Config.load(config_path=tmp_path / "missing.toml")

    def test_invalid_toml_raises_load_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        _ = path.write_text("[logging\n")

        with pytest.raises(ConfigLoadError):
            _ = Config.load(config_path=path)


class TestSafeLoadConfig:
    def test_success_returns_no_error(self, config_file: Path) -> None:
        config, error = safe_load_config(config_path=config_file)

        assert error is None
        assert config.logging.level is LogLevel.WARNING

    def test_missing_explicit_file_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(config_path=tmp_path / "missing.toml")

        assert exc_info.value.code == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_config_warns_and_falls_back(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.toml"
        _ = path.write_text('[logging]\nlevel = "loud"\n')

        config, error = safe_load_config(config_path=path)

        assert config == Config.from_dict({})
        assert error is not None
        assert "logging.level" in error
        assert "Warning:" in capsys.readouterr().err

    def test_strict_mode_exits(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GITBADGES_STRICT_CONFIG", "1")
        path = tmp_path / "bad.toml"
        _ = path.write_text("[logging\n")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(config_path=path)

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
