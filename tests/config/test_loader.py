"""Tests for config/models.py and config/loader.py.

Covers:
- LogOutputConfig / LoggingConfig / StoreConfig validation
- _load_yaml() and _drop_unset()
- load_config() precedence: overrides > env vars > YAML > defaults
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from git_credential_pass.config.loader import _drop_unset, _load_yaml, load_config
from git_credential_pass.config.models import (
    HelperConfig,
    LoggingConfig,
    LogOutputConfig,
    StoreConfig,
)
from git_credential_pass.core.errors import ConfigError, ErrorCode


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_stdout_rejected(self) -> None:
        """stdout carries the credential protocol."""
        with pytest.raises(ValidationError, match="reserved"):
            LogOutputConfig(destination="stdout")

    def test_absolute_path_destination(self) -> None:
        config = LogOutputConfig(destination="/var/log/git-credential-pass.log")
        assert config.destination == "/var/log/git-credential-pass.log"

    def test_relative_path_fails(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/helper.log")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults_quiet_on_stderr(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert [o.destination for o in config.outputs] == ["stderr"]

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestStoreConfig:
    """Tests for StoreConfig model."""

    def test_defaults(self) -> None:
        config = StoreConfig()
        assert config.pass_executable == "pass"
        assert config.store_dir == str(Path("~/.password-store").expanduser())
        assert config.prefix == "git"
        assert config.suffix == ""
        assert config.timeout_sec == 30.0

    def test_password_store_dir_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """PASSWORD_STORE_DIR is honored like pass(1) does."""
        monkeypatch.setenv("PASSWORD_STORE_DIR", str(tmp_path / "store"))
        assert StoreConfig().store_dir == str(tmp_path / "store")

    def test_store_dir_expands_user(self) -> None:
        config = StoreConfig(store_dir="~/secrets")
        assert config.store_dir == str(Path("~/secrets").expanduser())

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout: float) -> None:
        with pytest.raises(ValidationError, match="positive"):
            StoreConfig(timeout_sec=timeout)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "missing.yaml") == {}

    def test_empty_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert _load_yaml(path) == {}

    def test_invalid_yaml_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("store: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(path)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_non_mapping_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(path)


class TestDropUnset:
    """Tests for _drop_unset function."""

    def test_removes_none_and_empty_sections(self) -> None:
        result = _drop_unset({"store": {"prefix": None, "suffix": ""}, "logging": {"level": None}})
        assert result == {"store": {"suffix": ""}}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self) -> None:
        config = load_config()
        assert isinstance(config, HelperConfig)
        assert config.store.prefix == "git"
        assert config.logging.level == "WARNING"

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  prefix: work\n  suffix: /token\nlogging:\n  level: INFO\n")

        config = load_config(path)

        assert config.store.prefix == "work"
        assert config.store.suffix == "/token"
        assert config.logging.level == "INFO"

    def test_global_config_used_by_default(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        path = tmp_path / "global.yaml"
        path.write_text("store:\n  prefix: global\n")
        monkeypatch.setattr("git_credential_pass.config.loader.GLOBAL_CONFIG_PATH", path)

        assert load_config().store.prefix == "global"

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  prefix: yaml\n")
        monkeypatch.setenv("GIT_CREDENTIAL_PASS__STORE__PREFIX", "env")

        assert load_config(path).store.prefix == "env"

    def test_overrides_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GIT_CREDENTIAL_PASS__STORE__PREFIX", "env")

        config = load_config(store={"prefix": "flag"})

        assert config.store.prefix == "flag"

    def test_none_override_does_not_mask_yaml(self, tmp_path: Path) -> None:
        """Unset CLI flags leave lower sources alone."""
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  prefix: yaml\n")

        config = load_config(path, store={"prefix": None, "suffix": "/pw"})

        assert config.store.prefix == "yaml"
        assert config.store.suffix == "/pw"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(store={"timeout_sec": -1})

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"] == "store.timeout_sec"
