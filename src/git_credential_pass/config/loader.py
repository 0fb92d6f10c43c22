"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority, used for command-line flags)
2. Environment variables (GIT_CREDENTIAL_PASS__SECTION__KEY)
3. YAML config file (~/.config/git-credential-pass/config.yaml)
4. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from git_credential_pass.config.models import HelperConfig, LoggingConfig, StoreConfig
from git_credential_pass.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/git-credential-pass/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _drop_unset(overrides: dict[str, Any]) -> dict[str, Any]:
    """Remove None leaves so unset CLI flags don't mask lower sources."""
    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(value, dict):
            nested = _drop_unset(value)
            if nested:
                result[key] = nested
        elif value is not None:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class bound to one YAML config dict."""

    class HelperSettings(BaseSettings):
        """Root config. Env vars: GIT_CREDENTIAL_PASS__STORE__PREFIX, etc."""

        model_config = SettingsConfigDict(
            env_prefix="GIT_CREDENTIAL_PASS__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        store: StoreConfig = StoreConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml file
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return HelperSettings


def load_config(config_path: Path | None = None, **overrides: Any) -> HelperConfig:
    """Load config: defaults < YAML file < env vars < overrides.

    Args:
        config_path: Explicit YAML file. Must exist if given.
                     Defaults to GLOBAL_CONFIG_PATH, which may be absent.
        **overrides: Section dicts, e.g. ``store={"prefix": "git"}``.
                     None values are ignored.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing explicit file, invalid YAML, or validation errors.
    """
    if config_path is not None and not config_path.exists():
        raise ConfigError.file_not_found(str(config_path))

    yaml_config = _load_yaml(config_path or GLOBAL_CONFIG_PATH)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**_drop_unset(overrides))
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    return HelperConfig(
        logging=settings.logging,  # type: ignore[attr-defined]
        store=settings.store,  # type: ignore[attr-defined]
    )
