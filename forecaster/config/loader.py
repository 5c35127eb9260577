"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from forecaster.config.schema import AppConfig

SECTIONS = ("nws", "server")

# env var -> (section, key); section None means top level
ENV_OVERRIDES: dict[str, tuple[str | None, str]] = {
    "FORECASTER_LOG_LEVEL": (None, "log_level"),
    "FORECASTER_NWS_BASE_URL": ("nws", "base_url"),
    "FORECASTER_USER_AGENT": ("nws", "user_agent"),
    "FORECASTER_HOST": ("server", "host"),
    "FORECASTER_PORT": ("server", "port"),
}


class ConfigError(ValueError):
    """The config file is not a YAML mapping of sections."""


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate config from an optional YAML file.

    A missing path or empty file yields the defaults, and so does an empty
    section. FORECASTER_* environment variables take precedence over values
    from the file.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(raw).__name__}")
    for section in SECTIONS:
        if section in raw and raw[section] is None:
            raw[section] = {}
        elif not isinstance(raw.get(section, {}), dict):
            raise ConfigError(f"{path}: section '{section}' must be a mapping")

    env = os.environ if environ is None else environ
    for var, (section, key) in ENV_OVERRIDES.items():
        value = env.get(var)
        if not value:
            continue
        if section is None:
            raw[key] = value
        else:
            raw.setdefault(section, {})[key] = value

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
