"""Configuration loader for YAML-based command line defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .logger import normalize_level

DEFAULT_CONFIG_PATH = "configs/integrator.yml"


@dataclass
class DefaultsSettings:
    method: str = "simpson"
    count: int = 1000
    function: str = "1"


@dataclass
class IntegratorConfig:
    version: str = "1.0.0"
    defaults: DefaultsSettings = field(default_factory=DefaultsSettings)
    log_level: str = "INFO"
    json_output: bool = False


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError("Configuration file not found: {}".format(path))
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError("Invalid YAML in {}: {}".format(path, exc)) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration root must be a mapping in {}".format(path))
    return loaded


def _section(data: Dict[str, Any], name: str, path: Path) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError("'{}' must be a mapping in {}".format(name, path))
    return value


def load_integrator_config(path: str = DEFAULT_CONFIG_PATH) -> IntegratorConfig:
    """Loads command line defaults from a YAML file.

    The values are only defaults: the limits and sub-interval count still go
    through interval validation when an integral is computed.

    Args:
        path: Location of the YAML file.

    Returns:
        Parsed configuration.

    Raises:
        ConfigError: If the file is missing, malformed or holds wrong types.
    """
    config_path = Path(path)
    data = _load_yaml(config_path)
    defaults_data = _section(data, "defaults", config_path)
    logging_data = _section(data, "logging", config_path)
    output_data = _section(data, "output", config_path)

    count = defaults_data.get("count", 1000)
    if isinstance(count, bool) or not isinstance(count, int):
        raise ConfigError("'defaults.count' must be an integer in {} (got {!r})".format(config_path, count))

    try:
        log_level = normalize_level(logging_data.get("level", "INFO"))
    except ValueError as exc:
        raise ConfigError("Invalid 'logging.level' in {}: {}".format(config_path, exc)) from exc

    return IntegratorConfig(
        version=str(data.get("version", "1.0.0")),
        defaults=DefaultsSettings(
            method=str(defaults_data.get("method", "simpson")),
            count=count,
            function=str(defaults_data.get("function", "1")),
        ),
        log_level=log_level,
        json_output=bool(output_data.get("json", False)),
    )


def resolve_integrator_config(path: str = "") -> IntegratorConfig:
    """Loads ``path`` when given, else the default file if present, else built-in defaults."""
    if path:
        return load_integrator_config(path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_integrator_config(DEFAULT_CONFIG_PATH)
    return IntegratorConfig()
