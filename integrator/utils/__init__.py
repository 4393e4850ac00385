"""Utility helpers for the integrator."""

from .config_loader import (
    ConfigError,
    DefaultsSettings,
    IntegratorConfig,
    load_integrator_config,
    resolve_integrator_config,
)
from .logger import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "DefaultsSettings",
    "IntegratorConfig",
    "load_integrator_config",
    "resolve_integrator_config",
    "configure_logging",
    "get_logger",
]
