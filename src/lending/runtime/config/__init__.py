"""Configuration models and loaders."""

from .config_data import AppConfig, ConfigData, DatabaseConfig, LoggingConfig
from .config_template import load_config, load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "LoggingConfig",
    "load_config",
    "load_templated_yaml",
    "substitute_env_vars",
]
