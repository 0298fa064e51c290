from .config import (
    ConfigError,
    DatabaseConfig,
    LoggingConfig,
    ServerConfig,
    Settings,
    load_settings,
    resolve_config_path,
)

__all__ = [
    "ConfigError",
    "DatabaseConfig",
    "LoggingConfig",
    "ServerConfig",
    "Settings",
    "load_settings",
    "resolve_config_path",
]
