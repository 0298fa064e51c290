"""
Service configuration.

Settings are read from a YAML file whose path is given on the command line
(``--config``/``-c``) or through the ``USER_SERVICE_CONFIG`` environment
variable, which may itself come from a ``.env`` file.
"""

# Standard library imports
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

# External package imports
import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy.engine import URL


CONFIG_ENV_VAR = "USER_SERVICE_CONFIG"
CONFIG_SUFFIXES = (".yaml", ".yml")
DATABASE_DRIVER = "postgresql+asyncpg"


class ConfigError(Exception):
    """Raised when the configuration file cannot be located, read or validated."""
    pass


class ServerConfig(BaseModel):
    """HTTP listener settings"""
    host: str = "0.0.0.0"
    port: str = "8080"
    shutdown_timeout: Optional[int] = Field(default=None, ge=0)

    @field_validator("port", mode="before")
    @classmethod
    def _port_to_str(cls, value: Any) -> Any:
        # YAML turns an unquoted port into an int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("port")
    @classmethod
    def _port_in_range(cls, value: str) -> str:
        if not value.isdigit() or not 0 < int(value) < 65536:
            raise ValueError(f"invalid port: {value!r}")
        return value


class DatabaseConfig(BaseModel):
    """PostgreSQL connection settings"""
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = ""
    dbname: str = "postgres"
    sslmode: str = "disable"

    @field_validator("sslmode", mode="before")
    @classmethod
    def _sslmode_from_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return "require" if value else "disable"
        return value

    def url(self) -> URL:
        """
        Build the SQLAlchemy URL for the configured database

        Returns:
            URL using the asyncpg driver
        """
        return URL.create(
            DATABASE_DRIVER,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.dbname,
        )

    def connect_args(self) -> Dict[str, Any]:
        """Driver keyword arguments that cannot travel in the URL"""
        return {"ssl": self.sslmode}


class LoggingConfig(BaseModel):
    """Root logger settings"""
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


class Settings(BaseModel):
    """
    Application settings loaded from the YAML config file.

    Passed explicitly to the DI container; nothing reads it globally.
    """
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    """
    Decide which config file to load

    Args:
        config_path: Path given on the command line, if any

    Returns:
        Path to a YAML config file

    Raises:
        ConfigError: If no path is available or it is not a YAML file name
    """
    if not config_path:
        load_dotenv()
        config_path = os.getenv(CONFIG_ENV_VAR)
    if not config_path:
        raise ConfigError(f"no config file given; pass --config or set {CONFIG_ENV_VAR}")

    path = Path(config_path)
    if path.suffix.lower() not in CONFIG_SUFFIXES:
        raise ConfigError(f"invalid config file name: {path.name}")
    return path


def load_settings(path: Path) -> Settings:
    """
    Read and validate a YAML config file

    Args:
        path: Config file location

    Returns:
        Validated Settings instance

    Raises:
        ConfigError: If the file is unreadable, not YAML, or fails validation
    """
    try:
        with open(path, "r", encoding="utf-8") as config_file:
            raw = yaml.safe_load(config_file)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse config {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(raw).__name__}")

    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"unable to decode config {path}: {e}") from e
