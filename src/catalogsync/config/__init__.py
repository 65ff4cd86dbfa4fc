"""Application configuration helpers."""

from __future__ import annotations

from .catalog import CATALOG_PATH_ENV_VAR, CatalogConfig, get_catalog_config
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "CATALOG_PATH_ENV_VAR",
    "CatalogConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_catalog_config",
    "get_database_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
]
