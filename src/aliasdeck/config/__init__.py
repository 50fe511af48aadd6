"""Application configuration helpers."""

from __future__ import annotations

from .env import env_bool, env_float, env_str
from .errors import ConfigurationError
from .logging import configure_logging
from .otp import OtpConfig, get_otp_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .workspace import WorkspaceConfig, get_workspace_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "OtpConfig",
    "StorageConfig",
    "WorkspaceConfig",
    "configure_logging",
    "env_bool",
    "env_float",
    "env_str",
    "get_database_config",
    "get_otp_config",
    "get_storage_config",
    "get_workspace_config",
]
