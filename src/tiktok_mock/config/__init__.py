"""
Mock Server Configuration Module

Settings come from config/mock_server.yaml with environment overrides.
"""

from .server_config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    InvalidConfigValueError,
    ServerConfig,
    load_server_config,
)

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'ConfigError',
    'InvalidConfigValueError',
    'ServerConfig',
    'load_server_config',
]
