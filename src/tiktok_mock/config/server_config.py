"""
Server Configuration

Loads mock server settings from a YAML file with environment variable
overrides. Missing files fall back to the defaults below.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

# Path: src/tiktok_mock/config/server_config.py -> 4 parents to reach the repo root
DEFAULT_CONFIG_PATH = (
    Path(__file__).parent.parent.parent.parent / "config" / "mock_server.yaml"
)

_TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Base exception for configuration errors."""
    pass


class InvalidConfigValueError(ConfigError):
    """Raised when a config value cannot be converted to its expected type."""
    pass


@dataclass
class ServerConfig:
    """Settings for the mock creative report server."""

    host: str = "0.0.0.0"
    port: int = 443
    debug: bool = False

    # Serve the report handler on every unmatched path (serverless deployments)
    catch_all: bool = False

    # Reported by the health endpoint
    environment: Optional[str] = None
    region: Optional[str] = None

    # When set, every request draws from its own random.Random(seed)
    random_seed: Optional[int] = None

    log_level: str = "INFO"
    log_format: str = "json"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'host': self.host,
            'port': self.port,
            'debug': self.debug,
            'catch_all': self.catch_all,
            'environment': self.environment,
            'region': self.region,
            'random_seed': self.random_seed,
            'log_level': self.log_level,
            'log_format': self.log_format,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in (data or {}).items() if k in known})
        config.port = _to_int("port", config.port)
        if config.random_seed is not None:
            config.random_seed = _to_int("random_seed", config.random_seed)
        config.debug = _to_bool(config.debug)
        config.catch_all = _to_bool(config.catch_all)
        return config


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidConfigValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigValueError(f"{name} must be an integer, got {value!r}")


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def _apply_env_overrides(config: ServerConfig) -> ServerConfig:
    """Apply environment variable overrides on top of file values."""
    env = os.environ

    if env.get("MOCK_TIKTOK_HOST"):
        config.host = env["MOCK_TIKTOK_HOST"]
    if env.get("MOCK_TIKTOK_PORT"):
        config.port = _to_int("MOCK_TIKTOK_PORT", env["MOCK_TIKTOK_PORT"])
    if env.get("MOCK_RANDOM_SEED"):
        config.random_seed = _to_int("MOCK_RANDOM_SEED", env["MOCK_RANDOM_SEED"])
    if env.get("MOCK_CATCH_ALL"):
        config.catch_all = _to_bool(env["MOCK_CATCH_ALL"])
    elif env.get("VERCEL"):
        config.catch_all = True

    config.environment = env.get("VERCEL_ENV", config.environment)
    config.region = env.get("VERCEL_REGION", config.region)
    config.log_level = env.get("LOG_LEVEL", config.log_level).upper()
    config.log_format = env.get("LOG_FORMAT", config.log_format).lower()
    return config


def load_server_config(config_path: Optional[Path] = None) -> ServerConfig:
    """
    Load server configuration.

    Resolution order: defaults, then the YAML file (explicit path,
    MOCK_SERVER_CONFIG, or config/mock_server.yaml), then environment
    overrides.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        ServerConfig

    Raises:
        ConfigError: If the file is not a YAML mapping or a value is invalid
    """
    path = Path(
        config_path
        or os.environ.get("MOCK_SERVER_CONFIG", "")
        or DEFAULT_CONFIG_PATH
    )

    data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            loaded = yaml.safe_load(f)
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        data = (loaded or {}).get("server", loaded or {})

    return _apply_env_overrides(ServerConfig.from_dict(data))
