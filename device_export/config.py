"""
Load the pipeline configuration from config.yaml and environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigError

DEFAULT_API_URL = "https://api.restful-api.dev/objects"
DEFAULT_OUTPUT_FILE = "AppleDevices.csv"
DEFAULT_BRAND = "Apple"
DEFAULT_CONFIG_FILE = "config.yaml"


@dataclass(frozen=True)
class PipelineConfig:
    """Everything one pipeline run needs. Defaults reproduce the stock export."""

    api_url: str = DEFAULT_API_URL
    output_file: str = DEFAULT_OUTPUT_FILE
    brand: str = DEFAULT_BRAND
    timeout: Optional[float] = None
    user_agent: Optional[str] = None
    header: Tuple[str, ...] = ("Name", "Price")
    log_level: str = "INFO"


class Config:
    """Configuration loader that reads from config.yaml and environment variables."""

    env_mappings = {
        'EXPORT_API_URL': ('api', 'url', str),
        'EXPORT_OUTPUT_FILE': ('export', 'output_file', str),
        'EXPORT_BRAND': ('filter', 'brand', str),
        'FETCHER_TIMEOUT': ('fetcher', 'timeout', float),
        'FETCHER_USER_AGENT': ('fetcher', 'user_agent', str),
        'LOG_LEVEL': ('logging', 'level', str),
    }

    def __init__(self, config_path: str = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to a YAML file. If None, config.yaml in the
                working directory is used when it exists, defaults otherwise.
        """
        self.explicit = config_path is not None
        self.config_path = Path(config_path if config_path is not None else DEFAULT_CONFIG_FILE)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and override with environment variables."""
        config: Dict[str, Any] = {}
        if self.explicit or self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    config = yaml.safe_load(f) or {}
            except FileNotFoundError:
                raise ConfigError(f"Configuration file not found: {self.config_path}")
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must hold a mapping: {self.config_path}")

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        for env_var, (*config_path, convert) in self.env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                current = config
                for key in config_path[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                try:
                    current[config_path[-1]] = convert(env_value)
                except ValueError as e:
                    raise ConfigError(f"Invalid value for {env_var}: {env_value!r}") from e

        return config

    def get(self, *keys, default=None):
        """Get configuration value by nested keys.

        Args:
            *keys: Configuration keys (e.g., 'fetcher', 'timeout')
            default: Default value if key not found
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def _timeout(self) -> Optional[float]:
        timeout = self.get('fetcher', 'timeout')
        if timeout is None:
            return None
        # bool is an int subclass
        if isinstance(timeout, bool):
            raise ConfigError(f"fetcher.timeout must be a number of seconds, got {timeout!r}")
        try:
            return float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"fetcher.timeout must be a number of seconds, got {timeout!r}") from e

    def _header(self) -> Tuple[str, ...]:
        header = self.get('export', 'header', default=["Name", "Price"])
        if not isinstance(header, (list, tuple)) or len(header) != 2:
            raise ConfigError(f"export.header must list exactly two columns, got {header!r}")
        return tuple(str(column) for column in header)

    def to_pipeline_config(self, **overrides) -> PipelineConfig:
        """Build a PipelineConfig; keyword overrides set to None are ignored."""
        user_agent = self.get('fetcher', 'user_agent')

        values = {
            'api_url': str(self.get('api', 'url', default=DEFAULT_API_URL)),
            'output_file': str(self.get('export', 'output_file', default=DEFAULT_OUTPUT_FILE)),
            'brand': str(self.get('filter', 'brand', default=DEFAULT_BRAND)),
            'timeout': self._timeout(),
            'user_agent': str(user_agent) if user_agent else None,
            'header': self._header(),
            'log_level': str(self.get('logging', 'level', default='INFO')).upper(),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return PipelineConfig(**values)
