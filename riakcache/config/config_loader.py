"""Configuration loader and models."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .exceptions import ConfigError, ConfigValidationError, ConfigFileNotFoundError


SUPPORTED_DRIVERS = ("riak",)


class DriverConfig(BaseModel):
    """Cache driver configuration."""
    type: str = "riak"
    config: Dict[str, Any] = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size_mb: int = 10
    backup_count: int = 5


class Config(BaseModel):
    """Main application configuration."""

    # Environment
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Driver
    cache_driver: DriverConfig = Field(default_factory=DriverConfig)

    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigLoader:
    """Configuration loader that handles layered configuration from multiple sources.

    Configuration loading priority (highest to lowest):
    1. Environment variables (.env file or system env)
    2. Local config file (config.local.yaml - user-specific, gitignored)
    3. Project config file (config.yaml - defaults, committed to Git)
    4. Built-in defaults (hardcoded in code)
    """

    def __init__(self, config_file: Optional[str] = None, env_file: Optional[str] = None,
                 local_config_file: Optional[str] = "config.local.yaml", load_env_file: bool = True,
                 use_env_vars: bool = True):
        """
        Initialize config loader.

        Args:
            config_file: Path to main YAML config file (defaults)
            env_file: Path to .env file
            local_config_file: Path to local override config file (None to disable local config)
            load_env_file: Whether to automatically load .env file
            use_env_vars: Whether to use environment variables for overrides
        """
        self.config_file = config_file or "config.yaml"
        self.local_config_file = local_config_file
        self.env_file = env_file or ".env"
        self.load_env_file = load_env_file
        self.use_env_vars = use_env_vars

    def load(self) -> Config:
        """
        Load configuration from multiple sources with proper precedence.

        Returns:
            Validated Config object

        Raises:
            ConfigError: If configuration loading fails
        """
        try:
            if self.load_env_file and Path(self.env_file).exists():
                load_dotenv(self.env_file)

            config_data = self._load_layered_yaml_config()

            if self.use_env_vars:
                config_data = self._override_with_env(config_data)

            config = Config(**config_data)

            self._validate_config(config)

            return config

        except Exception as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

    def _load_layered_yaml_config(self) -> Dict[str, Any]:
        """Load configuration from multiple YAML files with proper layering."""
        config_data = {}

        base_config = self._load_single_yaml_config(self.config_file)
        if base_config:
            config_data.update(base_config)

        if self.local_config_file:
            local_config = self._load_single_yaml_config(self.local_config_file)
            if local_config:
                config_data = self._deep_merge_configs(config_data, local_config)

        return config_data

    def _load_single_yaml_config(self, config_file: str) -> Dict[str, Any]:
        """Load configuration from a single YAML file."""
        config_path = Path(config_file)

        if not config_path.exists():
            return {}

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in config file '{config_file}': {e}") from e
        except Exception as e:
            raise ConfigFileNotFoundError(f"Cannot read config file '{config_file}': {e}") from e

    def _deep_merge_configs(self, base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries.

        Args:
            base_config: Base configuration dictionary
            override_config: Override configuration dictionary

        Returns:
            Merged configuration dictionary
        """
        import copy
        result = copy.deepcopy(base_config)

        for key, value in override_config.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _override_with_env(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Override configuration with environment variables."""
        env_mappings = {
            'ENVIRONMENT': 'environment',
            'DEBUG': 'debug',
            'CACHE_DRIVER_TYPE': 'cache_driver.type',
            'RIAK_HOST': 'cache_driver.config.host',
            'RIAK_PORT': 'cache_driver.config.port',
            'RIAK_PREFIX': 'cache_driver.config.prefix',
            'RIAK_BUCKET_NAME': 'cache_driver.config.bucketName',
            'LOG_LEVEL': 'logging.level',
            'LOG_FILE_PATH': 'logging.file_path'
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                keys = config_path.split('.')
                current = config_data
                for key in keys[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                current[keys[-1]] = self._convert_env_value(env_value, keys[-1])

        return config_data

    def _convert_env_value(self, value: str, key: str) -> Any:
        """Convert environment variable value to appropriate type."""
        # Boolean values
        if key in ['debug']:
            return value.lower() == 'true'

        # Integer values
        if key in ['port', 'max_file_size_mb', 'backup_count']:
            try:
                return int(value)
            except ValueError:
                return value

        return value

    def _validate_config(self, config: Config) -> None:
        """Perform additional configuration validation."""
        if config.cache_driver.type.lower() not in SUPPORTED_DRIVERS:
            raise ConfigValidationError(
                f"Unsupported cache driver type: {config.cache_driver.type}"
            )
