"""Application entry point for building a configured cache driver."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from .config import ConfigLoader, Config
from .core.interfaces import CacheDriver
from .factories import DriverFactory


logger = logging.getLogger(__name__)


def setup_logging(config: Config) -> None:
    """Setup logging configuration."""
    log_format = config.logging.format
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.logging.file_path:
        file_path = Path(config.logging.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.logging.max_file_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def create_driver(
    config_file: str = "config.yaml",
    env_file: str = ".env",
    client_factory: Optional[Callable[..., Any]] = None,
    configure_logging: bool = True,
) -> CacheDriver:
    """
    Load configuration and build a connected cache driver.

    Args:
        config_file: Path to configuration file
        env_file: Path to environment file
        client_factory: Optional callable building the backend client
        configure_logging: Whether to configure the root logger from the config

    Returns:
        Connected CacheDriver

    Raises:
        ConfigError: If the configuration cannot be loaded
        DriverFactoryError: If the driver cannot be created
    """
    config = ConfigLoader(config_file=config_file, env_file=env_file).load()

    if configure_logging:
        setup_logging(config)

    driver = DriverFactory(config, client_factory=client_factory).create_cache_driver()
    logger.info(f"Cache driver '{driver.get_driver_name()}' ready ({config.environment})")
    return driver
