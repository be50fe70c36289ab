"""Driver factory for creating cache driver instances based on configuration."""

import logging
from typing import Any, Callable, Optional

from riakcache.config import Config
from riakcache.core.interfaces import CacheDriver
from riakcache.providers.drivers import RiakDriver


logger = logging.getLogger(__name__)


class DriverFactoryError(Exception):
    """Exception raised by DriverFactory."""
    pass


class DriverFactory:
    """Factory for creating cache driver instances based on configuration."""

    def __init__(self, config: Config, client_factory: Optional[Callable[..., Any]] = None):
        """
        Initialize driver factory with configuration.

        Args:
            config: Application configuration
            client_factory: Optional callable building the backend client
        """
        self.config = config
        self.client_factory = client_factory

    def create_cache_driver(self) -> CacheDriver:
        """
        Create cache driver based on configuration.

        Returns:
            CacheDriver instance, already connected

        Raises:
            DriverFactoryError: If driver creation fails
        """
        driver_type = self.config.cache_driver.type.lower()
        logger.debug(f"Creating cache driver: {driver_type}")

        if driver_type != "riak":
            raise DriverFactoryError(f"Unknown cache driver type: {self.config.cache_driver.type}")

        try:
            return RiakDriver(
                config=self.config.cache_driver.config,
                client_factory=self.client_factory,
            )
        except Exception as e:
            raise DriverFactoryError(f"Failed to create cache driver: {e}") from e
