"""Cache driver interface for backend implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

from ..entities import CacheItem, DriverStatistic


class CacheDriver(ABC):
    """Interface a backend must honor to take part in a multi-backend cache pool."""

    DRIVER_CHECK_FAILURE = "Driver {} is not supported by your environment"

    @abstractmethod
    def get_driver_name(self) -> str:
        """
        Get the name of the driver family.

        Returns:
            Driver name (e.g., 'riak'), carried by every item the driver produces
        """
        pass

    @abstractmethod
    def driver_check(self) -> bool:
        """
        Check whether the backend client library is available.

        Must not raise and must not touch the network.

        Returns:
            True if the driver can run in this environment, False otherwise
        """
        pass

    @abstractmethod
    def driver_connect(self) -> bool:
        """
        Establish the connection handle to the backend.

        Returns:
            True once connected

        Raises:
            DriverLogicError: If the driver is already connected
        """
        pass

    @abstractmethod
    def driver_read(self, item: CacheItem) -> Optional[Any]:
        """
        Read the stored payload for an item.

        Args:
            item: The cache item to look up

        Returns:
            Decoded payload if found, None otherwise
        """
        pass

    @abstractmethod
    def driver_write(self, item: CacheItem) -> bool:
        """
        Persist an item.

        Args:
            item: The cache item to store

        Returns:
            True if the backend confirmed the store

        Raises:
            DriverInvalidArgumentError: If the item belongs to another driver
        """
        pass

    @abstractmethod
    def driver_delete(self, item: CacheItem) -> bool:
        """
        Delete an item.

        Args:
            item: The cache item to delete

        Returns:
            True if the item is gone

        Raises:
            DriverInvalidArgumentError: If the item belongs to another driver
        """
        pass

    @abstractmethod
    def driver_clear(self) -> bool:
        """
        Remove every item of the driver's namespace.

        Returns:
            True
        """
        pass

    @abstractmethod
    def get_stats(self, item_instances: Iterable[str] = ()) -> DriverStatistic:
        """
        Get driver statistics.

        Args:
            item_instances: Identifiers of the items currently tracked by the pool

        Returns:
            DriverStatistic snapshot
        """
        pass

    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """
        Get the driver's default options.

        Returns:
            Fresh dictionary of default options
        """
        pass

    @abstractmethod
    def health_check(self) -> Dict[str, Any]:
        """
        Check if the backend is reachable.

        Returns:
            Dict with backend, connected and healthy fields
        """
        pass
