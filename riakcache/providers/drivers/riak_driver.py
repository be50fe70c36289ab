"""Riak cache driver implementation."""

import logging
from enum import Enum
from importlib.util import find_spec
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.exceptions import ConfigValidationError
from ...core.codec import ItemCodec
from ...core.entities import CacheItem, DriverStatistic
from ...core.interfaces import CacheDriver
from ..exceptions import (
    DriverCheckError,
    DriverError,
    DriverInvalidArgumentError,
    DriverLogicError,
)

logger = logging.getLogger(__name__)

RIAK_DEFAULT_BUCKET_NAME = "phpfastcache"


class ConnectionState(Enum):
    """Connection state of a driver instance."""

    UNINITIALIZED = "uninitialized"
    CONNECTED = "connected"


class RiakDriverOptions(BaseModel):
    """Options recognized by the Riak driver."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    host: str = "127.0.0.1"
    port: int = 8098
    prefix: str = "riak"
    bucket_name: str = Field(default=RIAK_DEFAULT_BUCKET_NAME, alias="bucketName")

    @field_validator("host", "bucket_name")
    @classmethod
    def validate_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError("must be between 1 and 65535")
        return value

    def to_config(self) -> Dict[str, Any]:
        """Get options keyed the way callers pass them in."""
        return self.model_dump(by_alias=True)


class RiakDriver(CacheDriver):
    """Riak backend driver for cache pool operations.

    The driver is synchronous and holds a single client for its whole
    lifetime. Calls from several threads must be serialized by the caller.
    """

    DRIVER_NAME = "riak"
    CLIENT_MODULE = "riak"
    BINARY_CONTENT_TYPE = "application/octet-stream"

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        """
        Initialize and connect the Riak driver.

        Args:
            config: Driver options (host, port, prefix, bucketName)
            client_factory: Callable building the Riak client from host, port
                and prefix. Defaults to the `riak` library's RiakClient.

        Raises:
            ConfigValidationError: If the options are invalid
            DriverCheckError: If the riak client library is not installed
        """
        self._state = ConnectionState.UNINITIALIZED
        self._instance = None
        self._codec = ItemCodec()
        self._client_factory = client_factory or self._create_client
        self.bucket_name = RIAK_DEFAULT_BUCKET_NAME
        self._options = self._setup(config or {})

        if not self.driver_check():
            raise DriverCheckError(self.DRIVER_CHECK_FAILURE.format(self.get_driver_name()))
        self.driver_connect()

    def _setup(self, config: Mapping[str, Any]) -> RiakDriverOptions:
        options = {**self.get_default_config(), **config}
        try:
            return RiakDriverOptions(**options)
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid Riak driver configuration: {e}") from e

    @staticmethod
    def _create_client(host: str, port: int, prefix: str) -> Any:
        import riak

        # RiakClient 2.x accepts prefix as an unused node option and ignores it
        if prefix != "riak":
            logger.debug(f"Riak prefix '{prefix}' is ignored by the riak client")
        return riak.RiakClient(protocol="http", host=host, http_port=port, prefix=prefix)

    def get_driver_name(self) -> str:
        return self.DRIVER_NAME

    def get_config(self) -> Dict[str, Any]:
        """Get a copy of the resolved driver options."""
        return self._options.to_config()

    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    def driver_check(self) -> bool:
        """
        Check whether the riak client library can be imported.

        Returns:
            True if the library is installed, False otherwise
        """
        try:
            return find_spec(self.CLIENT_MODULE) is not None
        except (ImportError, ValueError):
            return False

    def driver_connect(self) -> bool:
        """
        Create the Riak client from the resolved options.

        Returns:
            True once connected

        Raises:
            DriverLogicError: If the driver is already connected
        """
        if self._state is ConnectionState.CONNECTED:
            raise DriverLogicError("Already connected to Riak server")

        options = self._options
        self._instance = self._client_factory(options.host, options.port, options.prefix)
        self.bucket_name = options.bucket_name
        self._state = ConnectionState.CONNECTED
        logger.info(
            f"Connected to Riak at {options.host}:{options.port} "
            f"(bucket '{self.bucket_name}')"
        )
        return True

    def _bucket(self):
        return self._instance.bucket(self.bucket_name)

    def _check_item(self, item: CacheItem) -> None:
        if not isinstance(item, CacheItem) or not item.belongs_to(self.get_driver_name()):
            raise DriverInvalidArgumentError("Cross-Driver type confusion detected")

    def new_item(self, key: str, value: Any = None, **kwargs: Any) -> CacheItem:
        """
        Build a cache item tagged with this driver's identity.

        Args:
            key: The cache key
            value: The value to cache
            **kwargs: Extra CacheItem fields (expiration_date, tags, ...)

        Returns:
            CacheItem accepted by this driver's write and delete
        """
        return CacheItem(key=key, value=value, driver_name=self.get_driver_name(), **kwargs)

    def driver_read(self, item: CacheItem) -> Optional[Dict[str, Any]]:
        """
        Fetch and decode the envelope stored for an item.

        Args:
            item: The cache item to look up

        Returns:
            Decoded envelope if found, None if the key is missing or empty
        """
        riak_object = self._bucket().get(item.key)
        if not riak_object.exists:
            return None
        return self._codec.decode(riak_object.encoded_data)

    def driver_write(self, item: CacheItem) -> bool:
        """
        Store the wrapped item, creating or overwriting the key.

        Args:
            item: The cache item to store

        Returns:
            True once Riak confirmed the store

        Raises:
            DriverInvalidArgumentError: If the item belongs to another driver
        """
        self._check_item(item)

        payload = self._codec.encode(self._codec.pre_wrap(item))
        self._bucket().new(
            item.key,
            encoded_data=payload,
            content_type=self.BINARY_CONTENT_TYPE,
        ).store()
        return True

    def driver_delete(self, item: CacheItem) -> bool:
        """
        Delete the record stored for an item.

        Deleting a key that does not exist is a no-op.

        Args:
            item: The cache item to delete

        Returns:
            True

        Raises:
            DriverInvalidArgumentError: If the item belongs to another driver
        """
        self._check_item(item)

        riak_object = self._bucket().get(item.key)
        if not riak_object.exists:
            logger.debug(f"Key {item.key} not found in bucket {self.bucket_name}, nothing to delete")
            return True

        riak_object.delete()
        return True

    def driver_clear(self) -> bool:
        """
        Delete every key of the bucket one by one.

        Keys written while the clear runs may or may not survive it.

        Returns:
            True
        """
        bucket = self._bucket()
        keys = list(bucket.get_keys())
        for key in keys:
            bucket.get(key).delete()

        logger.info(f"Cleared {len(keys)} keys from Riak bucket {self.bucket_name}")
        return True

    def get_stats(self, item_instances: Iterable[str] = ()) -> DriverStatistic:
        """
        Get Riak driver statistics.

        Args:
            item_instances: Identifiers of the items currently tracked by the pool

        Returns:
            DriverStatistic with the bucket properties as raw data

        Raises:
            DriverError: If Riak cannot be reached
        """
        try:
            properties = self._bucket().get_properties()
        except Exception as e:
            raise DriverError(f"Failed to get Riak bucket properties: {e}") from e

        return DriverStatistic(
            data=", ".join(item_instances),
            raw_data=properties,
            size=None,
            info="Riak does not provide size/date information at all",
        )

    def get_default_config(self) -> Dict[str, Any]:
        return {
            "host": "127.0.0.1",
            "port": 8098,
            "prefix": "riak",
            "bucketName": RIAK_DEFAULT_BUCKET_NAME,
        }

    def health_check(self) -> Dict[str, Any]:
        """
        Ping Riak to check health.

        Returns:
            Dict with backend, connected and healthy fields
        """
        healthy = False
        if self.is_connected():
            try:
                healthy = bool(self._instance.ping())
            except Exception as e:
                logger.warning(f"Riak ping failed: {e}")

        return {
            "backend": self.get_driver_name(),
            "connected": self.is_connected(),
            "healthy": healthy,
        }
