"""Shared encoding of cache items for storage backends."""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Union

from ...providers.exceptions import DriverError
from ..entities import CacheItem

logger = logging.getLogger(__name__)

DATA_WRAPPER_INDEX = "d"
EXPIRATION_DATE_WRAPPER_INDEX = "e"
TAGS_WRAPPER_INDEX = "t"
CREATION_DATE_WRAPPER_INDEX = "c"
MODIFICATION_DATE_WRAPPER_INDEX = "m"


class ItemCodec:
    """Builds the metadata envelope around an item and (de)serializes it."""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the codec.

        Args:
            encoding: Text encoding used for the stored bytes
        """
        self.encoding = encoding

    def pre_wrap(self, item: CacheItem) -> Dict[str, Any]:
        """
        Build the wrapped representation of an item.

        Args:
            item: The cache item to wrap

        Returns:
            Envelope holding the value and the pool's metadata
        """
        wrapper = {
            DATA_WRAPPER_INDEX: item.value,
            EXPIRATION_DATE_WRAPPER_INDEX: self._format_date(item.expiration_date),
            TAGS_WRAPPER_INDEX: list(item.tags),
        }
        if item.creation_date:
            wrapper[CREATION_DATE_WRAPPER_INDEX] = self._format_date(item.creation_date)
        if item.modification_date:
            wrapper[MODIFICATION_DATE_WRAPPER_INDEX] = self._format_date(
                item.modification_date
            )
        return wrapper

    def encode(self, data: Any) -> bytes:
        """
        Serialize data to bytes.

        Args:
            data: JSON-representable data

        Returns:
            Encoded bytes

        Raises:
            DriverError: If the data cannot be serialized, or would not decode
                back to an equal value (tuples, non-string keys, NaN)
        """
        try:
            encoded = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise DriverError(f"Failed to encode cache payload: {e}") from e

        if json.loads(encoded) != data:
            raise DriverError(
                "Failed to encode cache payload: value does not survive JSON encoding unchanged"
            )
        return encoded.encode(self.encoding)

    def decode(self, raw: Optional[Union[bytes, str]]) -> Optional[Any]:
        """
        Deserialize stored bytes.

        Args:
            raw: Bytes (or text) read from the backend

        Returns:
            Decoded data, or None for missing or empty input

        Raises:
            DriverError: If the stored bytes are not a valid payload
        """
        if not raw:
            return None

        try:
            if isinstance(raw, bytes):
                raw = raw.decode(self.encoding)
            return json.loads(raw)
        except (UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Undecodable cache payload: {e}")
            raise DriverError(f"Failed to decode cache payload: {e}") from e

    @staticmethod
    def unwrap_value(payload: Optional[Dict[str, Any]]) -> Any:
        """Get the item value out of a decoded envelope."""
        if payload is None:
            return None
        return payload.get(DATA_WRAPPER_INDEX)

    @staticmethod
    def _format_date(value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None
