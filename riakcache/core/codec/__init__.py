"""Item codec module."""

from .item_codec import (
    CREATION_DATE_WRAPPER_INDEX,
    DATA_WRAPPER_INDEX,
    EXPIRATION_DATE_WRAPPER_INDEX,
    MODIFICATION_DATE_WRAPPER_INDEX,
    TAGS_WRAPPER_INDEX,
    ItemCodec,
)

__all__ = [
    "ItemCodec",
    "DATA_WRAPPER_INDEX",
    "EXPIRATION_DATE_WRAPPER_INDEX",
    "TAGS_WRAPPER_INDEX",
    "CREATION_DATE_WRAPPER_INDEX",
    "MODIFICATION_DATE_WRAPPER_INDEX",
]
