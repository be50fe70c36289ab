"""Unit tests for ItemCodec."""

from datetime import datetime, timezone

import pytest

from riakcache.core.codec import (
    CREATION_DATE_WRAPPER_INDEX,
    DATA_WRAPPER_INDEX,
    EXPIRATION_DATE_WRAPPER_INDEX,
    MODIFICATION_DATE_WRAPPER_INDEX,
    TAGS_WRAPPER_INDEX,
    ItemCodec,
)
from riakcache.core.entities import CacheItem
from riakcache.providers.exceptions import DriverError


@pytest.fixture
def codec():
    return ItemCodec()


class TestPreWrap:
    """Test the metadata envelope."""

    def test_minimal_envelope(self, codec):
        """Test an item without pool metadata."""
        item = CacheItem(key="k", value=[1, 2, 3], driver_name="riak")

        assert codec.pre_wrap(item) == {
            DATA_WRAPPER_INDEX: [1, 2, 3],
            EXPIRATION_DATE_WRAPPER_INDEX: None,
            TAGS_WRAPPER_INDEX: [],
        }

    def test_envelope_with_dates(self, codec):
        """Test that creation and modification dates are included when set."""
        created = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
        modified = datetime(2024, 5, 2, 9, 45, tzinfo=timezone.utc)
        item = CacheItem(
            key="k",
            value="v",
            driver_name="riak",
            expiration_date=modified,
            creation_date=created,
            modification_date=modified,
            tags=["a"],
        )

        wrapper = codec.pre_wrap(item)

        assert wrapper[CREATION_DATE_WRAPPER_INDEX] == "2024-05-01T08:30:00+00:00"
        assert wrapper[MODIFICATION_DATE_WRAPPER_INDEX] == "2024-05-02T09:45:00+00:00"
        assert wrapper[EXPIRATION_DATE_WRAPPER_INDEX] == "2024-05-02T09:45:00+00:00"
        assert wrapper[TAGS_WRAPPER_INDEX] == ["a"]


class TestEncodeDecode:
    """Test serialization."""

    def test_encode_returns_utf8_bytes(self, codec):
        """Test that encoded data is UTF-8 JSON."""
        assert codec.encode({"name": "zoë"}) == '{"name": "zo\\u00eb"}'.encode("utf-8")

    def test_decode_restores_structure(self, codec):
        """Test that nested structures decode back to equal values."""
        data = {DATA_WRAPPER_INDEX: {"nested": [1, {"x": None}], "flag": True}}

        assert codec.decode(codec.encode(data)) == data

    def test_decode_accepts_text(self, codec):
        """Test that text payloads are decoded too."""
        assert codec.decode('{"d": 5}') == {"d": 5}

    @pytest.mark.parametrize("raw", [None, b"", ""])
    def test_decode_empty_returns_none(self, codec, raw):
        """Test that missing or empty input is absent."""
        assert codec.decode(raw) is None

    def test_decode_invalid_raises(self, codec):
        """Test that invalid JSON raises DriverError."""
        with pytest.raises(DriverError, match="Failed to decode"):
            codec.decode(b"{not json")

    def test_encode_unserializable_raises(self, codec):
        """Test that values JSON cannot represent raise DriverError."""
        with pytest.raises(DriverError, match="Failed to encode"):
            codec.encode({"value": object()})

    @pytest.mark.parametrize(
        "data",
        [
            {1: ("a", "b")},
            {"point": (1, 2)},
            {"ratio": float("nan")},
        ],
    )
    def test_encode_lossy_value_raises(self, codec, data):
        """Test that values JSON would silently change are refused."""
        with pytest.raises(DriverError, match="does not survive JSON encoding"):
            codec.encode(data)

    def test_unwrap_value(self):
        """Test unwrapping an envelope."""
        assert ItemCodec.unwrap_value({DATA_WRAPPER_INDEX: "v"}) == "v"
        assert ItemCodec.unwrap_value(None) is None
