"""Test configuration and utilities."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from riakcache.core.entities import CacheItem


class FakeRiakObject:
    """In-memory stand-in for riak.RiakObject."""

    def __init__(self, bucket, key, encoded_data=None, content_type=None):
        self.bucket = bucket
        self.key = key
        self.encoded_data = encoded_data
        self.content_type = content_type

    @property
    def exists(self):
        return self.key in self.bucket.records

    def store(self):
        self.bucket.records[self.key] = self.encoded_data
        return self

    def delete(self):
        self.bucket.records.pop(self.key, None)
        self.bucket.deleted.append(self.key)
        return self


class FakeRiakBucket:
    """In-memory stand-in for riak.RiakBucket."""

    def __init__(self, name):
        self.name = name
        self.records = {}
        self.deleted = []
        self.properties = {"n_val": 3, "allow_mult": False, "name": name}

    def new(self, key=None, data=None, content_type="application/json", encoded_data=None):
        return FakeRiakObject(self, key, encoded_data=encoded_data, content_type=content_type)

    def get(self, key):
        return FakeRiakObject(self, key, encoded_data=self.records.get(key))

    def get_keys(self):
        return list(self.records)

    def get_properties(self):
        return dict(self.properties)


class FakeRiakClient:
    """In-memory stand-in for riak.RiakClient."""

    def __init__(self, host="127.0.0.1", port=8098, prefix="riak"):
        self.host = host
        self.port = port
        self.prefix = prefix
        self.buckets = {}
        self.ping_result = True

    def bucket(self, name):
        if name not in self.buckets:
            self.buckets[name] = FakeRiakBucket(name)
        return self.buckets[name]

    def ping(self):
        return self.ping_result


class FakeClientFactory:
    """Records every client it builds."""

    def __init__(self):
        self.clients = []

    def __call__(self, host, port, prefix):
        client = FakeRiakClient(host, port, prefix)
        self.clients.append(client)
        return client

    @property
    def last_client(self):
        return self.clients[-1] if self.clients else None


@pytest.fixture
def riak_installed():
    """Pretend the riak client library is installed."""
    with patch(
        "riakcache.providers.drivers.riak_driver.find_spec",
        return_value=object(),
    ) as mock_find_spec:
        yield mock_find_spec


@pytest.fixture
def riak_missing():
    """Pretend the riak client library is not installed."""
    with patch(
        "riakcache.providers.drivers.riak_driver.find_spec",
        return_value=None,
    ) as mock_find_spec:
        yield mock_find_spec


@pytest.fixture
def client_factory():
    """Create a fake Riak client factory."""
    return FakeClientFactory()


@pytest.fixture
def riak_driver(riak_installed, client_factory):
    """Create a connected Riak driver backed by the fake client."""
    from riakcache.providers.drivers import RiakDriver

    return RiakDriver(client_factory=client_factory)


@pytest.fixture
def fake_bucket(riak_driver, client_factory):
    """Get the fake bucket the driver writes to."""
    return client_factory.last_client.bucket(riak_driver.bucket_name)


@pytest.fixture
def sample_item(riak_driver):
    """Create a cache item produced by the Riak driver."""
    return riak_driver.new_item(
        "user:42",
        {"name": "ann", "roles": ["admin", "dev"], "age": 31},
        expiration_date=datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        tags=["users", "profiles"],
    )


@pytest.fixture
def foreign_item():
    """Create a cache item produced by another driver family."""
    return CacheItem(key="user:42", value={"name": "mallory"}, driver_name="redis")


@pytest.fixture
def test_config_path():
    """Get path to test configuration file."""
    from pathlib import Path

    config_path = Path(__file__).parent / "config.tests.yaml"
    return str(config_path)


@pytest.fixture
def test_config(test_config_path):
    """Load test configuration."""
    from riakcache.config.config_loader import ConfigLoader

    config_loader = ConfigLoader(
        config_file=test_config_path,
        local_config_file=None,  # Disable local config overrides for tests
        load_env_file=False,  # Disable .env file loading for tests
        use_env_vars=False,  # Disable environment variable overrides for tests
    )
    return config_loader.load()
