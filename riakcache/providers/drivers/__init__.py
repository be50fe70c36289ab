"""Cache drivers module."""

from .riak_driver import RiakDriver, RiakDriverOptions

__all__ = ["RiakDriver", "RiakDriverOptions"]
