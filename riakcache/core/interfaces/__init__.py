"""Core interfaces module."""

from .cache_driver import CacheDriver

__all__ = ["CacheDriver"]
