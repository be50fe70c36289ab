"""Core entities module."""

from .cache_item import CacheItem
from .driver_statistic import DriverStatistic

__all__ = [
    "CacheItem",
    "DriverStatistic",
]
