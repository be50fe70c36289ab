"""Factories module."""

from .driver_factory import DriverFactory, DriverFactoryError

__all__ = ["DriverFactory", "DriverFactoryError"]
