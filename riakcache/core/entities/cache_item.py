"""Cache item entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional


@dataclass
class CacheItem:
    """Represents a single item handed to a cache driver by the pool layer."""

    key: str
    value: Any
    driver_name: str  # identity of the driver family that produced the item
    expiration_date: Optional[datetime] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate item data."""
        if not isinstance(self.key, str) or not self.key:
            raise ValueError("Cache item key must be a non-empty string")
        if not self.driver_name or not self.driver_name.strip():
            raise ValueError("Driver name cannot be empty")

    def belongs_to(self, driver_name: str) -> bool:
        """Check if this item was produced by the given driver family."""
        return self.driver_name == driver_name
