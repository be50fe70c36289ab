"""Driver statistic entity."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class DriverStatistic:
    """Best-effort diagnostic snapshot reported by a cache driver."""

    info: str = ""
    data: str = ""
    raw_data: Any = None
    size: Optional[int] = None  # None when the backend cannot report it

    @property
    def size_known(self) -> bool:
        """Whether the backend reported an occupied size."""
        return self.size is not None

    def to_dict(self) -> dict:
        """
        Convert statistic to dictionary for serialization.

        Returns:
            Dictionary representation of the statistic
        """
        return {
            "info": self.info,
            "data": self.data,
            "raw_data": self.raw_data,
            "size": self.size,
        }
