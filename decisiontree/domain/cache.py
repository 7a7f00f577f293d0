"""
Interning cache for input drivers.
"""

import threading
from typing import Any, Dict, Optional, Tuple

from shared.logging import get_logger
from .drivers import InputDriver, InputValueType


class DriverCache:
    """Holds one canonical InputDriver per (value, type) pair.

    Rules built from the same driver values share the canonical instance
    after normalization, so a large rule set keeps a single copy of each
    distinct driver.
    """

    def __init__(self):
        self.logger = get_logger("decisiontree.cache.drivers")
        self._drivers: Dict[Tuple[str, InputValueType], InputDriver] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, value: str, value_type: InputValueType) -> Optional[InputDriver]:
        """Get the canonical driver for a value and type."""
        with self._lock:
            driver = self._drivers.get((value, value_type))
            if driver is None:
                self._misses += 1
            else:
                self._hits += 1
            return driver

    def put(self, driver: InputDriver) -> None:
        """Add a driver; an existing canonical instance is kept."""
        key = (driver.value, driver.type)
        with self._lock:
            if key in self._drivers:
                return
            self._drivers[key] = driver
        self.logger.debug("Driver cached", value=driver.value, type=driver.type.value)

    def contains(self, value: str, value_type: InputValueType) -> bool:
        """Check if a canonical driver exists without touching the stats."""
        with self._lock:
            return (value, value_type) in self._drivers

    def clear(self) -> None:
        """Remove all cached drivers."""
        with self._lock:
            self._drivers.clear()
            self._hits = 0
            self._misses = 0
        self.logger.info("Driver cache cleared")

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            return {
                "size": len(self._drivers),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._drivers)
