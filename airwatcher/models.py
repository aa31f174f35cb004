"""Domain objects: measured attributes, sensors, measurements and air cleaners."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attribute:
    """A quantity measured by a sensor, such as O3 or PM10."""

    attribute_id: int
    unit: str
    description: str


@dataclass
class Sensor:
    """A sensor at a fixed position, optionally owned by a user."""

    sensor_id: int
    latitude: float
    longitude: float
    user_id: Optional[int] = None


@dataclass(frozen=True)
class Measurement:
    """A single value recorded by a sensor at a given time."""

    timestamp: int
    value: float
    sensor_id: int
    attribute_id: str


@dataclass
class Cleaner:
    """An air cleaner installed at a position by a provider."""

    cleaner_id: int
    latitude: float
    longitude: float
    provider_id: int
    time_start: int = field(default=0)
    time_stop: int = field(default=0)

    def __post_init__(self) -> None:
        logger.debug("Cleaner created with ID: %s", self.cleaner_id)

    def start(self) -> int:
        """Record the current time as the start of operation and return it."""
        self.time_start = int(time.time())
        logger.info("Cleaner started at: %s", time.ctime(self.time_start))
        return self.time_start

    def stop(self) -> int:
        """Record the current time as the end of operation and return it."""
        self.time_stop = int(time.time())
        logger.info("Cleaner stopped at: %s", time.ctime(self.time_stop))
        return self.time_stop