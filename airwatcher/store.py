"""In-memory store of the records loaded from the CSV data folder."""

from __future__ import annotations

import bisect
import logging
import time
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Union

from airwatcher.models import Cleaner, Measurement, Sensor
from airwatcher.users import Individual, Provider, User

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_SENSOR_PREFIX = len("Sensor")
_USER_PREFIX = len("User")
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RecordNotFoundError(LookupError):
    """Raised when no record carries the requested identifier."""


def _rows(path: Path) -> Iterator[list[str]]:
    with path.open(encoding="utf-8", newline="") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line.split(";")


def _field(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _parse_id(text: str, prefix_length: int) -> int:
    return int(text[prefix_length:].strip())


def _parse_timestamp(text: str) -> Optional[int]:
    try:
        parsed = time.strptime(text.strip(), _TIMESTAMP_FORMAT)
    except ValueError:
        return None
    # Interpreted as local standard time, daylight saving switched off.
    return int(time.mktime(tuple(parsed[:8]) + (0,)))


def _lookup(table: dict, key: int, kind: str):
    try:
        return table[key]
    except KeyError:
        raise RecordNotFoundError(f"{kind} not found") from None


class DataStore:
    """Holds sensors, measurements and users, indexed for lookup."""

    def __init__(self) -> None:
        self.cleaners: dict[int, Cleaner] = {}
        self.individuals: dict[int, Individual] = {}
        self.providers: dict[int, Provider] = {}
        self.sensors: dict[int, Sensor] = {}
        self.users: dict[int, User] = {}
        self._timestamps: list[int] = []
        self._measurements: list[Measurement] = []

    @property
    def measurements(self) -> list[Measurement]:
        """All measurements, ordered by timestamp then by insertion."""
        return list(self._measurements)

    def add_measurement(self, measurement: Measurement) -> None:
        """Insert a measurement, keeping the timestamp order."""
        index = bisect.bisect_right(self._timestamps, measurement.timestamp)
        self._timestamps.insert(index, measurement.timestamp)
        self._measurements.insert(index, measurement)

    def extract_all(self, folder: PathLike) -> None:
        """Load sensors then measurements from a data folder."""
        self.extract_sensors(folder)
        self.extract_measurements(folder)

    def extract_sensors(self, folder: PathLike) -> None:
        """Load ``sensors.csv``: ``SensorN;latitude;longitude;`` per line."""
        for row in _rows(Path(folder) / "sensors.csv"):
            sensor_id = _parse_id(_field(row, 0), _SENSOR_PREFIX)
            latitude = float(_field(row, 1))
            longitude = float(_field(row, 2))
            self.sensors.setdefault(sensor_id, Sensor(sensor_id, latitude, longitude))
            logger.debug(
                "Sensor ID: %s, Latitude: %s, Longitude: %s",
                sensor_id,
                latitude,
                longitude,
            )

    def extract_measurements(self, folder: PathLike) -> None:
        """Load ``measurements.csv``: ``timestamp;SensorN;attribute;value;``.

        Lines whose timestamp is not ``YYYY-MM-DD HH:MM:SS`` are skipped.
        """
        for row in _rows(Path(folder) / "measurements.csv"):
            raw_timestamp = _field(row, 0)
            timestamp = _parse_timestamp(raw_timestamp)
            if timestamp is None:
                logger.warning("Invalid timestamp format: %s", raw_timestamp)
                continue
            value = float(_field(row, 3))
            sensor_id = _parse_id(_field(row, 1), _SENSOR_PREFIX)
            attribute_id = _field(row, 2)
            self.add_measurement(Measurement(timestamp, value, sensor_id, attribute_id))

    def extract_users(self, folder: PathLike) -> None:
        """Load ``users.csv``: ``UserN;SensorM;`` assigns sensor M to user N."""
        for row in _rows(Path(folder) / "users.csv"):
            user_id = _parse_id(_field(row, 0), _USER_PREFIX)
            sensor_id = _parse_id(_field(row, 1), _SENSOR_PREFIX)
            sensor = self.sensors.get(sensor_id)
            if sensor is None:
                logger.warning("Sensor with ID %s not found.", sensor_id)
                continue
            sensor.user_id = user_id

    def get_cleaner(self, cleaner_id: int) -> Cleaner:
        return _lookup(self.cleaners, cleaner_id, "Cleaner")

    def get_individual(self, user_id: int) -> Individual:
        return _lookup(self.individuals, user_id, "Individual")

    def get_provider(self, user_id: int) -> Provider:
        return _lookup(self.providers, user_id, "Provider")

    def get_sensor(self, sensor_id: int) -> Sensor:
        return _lookup(self.sensors, sensor_id, "Sensor")

    def get_user(self, user_id: int) -> User:
        return _lookup(self.users, user_id, "User")

    def measurements_between(
        self, start: int = 0, stop: Optional[int] = None
    ) -> list[Measurement]:
        """Return measurements with ``start <= timestamp <= stop``.

        A ``stop`` of ``None`` or ``-1`` means now. An inverted range yields
        an empty list.
        """
        if stop is None or stop == -1:
            stop = int(time.time())
        if start > stop:
            logger.warning("Invalid time range. %s > %s", start, stop)
            return []
        low = bisect.bisect_left(self._timestamps, start)
        high = bisect.bisect_right(self._timestamps, stop)
        if low >= len(self._timestamps):
            logger.info("No measurements found in the specified range: %s to %s", start, stop)
            return []
        return self._measurements[low:high]

    def sensor_of(self, measurement: Measurement) -> Sensor:
        """Return the sensor that recorded a measurement."""
        return self.get_sensor(measurement.sensor_id)