"""Air quality estimation from sensor measurements."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import NamedTuple, Optional

from airwatcher.models import Measurement, Sensor
from airwatcher.store import DataStore

_ZERO_DISTANCE_WEIGHT = 1e9
_SIMILARITY_DISTANCE = 0.01


class _Reading(NamedTuple):
    latitude: float
    longitude: float
    value: float


def _distance(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    return math.hypot(lat_a - lat_b, lon_a - lon_b)


def _offsets(radius: float, step: float) -> Iterator[float]:
    offset = -radius
    while offset <= radius:
        yield offset
        offset += step


class AirQualityProcessor:
    """Estimates air quality at points and over zones from a data store."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def _measurements(self, start: int, stop: Optional[int]) -> list[Measurement]:
        return self.store.measurements_between(start, stop)

    def _readings(self, measurements: Sequence[Measurement]) -> list[_Reading]:
        readings = []
        for measurement in measurements:
            sensor = self.store.sensor_of(measurement)
            readings.append(_Reading(sensor.latitude, sensor.longitude, measurement.value))
        return readings

    @staticmethod
    def _estimate(lat: float, lon: float, k: int, readings: Sequence[_Reading]) -> float:
        if not readings or k <= 0:
            return math.nan
        ranked = sorted(
            ((_distance(lat, lon, r.latitude, r.longitude), r.value) for r in readings),
            key=lambda pair: pair[0],
        )
        weighted_sum = 0.0
        weight_total = 0.0
        for dist, value in ranked[:k]:
            weight = _ZERO_DISTANCE_WEIGHT if dist == 0.0 else 1.0 / dist
            weighted_sum += value * weight
            weight_total += weight
        return weighted_sum / weight_total if weight_total > 0.0 else math.nan

    @classmethod
    def _estimate_zone(
        cls,
        lat: float,
        lon: float,
        radius: float,
        k: int,
        step: float,
        readings: Sequence[_Reading],
    ) -> float:
        if step <= 0:
            raise ValueError("step must be positive")
        estimations = []
        for dlat in _offsets(radius, step):
            for dlon in _offsets(radius, step):
                if dlat * dlat + dlon * dlon <= radius * radius:
                    estimate = cls._estimate(lat + dlat, lon + dlon, k, readings)
                    if not math.isnan(estimate):
                        estimations.append(estimate)
        if not estimations:
            return math.nan
        return sum(estimations) / len(estimations)

    def estimate_at(
        self,
        lat: float,
        lon: float,
        k: int = 4,
        start: int = 0,
        stop: Optional[int] = -1,
    ) -> float:
        """Inverse-distance weighted mean of the ``k`` nearest measurements.

        Returns NaN when no measurement falls in ``[start, stop]``.
        """
        readings = self._readings(self._measurements(start, stop))
        return self._estimate(lat, lon, k, readings)

    def estimate_zone(
        self,
        lat: float,
        lon: float,
        radius: float,
        k: int = 4,
        step: float = 0.01,
        start: int = 0,
        stop: Optional[int] = -1,
    ) -> float:
        """Mean of point estimates over a grid covering a circular zone.

        The grid has spacing ``step`` (in degrees) and keeps the points within
        ``radius`` of the centre. Returns NaN when no point can be estimated.
        """
        readings = self._readings(self._measurements(start, stop))
        return self._estimate_zone(lat, lon, radius, k, step, readings)

    def find_diverted_sensors(
        self,
        radius: float = 0.02,
        threshold: float = 20.0,
        k: int = 4,
        step: float = 0.01,
        start: int = 0,
        stop: Optional[int] = -1,
    ) -> list[Sensor]:
        """Sensors whose measurement differs from the zone estimate by more than ``threshold``.

        One entry is produced per offending measurement, in timestamp order.
        """
        measurements = self._measurements(start, stop)
        readings = self._readings(measurements)
        zone_cache: dict[tuple[float, float], float] = {}
        diverted = []
        for measurement in measurements:
            sensor = self.store.sensor_of(measurement)
            position = (sensor.latitude, sensor.longitude)
            if position not in zone_cache:
                zone_cache[position] = self._estimate_zone(
                    sensor.latitude, sensor.longitude, radius, k, step, readings
                )
            estimate = zone_cache[position]
            if not math.isnan(estimate) and abs(estimate - measurement.value) > threshold:
                diverted.append(sensor)
        return diverted

    def list_similar_sensors(
        self, reference: int, start: int = 0, stop: Optional[int] = -1
    ) -> list[Sensor]:
        """Sensors that measured in the period and lie very close to the reference sensor.

        Measurements of the reference sensor itself are ignored. An unknown
        reference yields an empty list.
        """
        ref_sensor = self.store.sensors.get(reference)
        if ref_sensor is None:
            return []
        similar = []
        for measurement in self._measurements(start, stop):
            sensor = self.store.sensor_of(measurement)
            if sensor.sensor_id == reference:
                continue
            dist = _distance(
                sensor.latitude, sensor.longitude, ref_sensor.latitude, ref_sensor.longitude
            )
            if dist < _SIMILARITY_DISTANCE:
                similar.append(sensor)
        return similar