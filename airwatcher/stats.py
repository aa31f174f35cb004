"""Statistics screens: estimates at a point, over a zone, and similar sensors."""

from __future__ import annotations

import math

from airwatcher.analyse import Console
from airwatcher.models import Sensor
from airwatcher.processing import AirQualityProcessor


def air_quality_at_point(console: Console, processor: AirQualityProcessor) -> float:
    """Ask for a position and a neighbour count, then show the estimate there."""
    lat = console.ask_float("Entrez la latitude: ")
    lon = console.ask_float("Entrez la longitude: ")
    k = console.ask_int("Entrez le nombre de voisins (k): ")

    estimate = processor.estimate_at(lat, lon, k)
    if math.isnan(estimate):
        console.write("Aucune mesure disponible pour cette position.\n")
    else:
        console.write(
            f"Estimation de la qualité de l'air à ({lat:g}, {lon:g}) : {estimate:g}\n"
        )
    return estimate


def air_quality_in_zone(console: Console, processor: AirQualityProcessor) -> float:
    """Ask for a circular zone and show the mean estimate over it."""
    lat = console.ask_float("Entrez la latitude du centre de la zone: ")
    lon = console.ask_float("Entrez la longitude du centre de la zone: ")
    radius = console.ask_float("Entrez le rayon de la zone (en degrés): ")
    k = console.ask_int("Entrez le nombre de voisins (k): ")
    step = console.ask_float("Entrez le pas de discrétisation (step): ")

    estimate = processor.estimate_zone(lat, lon, radius, k, step)
    if math.isnan(estimate):
        console.write("Aucune mesure disponible pour cette zone.\n")
    else:
        console.write(
            "Estimation de la qualité de l'air sur la zone centrée à "
            f"({lat:g}, {lon:g}) : {estimate:g}\n"
        )
    return estimate


def similar_sensors(console: Console, processor: AirQualityProcessor) -> list[Sensor]:
    """Ask for a reference sensor and list the sensors lying next to it."""
    reference = console.ask_int("Entrez l'identifiant du capteur de référence': ")

    sensors = processor.list_similar_sensors(reference, 0, -1)
    if not sensors:
        console.write("Aucun capteur similaire trouvé.\n")
    else:
        console.write(f"Capteurs similaires au capteur {reference}:\n")
        for sensor in sensors:
            console.write(f"Capteur ID: {sensor.sensor_id}\n")
    return sensors