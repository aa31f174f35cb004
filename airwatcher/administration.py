"""Administration screens: faulty sensors and malicious users."""

from __future__ import annotations

from airwatcher.analyse import Console
from airwatcher.models import Sensor
from airwatcher.processing import AirQualityProcessor
from airwatcher.store import DataStore
from airwatcher.users import GouvAgency, User


def show_faulty_sensors(console: Console, processor: AirQualityProcessor) -> list[Sensor]:
    """Ask for the detection settings and list the sensors found faulty."""
    radius = console.ask_float("Entrez le rayon de la zone (en degrés): ")
    threshold = console.ask_float("Entrez le seuil choisi : ")
    k = console.ask_int("Entrez le nombre de voisins (k): ")
    step = console.ask_float("Entrez le pas de discrétisation (step): ")

    sensors = processor.find_diverted_sensors(radius, threshold, k, step, 0, -1)
    for sensor in sensors:
        console.write(f"Le capteur {sensor.sensor_id} est défaillant.\n")
    return sensors


def mark_sensor_unreliable(
    console: Console, processor: AirQualityProcessor, store: DataStore
) -> Sensor:
    """Show the faulty sensors, then mark the one the user picks as unreliable.

    Raises RecordNotFoundError when the chosen sensor does not exist.
    """
    show_faulty_sensors(console, processor)
    sensor_id = console.ask_int(
        "Veuillez entrer l'identifiant du capteur à marquer comme non fiable: "
    )
    sensor = store.get_sensor(sensor_id)
    console.write(f"Le capteur n°{sensor.sensor_id} a été marqué comme non fiable\n")
    return sensor


def mark_user_malicious(console: Console, store: DataStore, agency: GouvAgency) -> User:
    """Flag a user as malicious so they stop earning points.

    Raises RecordNotFoundError when the user does not exist.
    """
    user_id = console.ask_int(
        "Veuillez entrer l'identifiant de l'utilisateur à signaler: "
    )
    user = store.get_user(user_id)
    agency.classify_unreliable(user)
    console.write(
        f"L'utilisateur {user_id} a été signalé. Il ne pourra plus accumuler de points\n"
    )
    return user