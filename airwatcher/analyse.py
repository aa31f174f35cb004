"""Console input helpers and the data-analysis screens."""

from __future__ import annotations

import math
import sys
import time
from collections import deque
from typing import Callable, Optional, TextIO, TypeVar

from airwatcher.models import Cleaner, Sensor
from airwatcher.processing import AirQualityProcessor

T = TypeVar("T")

GREEN = "\033[1;32m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"

DAY_IN_SECONDS = 86400
DEFAULT_NEIGHBOURS = 4
_DATE_FORMAT = "%Y-%m-%d"

INVALID_INTEGER = "Entrée invalide. Veuillez entrer un nombre entier.\n"
INVALID_NUMBER = "Entrée invalide. Veuillez entrer un nombre valide.\n"
INVALID_DATE = "Erreur de format de date. Format attendu : YYYY-MM-DD\n"


def _parse_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token}")
    return value


class Console:
    """Reads whitespace-separated answers and writes prompts and results."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else self._out
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        """Write text as is, without adding a newline."""
        self._out.write(text)
        self._out.flush()

    def read_token(self) -> str:
        """Return the next whitespace-separated token; raise EOFError at end of input."""
        while not self._pending:
            line = self._in.readline()
            if line == "":
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _ask(self, prompt: str, parse: Callable[[str], T], error: str, stream: TextIO) -> T:
        while True:
            self.write(prompt)
            token = self.read_token()
            try:
                return parse(token)
            except ValueError:
                # Whatever else was typed on the same line is dropped.
                self._pending.clear()
                stream.write(error)
                stream.flush()

    def ask_int(self, prompt: str) -> int:
        """Ask until an integer is entered."""
        return self._ask(prompt, int, INVALID_INTEGER, self._out)

    def ask_float(self, prompt: str) -> float:
        """Ask until a finite number is entered."""
        return self._ask(prompt, _parse_float, INVALID_NUMBER, self._out)

    def ask_coordinate(self, description: str) -> float:
        """Ask for a latitude or longitude."""
        return self.ask_float(f"Veuillez entrer la {description}: ")

    def ask_date(self, description: str) -> int:
        """Ask for a ``YYYY-MM-DD`` date and return its local midnight as a timestamp."""
        parsed = self._ask(
            f"Veuillez entrer la date de {description} (YYYY-MM-DD): ",
            lambda token: time.strptime(token, _DATE_FORMAT),
            INVALID_DATE,
            self._err,
        )
        self.write(f"Date entrée : {time.strftime(_DATE_FORMAT, parsed)}\n")
        return int(time.mktime(tuple(parsed[:8]) + (0,)))


def _day(timestamp: int) -> str:
    return time.strftime(_DATE_FORMAT, time.localtime(timestamp))


def analyse_sensor_data(console: Console, processor: AirQualityProcessor) -> float:
    """Estimate air quality at a position over a period entered by the user."""
    console.write(f"{GREEN}Analyse des données des capteurs.{RESET}\n")
    latitude = console.ask_coordinate("latitude")
    longitude = console.ask_coordinate("longitude")
    start = console.ask_date("début")
    stop = console.ask_date("fin")

    console.write(
        f"Analyse de la qualité de l'air à la position ({latitude:g}, {longitude:g}) "
        f"entre {_day(start)} et {_day(stop)}\n"
    )
    quality = processor.estimate_at(latitude, longitude, DEFAULT_NEIGHBOURS, start, stop)
    console.write(
        f"Qualité de l'air estimée à la position ({latitude:g}, {longitude:g}) : {quality:g}\n"
    )
    return quality


def identify_unreliable_sensors(
    console: Console, processor: AirQualityProcessor
) -> list[Sensor]:
    """List the sensors whose readings stray from their surroundings."""
    console.write(f"{RED}Analyse des capteurs non fiables.{RESET}\n")
    sensors = processor.find_diverted_sensors()
    if not sensors:
        console.write("Aucun capteur non fiable trouvé.\n")
    else:
        console.write("Capteurs non fiables trouvés : \n")
        for sensor in sensors:
            console.write(
                f"Capteur ID: {sensor.sensor_id}, Latitude: {sensor.latitude:g}, "
                f"Longitude: {sensor.longitude:g}\n"
            )
    return sensors


def analyse_cleaner_impact(
    console: Console, processor: AirQualityProcessor
) -> tuple[float, float]:
    """Compare air quality at a cleaner on the day it starts and the day it stops."""
    console.write(f"{YELLOW}Analyse de l'impact des purificateurs.{RESET}\n")
    cleaner = Cleaner(1, 48.8566, 2.3522, 123)
    console.write(f"ID du purificateur : {cleaner.cleaner_id}\n")

    start = console.ask_date("début")
    stop = console.ask_date("fin")

    before = processor.estimate_at(
        cleaner.latitude, cleaner.longitude, DEFAULT_NEIGHBOURS, start, start + DAY_IN_SECONDS
    )
    console.write(f"Qualité de l'air avant nettoyage : {before:g}\n")
    after = processor.estimate_at(
        cleaner.latitude, cleaner.longitude, DEFAULT_NEIGHBOURS, stop, stop + DAY_IN_SECONDS
    )
    console.write(f"Qualité de l'air après nettoyage : {after:g}\n")
    return before, after