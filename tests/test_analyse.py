import io
import math

import pytest

from airwatcher.analyse import (
    Console,
    analyse_cleaner_impact,
    analyse_sensor_data,
    identify_unreliable_sensors,
)
from airwatcher.models import Measurement, Sensor
from airwatcher.processing import AirQualityProcessor
from airwatcher.store import DataStore


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out, out), out


def dates(*days):
    console, _ = make_console(" ".join(days) + "\n")
    return [console.ask_date("x") for _ in days]


def test_read_token_splits_on_whitespace():
    console, _ = make_console("a b\n  c\n")
    assert [console.read_token() for _ in range(3)] == ["a", "b", "c"]


def test_read_token_raises_at_end():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_token()


def test_ask_int_retries_and_drops_rest_of_line():
    console, out = make_console("abc 7\n9\n")
    assert console.ask_int("n: ") == 9
    assert "Entrée invalide. Veuillez entrer un nombre entier." in out.getvalue()


def test_ask_coordinate_rejects_non_numbers():
    console, out = make_console("north\n45.5\n")
    assert console.ask_coordinate("latitude") == 45.5
    text = out.getvalue()
    assert text.count("Veuillez entrer la latitude: ") == 2
    assert "Entrée invalide. Veuillez entrer un nombre valide." in text


def test_ask_float_rejects_nan():
    console, _ = make_console("nan 3\n2.5\n")
    assert console.ask_float("x: ") == 2.5


def test_ask_date_retries_on_bad_format():
    console, out = make_console("01/02/2024\n2024-01-02\n")
    stamp = console.ask_date("début")
    assert "Erreur de format de date. Format attendu : YYYY-MM-DD" in out.getvalue()
    assert "Date entrée : 2024-01-02" in out.getvalue()
    assert stamp == dates("2024-01-02")[0]


def test_ask_date_consecutive_days_are_one_day_apart():
    first, second = dates("2024-03-10", "2024-03-11")
    assert second - first == 86400


def single_sensor_store(value, timestamp, lat=1.0, lon=1.0):
    store = DataStore()
    store.sensors[1] = Sensor(1, lat, lon)
    store.add_measurement(Measurement(timestamp, value, 1, "O3"))
    return store


def test_analyse_sensor_data_single_sensor():
    start, stop = dates("2024-01-01", "2024-01-03")
    store = single_sensor_store(10.0, (start + stop) // 2)
    console, out = make_console("2\n3\n2024-01-01\n2024-01-03\n")
    result = analyse_sensor_data(console, AirQualityProcessor(store))
    assert result == 10.0
    assert "entre 2024-01-01 et 2024-01-03" in out.getvalue()


def test_identify_unreliable_sensors_empty():
    console, out = make_console("")
    assert identify_unreliable_sensors(console, AirQualityProcessor(DataStore())) == []
    assert "Aucun capteur non fiable trouvé." in out.getvalue()


def test_identify_unreliable_sensors_reports_each():
    store = DataStore()
    store.sensors[1] = Sensor(1, 0.0, 0.0)
    store.sensors[2] = Sensor(2, 0.0, 0.005)
    store.add_measurement(Measurement(100, 0.0, 1, "O3"))
    store.add_measurement(Measurement(100, 1e6, 2, "O3"))
    processor = AirQualityProcessor(store)
    console, out = make_console("")
    result = identify_unreliable_sensors(console, processor)
    assert result == processor.find_diverted_sensors()
    assert result
    for sensor in result:
        assert f"Capteur ID: {sensor.sensor_id}" in out.getvalue()


def test_analyse_cleaner_impact_uses_each_day():
    start, stop = dates("2024-01-01", "2024-01-10")
    store = DataStore()
    store.sensors[1] = Sensor(1, 48.8566, 2.3522)
    store.add_measurement(Measurement(start + 3600, 5.0, 1, "O3"))
    store.add_measurement(Measurement(stop + 3600, 7.0, 1, "O3"))
    console, out = make_console("2024-01-01\n2024-01-10\n")
    assert analyse_cleaner_impact(console, AirQualityProcessor(store)) == (5.0, 7.0)
    assert "ID du purificateur : 1" in out.getvalue()