import io

import pytest

from airwatcher.analyse import Console
from airwatcher.models import Measurement, Sensor
from airwatcher.presentation import (
    ACCESS_DENIED,
    GOODBYE,
    INVALID_CHOICE,
    Presentation,
    UserType,
)
from airwatcher.processing import AirQualityProcessor
from airwatcher.store import DataStore
from airwatcher.users import GouvAgency, Individual


def _setup(text, agency=None):
    store = DataStore()
    store.sensors[0] = Sensor(0, 44.0, 1.1)
    store.add_measurement(Measurement(1000, 42.0, 0, "O3"))
    store.users[7] = Individual("7", points=12)
    out = io.StringIO()
    console = Console(io.StringIO(text), out)
    presentation = Presentation(console, AirQualityProcessor(store), agency)
    return presentation, out, store


def test_invalid_user_type_then_agency_and_quit():
    presentation, out, _ = _setup("5\n1\n0\n")
    assert presentation.main_menu() is UserType.GOVERNMENT
    text = out.getvalue()
    assert INVALID_CHOICE in text
    assert "Vous avez sélectionné : 1" in text
    assert "Administration" in text
    assert text.endswith(GOODBYE)


def test_individual_cannot_open_administration():
    presentation, out, _ = _setup("2\n4\n0\n")
    assert presentation.main_menu() is UserType.INDIVIDUAL
    text = out.getvalue()
    assert ACCESS_DENIED in text
    assert "Menu Administration" not in text


def test_non_integer_choice_is_reported():
    presentation, out, _ = _setup("abc\n3\n0\n")
    assert presentation.main_menu() is UserType.PROVIDER
    assert "Entrée invalide. Veuillez entrer un nombre entier." in out.getvalue()


def test_statistics_point_estimate():
    presentation, out, _ = _setup("2\n2\n2\n44 1.1 4\n0\n0\n")
    presentation.main_menu()
    assert "Estimation de la qualité de l'air à (44, 1.1) : 42" in out.getvalue()


def test_agency_marks_user_malicious():
    agency = GouvAgency("agency")
    presentation, out, store = _setup("1\n4\n3\n7\n0\n0\n", agency)
    presentation.main_menu()
    assert store.users[7].reliable is False
    assert agency.find_unreliable() == [store.users[7]]
    assert "L'utilisateur 7 a été signalé" in out.getvalue()


def test_unknown_user_keeps_menu_running():
    presentation, out, _ = _setup("1\n4\n3\n99\n0\n0\n")
    assert presentation.main_menu() is UserType.GOVERNMENT
    text = out.getvalue()
    assert "User not found" in text
    assert text.endswith(GOODBYE)


def test_points_menu_shows_points():
    presentation, out, _ = _setup("1\n7\n0\n")
    presentation.points_menu()
    assert "Vous avez accumulé 12 points à ce jour !" in out.getvalue()


def test_analysis_menu_back():
    presentation, out, _ = _setup("9\n0\n")
    presentation.analysis_menu()
    text = out.getvalue()
    assert "Menu Analyse de Données" in text
    assert INVALID_CHOICE in text
    assert "Retour au menu principal." in text


def test_end_of_input_raises():
    presentation, _, _ = _setup("")
    with pytest.raises(EOFError):
        presentation.main_menu()