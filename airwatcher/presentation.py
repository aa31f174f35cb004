"""Interactive menus of the application."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Optional

from airwatcher.administration import (
    mark_sensor_unreliable,
    mark_user_malicious,
    show_faulty_sensors,
)
from airwatcher.analyse import (
    GREEN,
    RED,
    RESET,
    Console,
    analyse_cleaner_impact,
    analyse_sensor_data,
    identify_unreliable_sensors,
)
from airwatcher.points import show_points
from airwatcher.processing import AirQualityProcessor
from airwatcher.stats import air_quality_at_point, air_quality_in_zone, similar_sensors
from airwatcher.store import RecordNotFoundError
from airwatcher.users import GouvAgency

BLUE = "\033[1;34m"

PROMPT = "Veuillez choisir une valeur parmi celles proposées: \n"
INVALID_CHOICE = f"{RED}Choix invalide, veuillez réessayer.{RESET}\n"
BACK_TO_MAIN = f"{RED}Retour au menu principal.{RESET}\n"
GOODBYE = f"{RED}Au revoir !{RESET}\n"
ACCESS_DENIED = (
    f"{RED}Accès refusé. Vous n'êtes pas une agence gouvernementale.{RESET}\n"
)


class UserType(Enum):
    """Kind of user running the session."""

    GOVERNMENT = "1"
    INDIVIDUAL = "2"
    PROVIDER = "3"


def _banner(lines: list[tuple[str, str]]) -> str:
    return "".join(f"{colour}{text}{RESET}\n" for colour, text in lines)


_USER_TYPE_BANNER = _banner(
    [
        (BLUE, "|============================================|"),
        (BLUE, "|          Sélection du type d'utilisateur   |"),
        (BLUE, "|============================================|"),
        (GREEN, "|[1] -------- Agence gouvernementale --------|"),
        (GREEN, "|[2] -------- Individu ----------------------|"),
        (GREEN, "|[3] -------- Fournisseur -------------------|"),
        (BLUE, "|============================================|"),
    ]
)

_MAIN_HEAD = [
    (BLUE, "|============================================|"),
    (BLUE, "|          Menu Principal AirWatcher         |"),
    (BLUE, "|============================================|"),
    (GREEN, "|[1] -------- Analyse de données ------------|"),
    (GREEN, "|[2] -------- Statistiques ------------------|"),
    (GREEN, "|[3] -------- Points utilisateurs -----------|"),
]
_MAIN_ADMIN = (GREEN, "|[4] -------- Administration ----------------|")
_MAIN_TAIL = [
    (RED, "|[0] -------- Quitter -----------------------|"),
    (BLUE, "|============================================|"),
]

_ANALYSIS_BANNER = _banner(
    [
        (BLUE, "|===================================================|"),
        (BLUE, "|               Menu Analyse de Données             |"),
        (BLUE, "|===================================================|"),
        (GREEN, "|[1] -------- Analyse des données des capteurs------|"),
        (GREEN, "|[2] -------- Identifier capteurs non fiables ------|"),
        (GREEN, "|[3] -------- Analyser impact des purificateurs-----|"),
        (RED, "|[0] -------- Retour au menu principal -------------|"),
        (BLUE, "|===================================================|"),
    ]
)

_STATISTICS_BANNER = _banner(
    [
        (BLUE, "|===================================================|"),
        (BLUE, "|               Menu Statistiques                   |"),
        (BLUE, "|===================================================|"),
        (GREEN, "|[1] ---- Qualité moyenne de l'air par zone --------|"),
        (GREEN, "|[2] ---- Qualité moyenne de l'air par point -------|"),
        (GREEN, "|[3] ---- Classer capteurs similaires --------------|"),
        (RED, "|[0] ---- Retour au menu principal -----------------|"),
        (BLUE, "|===================================================|"),
    ]
)

_POINTS_BANNER = _banner(
    [
        (BLUE, "|===================================================|"),
        (BLUE, "|           Menu Points Utilisateurs                |"),
        (BLUE, "|===================================================|"),
        (GREEN, "|[1] ---- Consulter les points d'un utilisateur ----|"),
        (RED, "|[0] ---- Retour au menu principal -----------------|"),
        (BLUE, "|===================================================|"),
    ]
)

_ADMINISTRATION_BANNER = _banner(
    [
        (BLUE, "|===================================================|"),
        (BLUE, "|               Menu Administration                 |"),
        (BLUE, "|===================================================|"),
        (GREEN, "|[1] ---- Consulter capteurs défaillants -----------|"),
        (GREEN, "|[2] ---- Marquer un capteur comme non fiable ------|"),
        (GREEN, "|[3] ---- Marquer un utilisateur comme malicieux ---|"),
        (RED, "|[0] ---- Retour au menu principal -----------------|"),
        (BLUE, "|===================================================|"),
    ]
)


class Presentation:
    """Drives the menus on a console, on top of a processor and its data store."""

    def __init__(
        self,
        console: Console,
        processor: AirQualityProcessor,
        agency: Optional[GouvAgency] = None,
    ) -> None:
        self.console = console
        self.processor = processor
        self.store = processor.store
        self.agency = agency if agency is not None else GouvAgency("agency")
        self.user_type: Optional[UserType] = None

    def _loop(
        self, banner: str, actions: Mapping[int, Callable[[], object]], farewell: str
    ) -> None:
        while True:
            self.console.write(banner)
            choice = self.console.ask_int(PROMPT)
            if choice == 0:
                self.console.write(farewell)
                return
            action = actions.get(choice)
            if action is None:
                self.console.write(INVALID_CHOICE)
            else:
                action()

    def _choose_user_type(self) -> UserType:
        while True:
            self.console.write(_USER_TYPE_BANNER)
            choice = self.console.ask_int(PROMPT)
            try:
                return UserType(str(choice))
            except ValueError:
                self.console.write(INVALID_CHOICE)

    def _guarded(self, action: Callable[[], object]) -> Callable[[], None]:
        def run() -> None:
            try:
                action()
            except RecordNotFoundError as error:
                self.console.write(f"{RED}{error}{RESET}\n")

        return run

    def _refuse(self) -> None:
        self.console.write(ACCESS_DENIED)

    def main_menu(self) -> UserType:
        """Ask for the user type, then run the main menu until it is left."""
        self.user_type = self._choose_user_type()
        self.console.write(f"{GREEN}Vous avez sélectionné : {self.user_type.value}{RESET}\n")

        is_agency = self.user_type is UserType.GOVERNMENT
        head = _MAIN_HEAD + ([_MAIN_ADMIN] if is_agency else [])
        banner = _banner(head + _MAIN_TAIL)
        actions = {
            1: self.analysis_menu,
            2: self.statistics_menu,
            3: self.points_menu,
            4: self.administration_menu if is_agency else self._refuse,
        }
        self._loop(banner, actions, GOODBYE)
        return self.user_type

    def analysis_menu(self) -> None:
        """Run the data-analysis menu."""
        actions = {
            1: lambda: analyse_sensor_data(self.console, self.processor),
            2: lambda: identify_unreliable_sensors(self.console, self.processor),
            3: lambda: analyse_cleaner_impact(self.console, self.processor),
        }
        self._loop(_ANALYSIS_BANNER, actions, BACK_TO_MAIN)

    def statistics_menu(self) -> None:
        """Run the statistics menu."""
        actions = {
            1: lambda: air_quality_in_zone(self.console, self.processor),
            2: lambda: air_quality_at_point(self.console, self.processor),
            3: lambda: similar_sensors(self.console, self.processor),
        }
        self._loop(_STATISTICS_BANNER, actions, BACK_TO_MAIN)

    def _show_user_points(self) -> None:
        user_id = self.console.ask_int("Veuillez entrer l'identifiant de l'utilisateur: ")
        show_points(self.console, self.store.get_user(user_id))

    def points_menu(self) -> None:
        """Run the user points menu."""
        actions = {1: self._guarded(self._show_user_points)}
        self._loop(_POINTS_BANNER, actions, BACK_TO_MAIN)

    def administration_menu(self) -> None:
        """Run the administration menu."""
        actions = {
            1: lambda: show_faulty_sensors(self.console, self.processor),
            2: self._guarded(
                lambda: mark_sensor_unreliable(self.console, self.processor, self.store)
            ),
            3: self._guarded(
                lambda: mark_user_malicious(self.console, self.store, self.agency)
            ),
        }
        self._loop(_ADMINISTRATION_BANNER, actions, BACK_TO_MAIN)