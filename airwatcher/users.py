"""Users of the system: individuals, providers and government agencies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class User:
    """A registered user who earns points for the data their sensors share.

    ``readings`` holds the user's own readings as ``(latitude, longitude, value)``.
    """

    user_id: str
    points: int = 0
    reliable: bool = True
    readings: list[tuple[float, float, float]] = field(default_factory=list)

    def geo_point(self, latitude: float, longitude: float) -> float:
        """Return the mean of the user's own readings taken at a point.

        A user with no reading at that point gets 0.0.
        """
        values = [
            value
            for lat, lon, value in self.readings
            if lat == latitude and lon == longitude
        ]
        return sum(values) / len(values) if values else 0.0

    def geo_zone_mean(self, latitude: float, longitude: float, radius: float) -> float:
        """Return the mean of the user's own readings within a circular zone.

        A user with no reading inside the zone gets 0.0.
        """
        values = [
            value
            for lat, lon, value in self.readings
            if math.hypot(lat - latitude, lon - longitude) <= radius
        ]
        return sum(values) / len(values) if values else 0.0


@dataclass
class Individual(User):
    """A private person who lends a sensor to the network."""


@dataclass
class Provider(User):
    """A company that supplies air cleaners."""


@dataclass
class GouvAgency(User):
    """A government agency that decides which users can be trusted."""

    _registry: dict[str, User] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def classify_unreliable(self, user: User) -> None:
        """Flag a user as malicious; they stop being trusted."""
        user.reliable = False
        self._registry[user.user_id] = user

    def classify_reliable(self, user: User) -> None:
        """Flag a user as trustworthy again."""
        user.reliable = True
        self._registry[user.user_id] = user

    def users(self) -> list[User]:
        """Return every user this agency has classified, in classification order."""
        return list(self._registry.values())

    def find_unreliable(self) -> list[User]:
        """Return the classified users currently flagged as unreliable."""
        return [user for user in self._registry.values() if not user.reliable]