"""User points screen."""

from __future__ import annotations

from airwatcher.analyse import Console
from airwatcher.users import User


def show_points(console: Console, user: User) -> int:
    """Show how many points a user has accumulated and return that number."""
    console.write(f"Vous avez accumulé {user.points} points à ce jour !\n")
    return user.points