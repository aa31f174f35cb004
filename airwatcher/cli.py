"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from airwatcher.analyse import Console
from airwatcher.presentation import Presentation
from airwatcher.processing import AirQualityProcessor
from airwatcher.store import DataStore


def _load(store: DataStore, folder: str) -> None:
    for extract in (store.extract_sensors, store.extract_measurements):
        try:
            extract(folder)
        except OSError:
            print("Unable to open file", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    """Load the data folder and run the interactive menus."""
    parser = argparse.ArgumentParser(prog="airwatcher", description="Air quality analysis.")
    parser.add_argument("--data", default="CSV", help="folder holding the CSV files")
    args = parser.parse_args(argv)

    store = DataStore()
    _load(store, args.data)

    presentation = Presentation(Console(), AirQualityProcessor(store))
    try:
        presentation.main_menu()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())