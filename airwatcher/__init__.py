"""Air quality estimation, diverted-sensor detection and console menus over CSV sensor data."""

__version__ = "0.1.0"