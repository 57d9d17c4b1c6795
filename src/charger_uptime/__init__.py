"""Charger uptime calculator — station uptime from charger availability reports."""

__version__ = "1.0.0"
