"""Configuration models."""

from charger_uptime.config.settings import UptimeSettings

__all__ = ["UptimeSettings"]
