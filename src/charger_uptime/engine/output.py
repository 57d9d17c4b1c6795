"""Result ordering and rendering for the driver."""

from __future__ import annotations

from charger_uptime.models.station import StationUptimeResult


def sort_results(results: list[StationUptimeResult]) -> list[StationUptimeResult]:
    """Results ascending by station ID, whatever order they were computed in."""
    return sorted(results, key=lambda r: r.station_id)


def format_results(results: list[StationUptimeResult]) -> list[str]:
    """Render ``<station id> <uptime pct>`` lines, ascending by station ID."""
    return [f"{r.station_id} {r.uptime_percentage}" for r in sort_results(results)]
