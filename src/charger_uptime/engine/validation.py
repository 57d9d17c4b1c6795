"""Whole-document validation — runs once every line has parsed.

Checks run in a fixed order and the first failure wins:
  1. at least one station
  2. at least one report
  3. unique station IDs
  4. unique charger IDs across all stations
  5. owned chargers without reports → WARNING only
  6. no overlapping reports per charger (adjacent is fine)
  7. every report names an owned charger
"""

from __future__ import annotations

from charger_uptime.models.errors import (
    DuplicateError,
    EmptyInputError,
    OverlapError,
    ReferentialError,
)
from charger_uptime.models.station import AvailabilityReport, StationData
from charger_uptime.utils.logger import get_logger

logger = get_logger(__name__)


def validate_station_data(data: StationData) -> None:
    """Raise the first consistency error found in ``data``; return None if valid."""
    if not data.stations:
        raise EmptyInputError("No stations found in input file.")

    if not data.availability_reports:
        raise EmptyInputError("No availability reports found in input file.")

    station_ids: set[int] = set()
    for station in data.stations:
        if station.station_id in station_ids:
            raise DuplicateError(
                f"Duplicate Station ID found: {station.station_id}",
                entity_id=station.station_id,
            )
        station_ids.add(station.station_id)

    owned: set[int] = set()
    for charger_id in data.charger_ids:
        if charger_id in owned:
            raise DuplicateError(
                f"Duplicate Charger ID found across stations: {charger_id}",
                entity_id=charger_id,
            )
        owned.add(charger_id)

    reports_by_charger = data.reports_by_charger()
    for charger_id in data.charger_ids:
        reports = reports_by_charger.get(charger_id)
        if not reports:
            logger.warning("No availability reports found for Charger ID %d", charger_id)
            continue
        if has_overlapping_periods(reports):
            raise OverlapError(
                f"Overlapping time periods found for Charger ID {charger_id}",
                entity_id=charger_id,
            )

    for report in data.availability_reports:
        if report.charger_id not in owned:
            raise ReferentialError(
                f"Report found for non-existent Charger ID: {report.charger_id}",
                entity_id=report.charger_id,
            )


def has_overlapping_periods(reports: list[AvailabilityReport]) -> bool:
    """True if any two start-sorted neighbours overlap.

    ``reports`` must already be sorted by start time.  A report ending
    exactly where the next begins is not an overlap.
    """
    return any(
        prev.end_time_nanos > nxt.start_time_nanos
        for prev, nxt in zip(reports, reports[1:])
    )
