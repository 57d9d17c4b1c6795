"""Uptime calculation — per-charger percentages averaged per station.

Charger uptime:
  window = last report end − first report start
  up     = Σ (end − start) over reports marked up
  pct    = ⌊up × 100 / window⌋          (skipped when window == 0)

Gaps between reports count against the charger: they are inside the
window but contribute nothing to ``up``.

Station uptime:
  ⌊Σ charger pct / number of chargers with a pct⌋,  or 0 if none.

This is an average of per-charger percentages, not a pooled ratio: a
charger observed for a short window weighs the same as one observed for
a long one.  Both floors use Python integers, so no precision is lost
on 64-bit nanosecond values.
"""

from __future__ import annotations

from charger_uptime.models.station import (
    AvailabilityReport,
    Station,
    StationData,
    StationUptimeResult,
)


def calculate_charger_uptime(reports: list[AvailabilityReport]) -> int | None:
    """Floored uptime percentage for one charger.

    Parameters
    ----------
    reports : list[AvailabilityReport]
        The charger's reports, sorted by start time.

    Returns
    -------
    int | None
        0–100, or None when there are no reports or the observed window
        is zero-length (the charger then takes no part in its station's
        average).
    """
    if not reports:
        return None

    total_time = reports[-1].end_time_nanos - reports[0].start_time_nanos
    if total_time <= 0:
        return None

    up_time = sum(r.duration_nanos for r in reports if r.is_up)
    return up_time * 100 // total_time


def calculate_station_uptime(
    station: Station,
    reports_by_charger: dict[int, list[AvailabilityReport]],
) -> int:
    """Integer average of the station's charger percentages (0 if none apply)."""
    charger_uptimes: list[int] = []
    for charger_id in station.charger_ids:
        pct = calculate_charger_uptime(reports_by_charger.get(charger_id, []))
        if pct is not None:
            charger_uptimes.append(pct)

    if not charger_uptimes:
        return 0
    return sum(charger_uptimes) // len(charger_uptimes)


def calculate_station_uptimes(data: StationData) -> list[StationUptimeResult]:
    """One result per station, in the data set's station order.

    ``data`` is only read.  Output ordering is left to the caller
    (see ``charger_uptime.engine.output.format_results``).
    """
    reports_by_charger = data.reports_by_charger()
    return [
        StationUptimeResult(
            station_id=station.station_id,
            uptime_percentage=calculate_station_uptime(station, reports_by_charger),
        )
        for station in data.stations
    ]
