"""Fleet summary — distribution of station uptimes across one document.

Used by the HTTP API to give a headline view next to the per-station
results.  Station percentages are already integers, so float statistics
here never feed back into the per-station numbers.
"""

from __future__ import annotations

import numpy as np

from charger_uptime.engine.output import sort_results
from charger_uptime.models.station import FleetUptimeSummary, StationUptimeResult


def summarize_uptimes(
    results: list[StationUptimeResult],
    threshold_pct: int = 90,
) -> FleetUptimeSummary:
    """Mean / median / min / max of station uptime, plus stations below ``threshold_pct``."""
    if not results:
        return FleetUptimeSummary(threshold_pct=threshold_pct)

    ordered = sort_results(results)
    pcts = np.array([r.uptime_percentage for r in ordered], dtype=np.int64)

    return FleetUptimeSummary(
        station_count=len(ordered),
        mean_pct=round(float(np.mean(pcts)), 2),
        median_pct=round(float(np.median(pcts)), 2),
        min_pct=int(pcts.min()),
        max_pct=int(pcts.max()),
        threshold_pct=threshold_pct,
        stations_below_threshold=[
            r.station_id for r in ordered if r.uptime_percentage < threshold_pct
        ],
    )


def describe_summary(summary: FleetUptimeSummary) -> str:
    """One-paragraph plain-English reading of a fleet summary."""
    if summary.station_count == 0:
        return "No stations to summarize."

    noun = "station" if summary.station_count == 1 else "stations"
    text = (
        f"{summary.station_count} {noun}: mean uptime {summary.mean_pct:.2f}%, "
        f"median {summary.median_pct:.2f}%, range {summary.min_pct}% to {summary.max_pct}%."
    )
    below = summary.stations_below_threshold
    if below:
        ids = ", ".join(str(sid) for sid in below)
        text += f" {len(below)} below {summary.threshold_pct}%: {ids}."
    else:
        text += f" All stations at or above {summary.threshold_pct}%."
    return text
