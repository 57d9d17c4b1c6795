"""Domain types — stations, availability reports, and the validated data set.

All records are frozen: they are created once by the parser and only read
afterwards by the uptime calculator.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 4_294_967_295
UINT64_MAX = 18_446_744_073_709_551_615


# ═══════════════════════════════════════════════════════════════════════════
# Input records
# ═══════════════════════════════════════════════════════════════════════════

class Station(BaseModel):
    """One station line: a station ID and the chargers it owns."""

    model_config = ConfigDict(frozen=True)

    station_id: int = Field(ge=0, le=UINT32_MAX)
    """Unique station identifier (unsigned 32-bit)."""

    charger_ids: list[int] = Field(default_factory=list)
    """Owned charger IDs in input order (unique within the station)."""


class AvailabilityReport(BaseModel):
    """One report line: charger state over the half-open interval [start, end)."""

    model_config = ConfigDict(frozen=True)

    charger_id: int = Field(ge=0, le=UINT32_MAX)
    start_time_nanos: int = Field(ge=0, le=UINT64_MAX)
    end_time_nanos: int = Field(ge=0, le=UINT64_MAX)
    is_up: bool

    @property
    def duration_nanos(self) -> int:
        return self.end_time_nanos - self.start_time_nanos


class StationData(BaseModel):
    """Container for everything read from one input document."""

    model_config = ConfigDict(frozen=True)

    stations: list[Station] = Field(default_factory=list)
    availability_reports: list[AvailabilityReport] = Field(default_factory=list)

    @property
    def charger_ids(self) -> list[int]:
        """Every owned charger ID, station by station, in input order."""
        return [cid for station in self.stations for cid in station.charger_ids]

    def reports_by_charger(self) -> dict[int, list[AvailabilityReport]]:
        """Group reports by charger ID, each group sorted by start time.

        The sort is stable, so reports sharing a start time keep input order.
        """
        grouped: dict[int, list[AvailabilityReport]] = {}
        for report in self.availability_reports:
            grouped.setdefault(report.charger_id, []).append(report)
        for reports in grouped.values():
            reports.sort(key=lambda r: r.start_time_nanos)
        return grouped

    def chargers_without_reports(self) -> list[int]:
        """Owned charger IDs that have no availability report at all."""
        reported = {r.charger_id for r in self.availability_reports}
        return [cid for cid in self.charger_ids if cid not in reported]


# ═══════════════════════════════════════════════════════════════════════════
# Results
# ═══════════════════════════════════════════════════════════════════════════

class StationUptimeResult(BaseModel):
    """Computed uptime for one station."""

    station_id: int = Field(ge=0, le=UINT32_MAX)
    uptime_percentage: int = Field(ge=0, le=100)


class FleetUptimeSummary(BaseModel):
    """Distribution of station uptime percentages across one document."""

    station_count: int = 0
    mean_pct: float = 0.0
    median_pct: float = 0.0
    min_pct: int = 0
    max_pct: int = 0

    threshold_pct: int = Field(default=90, ge=0, le=100)
    """Stations strictly below this percentage are counted as under-performing."""

    stations_below_threshold: list[int] = Field(default_factory=list)
    """Station IDs (ascending) whose uptime is below ``threshold_pct``."""
