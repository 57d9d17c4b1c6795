"""Domain models — input records, results, and error types."""

from charger_uptime.models.errors import (
    DuplicateError,
    EmptyInputError,
    FormatError,
    InputFileError,
    OverlapError,
    RangeError,
    ReferentialError,
    UptimeInputError,
)
from charger_uptime.models.station import (
    UINT32_MAX,
    UINT64_MAX,
    AvailabilityReport,
    FleetUptimeSummary,
    Station,
    StationData,
    StationUptimeResult,
)

__all__ = [
    "UINT32_MAX",
    "UINT64_MAX",
    "AvailabilityReport",
    "FleetUptimeSummary",
    "Station",
    "StationData",
    "StationUptimeResult",
    # Errors
    "UptimeInputError",
    "FormatError",
    "RangeError",
    "DuplicateError",
    "OverlapError",
    "ReferentialError",
    "EmptyInputError",
    "InputFileError",
]
