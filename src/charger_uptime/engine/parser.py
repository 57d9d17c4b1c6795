"""Input parsing — section state machine and per-line parsers.

Document layout::

    [Stations]
    <station id> <charger id> [<charger id> ...]

    [Charger Availability Reports]
    <charger id> <start nanos> <end nanos> <true|false>

Pipeline:
  1. ``iter_section_lines`` — classify trimmed, non-blank lines by section
  2. ``parse_station_line`` / ``parse_report_line`` — tokens → records
  3. ``validate_station_data`` — whole-document consistency checks
  4. ``parse_lines`` / ``parse_text`` / ``load_file`` — the above, with the
     first error returned as a value instead of raised

Lines before the first recognised header, and unrecognised bracketed
headers there, are ignored rather than rejected.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from charger_uptime.engine.validation import validate_station_data
from charger_uptime.models.errors import (
    DuplicateError,
    FormatError,
    InputFileError,
    RangeError,
    UptimeInputError,
)
from charger_uptime.models.station import (
    UINT32_MAX,
    UINT64_MAX,
    AvailabilityReport,
    Station,
    StationData,
)

STATIONS_HEADER = "[Stations]"
REPORTS_HEADER = "[Charger Availability Reports]"

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

ParseOutcome = tuple[StationData | None, UptimeInputError | None]


class SectionState(Enum):
    NONE = "none"
    STATIONS = "stations"
    REPORTS = "reports"


_HEADERS = {
    STATIONS_HEADER: SectionState.STATIONS,
    REPORTS_HEADER: SectionState.REPORTS,
}


# ═══════════════════════════════════════════════════════════════════════════
# Token helpers
# ═══════════════════════════════════════════════════════════════════════════

def parse_unsigned(token: str, max_value: int) -> int | None:
    """Parse an unsigned integer token, or None if it is not one in ``0..max_value``.

    An explicit sign is tolerated so long as the value lands in range
    (``+7`` is 7, ``-0`` is 0).  Leading zeros are ignored, so padded
    tokens of any length parse; more significant digits than
    ``max_value`` has are rejected without converting.
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        return None
    negative = token[0] == "-"
    digits = token.lstrip("+-").lstrip("0")
    if not digits:
        return 0
    if negative or len(digits) > len(str(max_value)):
        return None
    value = int(digits)
    if value > max_value:
        return None
    return value


def parse_bool(token: str) -> bool | None:
    """Case-insensitive ``true``/``false``; anything else is None."""
    lowered = token.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Line parsers
# ═══════════════════════════════════════════════════════════════════════════

def parse_station_line(line: str, line_number: int) -> Station:
    """Parse ``<station id> <charger id>+`` into a Station.

    Raises
    ------
    FormatError
        Fewer than two tokens.
    RangeError
        A token is not an unsigned 32-bit integer.
    DuplicateError
        A charger ID appears twice on the line.
    """
    parts = line.split()
    if len(parts) < 2:
        raise FormatError(
            f"Line {line_number}: Invalid station format. "
            "Expected: <Station ID> <Charger ID 1> [Charger ID 2...]",
            line_number=line_number,
        )

    station_id = parse_unsigned(parts[0], UINT32_MAX)
    if station_id is None:
        raise RangeError(
            f"Line {line_number}: Station ID must be an unsigned 32-bit integer "
            f"(0 to {UINT32_MAX})",
            line_number=line_number,
        )

    charger_ids: list[int] = []
    seen: set[int] = set()
    for token in parts[1:]:
        charger_id = parse_unsigned(token, UINT32_MAX)
        if charger_id is None:
            raise RangeError(
                f"Line {line_number}: Charger ID must be an unsigned 32-bit integer "
                f"(0 to {UINT32_MAX})",
                line_number=line_number,
            )
        if charger_id in seen:
            raise DuplicateError(
                f"Line {line_number}: Duplicate Charger ID {charger_id} "
                f"found in station {station_id}",
                line_number=line_number,
                entity_id=charger_id,
            )
        seen.add(charger_id)
        charger_ids.append(charger_id)

    return Station(station_id=station_id, charger_ids=charger_ids)


def parse_report_line(line: str, line_number: int) -> AvailabilityReport:
    """Parse ``<charger id> <start> <end> <up>`` into an AvailabilityReport.

    Checks run in token order; the end-before-start check runs last.
    """
    parts = line.split()
    if len(parts) != 4:
        raise FormatError(
            f"Line {line_number}: Invalid report format. Expected: <Charger ID> "
            "<start time nanos> <end time nanos> <up (true/false)>",
            line_number=line_number,
        )

    charger_id = parse_unsigned(parts[0], UINT32_MAX)
    if charger_id is None:
        raise RangeError(
            f"Line {line_number}: Charger ID must be an unsigned 32-bit integer "
            f"(0 to {UINT32_MAX})",
            line_number=line_number,
        )

    start = parse_unsigned(parts[1], UINT64_MAX)
    if start is None:
        raise RangeError(
            f"Line {line_number}: Start time must be an unsigned 64-bit integer "
            f"(0 to {UINT64_MAX})",
            line_number=line_number,
        )

    end = parse_unsigned(parts[2], UINT64_MAX)
    if end is None:
        raise RangeError(
            f"Line {line_number}: End time must be an unsigned 64-bit integer "
            f"(0 to {UINT64_MAX})",
            line_number=line_number,
        )

    is_up = parse_bool(parts[3])
    if is_up is None:
        raise FormatError(
            f"Line {line_number}: Up status must be 'true' or 'false'",
            line_number=line_number,
        )

    if end < start:
        raise RangeError(
            f"Line {line_number}: End time ({end}) must be greater than "
            f"or equal to start time ({start})",
            line_number=line_number,
        )

    return AvailabilityReport(
        charger_id=charger_id,
        start_time_nanos=start,
        end_time_nanos=end,
        is_up=is_up,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Section state machine
# ═══════════════════════════════════════════════════════════════════════════

def iter_section_lines(lines: Iterable[str]) -> Iterator[tuple[SectionState, int, str]]:
    """Yield ``(section, line_number, trimmed_line)`` for every data line.

    Blank lines and the two header lines are consumed here.  Data lines
    seen before any header come out with ``SectionState.NONE``.  A byte
    order mark at the start of the first line is dropped.
    """
    state = SectionState.NONE
    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            raw = raw.lstrip("\ufeff")
        line = raw.strip()
        if not line:
            continue
        if line in _HEADERS:
            state = _HEADERS[line]
            continue
        yield state, line_number, line


def build_station_data(lines: Iterable[str]) -> StationData:
    """Parse and validate ``lines`` into a StationData, raising on the first error."""
    stations: list[Station] = []
    reports: list[AvailabilityReport] = []

    for state, line_number, line in iter_section_lines(lines):
        if state is SectionState.STATIONS:
            stations.append(parse_station_line(line, line_number))
        elif state is SectionState.REPORTS:
            reports.append(parse_report_line(line, line_number))

    data = StationData(stations=stations, availability_reports=reports)
    validate_station_data(data)
    return data


# ═══════════════════════════════════════════════════════════════════════════
# Public entry points — errors returned as values
# ═══════════════════════════════════════════════════════════════════════════

def parse_lines(lines: Iterable[str]) -> ParseOutcome:
    """Parse a sequence of lines.

    Returns
    -------
    tuple[StationData | None, UptimeInputError | None]
        ``(data, None)`` on success, ``(None, error)`` on the first failure.
        A partial data set is never returned.
    """
    try:
        return build_station_data(lines), None
    except UptimeInputError as exc:
        return None, exc


def parse_text(text: str) -> ParseOutcome:
    """Parse a whole document held in memory."""
    return parse_lines(text.splitlines())


def load_file(path: str | Path, encoding: str = "utf-8-sig") -> ParseOutcome:
    """Read ``path`` fully, then parse it.

    A missing or unreadable file is reported as an ``InputFileError``
    value like any other input problem.  The default codec skips a UTF-8
    BOM; undecodable bytes become U+FFFD and only matter if they land
    on a parsed line.
    """
    path = Path(path)
    if not path.is_file():
        return None, InputFileError("Input file not found.")
    try:
        with path.open(encoding=encoding, errors="replace") as f:
            lines = f.read().splitlines()
    except OSError as exc:
        return None, InputFileError(f"Unable to read input file: {exc.strerror}")
    return parse_lines(lines)
