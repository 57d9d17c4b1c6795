"""Engine: parsing, validation, uptime calculation, and summaries."""

from charger_uptime.engine.parser import (
    REPORTS_HEADER,
    STATIONS_HEADER,
    SectionState,
    load_file,
    parse_lines,
    parse_text,
)
from charger_uptime.engine.validation import validate_station_data
from charger_uptime.engine.uptime import (
    calculate_charger_uptime,
    calculate_station_uptime,
    calculate_station_uptimes,
)
from charger_uptime.engine.output import format_results, sort_results
from charger_uptime.engine.summary import describe_summary, summarize_uptimes

__all__ = [
    "STATIONS_HEADER",
    "REPORTS_HEADER",
    "SectionState",
    "load_file",
    "parse_lines",
    "parse_text",
    "validate_station_data",
    "calculate_charger_uptime",
    "calculate_station_uptime",
    "calculate_station_uptimes",
    "format_results",
    "sort_results",
    # Summary
    "summarize_uptimes",
    "describe_summary",
]
