"""Shared test fixtures — sample documents and pre-built data sets."""

from __future__ import annotations

import pytest

from charger_uptime.models import AvailabilityReport, Station, StationData


def make_document(stations: str, reports: str) -> str:
    """Assemble a two-section input document from raw section bodies."""
    return f"[Stations]\n{stations}\n\n[Charger Availability Reports]\n{reports}\n"


def report(charger_id: int, start: int, end: int, up: bool = True) -> AvailabilityReport:
    return AvailabilityReport(
        charger_id=charger_id, start_time_nanos=start, end_time_nanos=end, is_up=up,
    )


@pytest.fixture
def valid_document() -> str:
    return make_document(
        "1 1 2\n2 3 4",
        "1 0 100 true\n2 50 150 false\n3 0 100 true\n4 0 100 false",
    )


@pytest.fixture
def reference_document() -> str:
    """Three stations listed out of ID order, one charger never reported."""
    return make_document(
        "2 3\n0 1001 1002\n1 1003",
        "\n".join([
            "1001 0 50000 true",
            "1001 50000 100000 true",
            "1002 50000 100000 true",
            "1003 25000 75000 false",
            "3 0 50 true",
            "3 100 150 true",
        ]),
    )


@pytest.fixture
def single_station_data() -> StationData:
    return StationData(
        stations=[Station(station_id=1, charger_ids=[1])],
        availability_reports=[report(1, 0, 100, True)],
    )
