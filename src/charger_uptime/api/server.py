"""FastAPI server — uptime calculation over HTTP.

Run with:
    uvicorn charger_uptime.api.server:app --reload --port 8000

Or:
    python -m charger_uptime.api.server

Endpoints:
    GET  /         — welcome message and endpoint list
    GET  /health   — liveness probe
    POST /uptime   — parse a document, return per-station uptime + fleet summary
"""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from charger_uptime import __version__
from charger_uptime.config.settings import UptimeSettings
from charger_uptime.engine.output import sort_results
from charger_uptime.engine.parser import parse_text
from charger_uptime.engine.summary import describe_summary, summarize_uptimes
from charger_uptime.engine.uptime import calculate_station_uptimes
from charger_uptime.models.station import FleetUptimeSummary, StationUptimeResult
from charger_uptime.utils.logger import get_logger

logger = get_logger(__name__)

settings = UptimeSettings()


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Charger Uptime API",
    version=__version__,
    description=(
        "Validate a stations / charger availability document and compute "
        "the uptime percentage of every station."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class UptimeRequest(BaseModel):
    """Request body for /uptime."""
    text: str = Field(
        description="Full input document: a [Stations] section followed by a "
                    "[Charger Availability Reports] section.",
    )
    threshold_pct: int | None = Field(
        default=None, ge=0, le=100,
        description="Summary lists stations whose uptime is strictly below this value. "
                    "Defaults to the server setting.",
    )


class UptimeResponse(BaseModel):
    """Response from /uptime."""
    results: list[StationUptimeResult]
    summary: FleetUptimeSummary
    narrative: str = ""
    chargers_without_reports: list[int] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version, and where to post documents."""
    return {
        "name": "Charger Uptime API",
        "version": __version__,
        "start_here": "POST /uptime with {'text': '<document>'}",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.post("/uptime", response_model=UptimeResponse)
def compute_uptime(req: UptimeRequest) -> UptimeResponse:
    """Parse, validate, and compute station uptime for one document.

    Input problems come back as HTTP 422 with the error ``kind``,
    ``message``, and the ``line_number`` or ``entity_id`` involved.
    """
    data, error = parse_text(req.text)
    if error is not None:
        logger.info("Rejected document: %s", error.message)
        raise HTTPException(status_code=422, detail=error.to_dict())

    results = sort_results(calculate_station_uptimes(data))
    threshold = req.threshold_pct
    if threshold is None:
        threshold = settings.below_threshold_pct
    summary = summarize_uptimes(results, threshold_pct=threshold)
    return UptimeResponse(
        results=results,
        summary=summary,
        narrative=describe_summary(summary),
        chargers_without_reports=data.chargers_without_reports(),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "charger_uptime.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
