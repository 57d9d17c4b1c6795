"""Run settings — logging, input decoding, and fleet summary threshold."""

from typing import Literal

from pydantic import BaseModel, Field


class UptimeSettings(BaseModel):
    """Settings for one calculator run.  Built from CLI flags; no env lookup."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Diagnostic verbosity.  WARNING shows chargers without reports.",
    )
    encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding of the input file; the default drops a leading UTF-8 BOM",
    )
    below_threshold_pct: int = Field(
        default=90, ge=0, le=100,
        description="Fleet summary flags stations whose uptime is strictly below this value",
    )
