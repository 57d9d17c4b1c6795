"""Input error types — one class per way a document can be rejected.

Every error carries the human-readable message that the driver prints on
stderr, plus the 1-based line number (line-level errors) or the offending
station/charger ID (model-level errors) where one exists.
"""

from __future__ import annotations


class UptimeInputError(Exception):
    """Base class for every fatal input problem."""

    kind: str = "input"

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        entity_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.entity_id = entity_id

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "line_number": self.line_number,
            "entity_id": self.entity_id,
        }


class FormatError(UptimeInputError):
    """Wrong token count or unparseable boolean literal on one line."""

    kind = "format"


class RangeError(UptimeInputError):
    """Numeric token outside its unsigned domain, or end time before start time."""

    kind = "range"


class DuplicateError(UptimeInputError):
    """Repeated charger ID in a station line, or repeated station/charger ID in the model."""

    kind = "duplicate"


class OverlapError(UptimeInputError):
    kind = "overlap"


class ReferentialError(UptimeInputError):
    """A report names a charger that no station owns."""

    kind = "referential"


class EmptyInputError(UptimeInputError):
    kind = "empty"


class InputFileError(UptimeInputError):
    """The input file is missing or unreadable."""

    kind = "file"
