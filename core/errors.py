"""Error taxonomy shared by the extraction and hierarchy layers."""

from __future__ import annotations

from typing import Any, Optional


class ExtractionError(RuntimeError):
    """Base class for errors raised by the analyzer."""


class ConfigValidationError(ExtractionError):
    """Raised when strict settings validation fails."""


class UnitReadError(ExtractionError):
    """A unit's content could not be obtained.

    Fatal to that unit only. ``partial_records`` holds the class records
    that were complete before the failure point.
    """

    def __init__(
        self,
        unit_id: str,
        message: str,
        partial_records: Optional[list[Any]] = None,
    ) -> None:
        super().__init__(f"{unit_id}: {message}")
        self.unit_id = unit_id
        self.partial_records = list(partial_records or [])


class UnitOpenError(UnitReadError):
    """The unit could not be opened at all (IO kind)."""


class UnitStreamError(UnitReadError):
    """Reading failed part way through the unit (read kind)."""
