"""Core shared contracts and utilities."""

from core.errors import (
    ConfigValidationError,
    ExtractionError,
    UnitOpenError,
    UnitReadError,
    UnitStreamError,
)
from core.structured_logging import (
    configure_structured_logging,
    get_run_id,
    phase_scope,
    set_run_id,
    unit_scope,
)
from core.settings import AnalyzerSettings, load_analyzer_settings
from core.run_artifacts import write_run_report

__all__ = [
    "ConfigValidationError",
    "ExtractionError",
    "UnitOpenError",
    "UnitReadError",
    "UnitStreamError",
    "configure_structured_logging",
    "get_run_id",
    "phase_scope",
    "set_run_id",
    "unit_scope",
    "AnalyzerSettings",
    "load_analyzer_settings",
    "write_run_report",
]
