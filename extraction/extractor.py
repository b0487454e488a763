"""
High-level orchestration for class extraction.

This module provides the entry points collaborators call: single-unit
analysis of text or a file, and multi-unit analysis that joins every
unit's records and resolves inheritance across them.
"""

import contextvars
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from core.errors import UnitReadError
from core.run_artifacts import write_run_report
from core.settings import AnalyzerSettings
from core.structured_logging import (
    configure_structured_logging,
    get_run_id,
    phase_scope,
    set_run_id,
    unit_scope,
)
from extraction.config import DEFAULT_ENCODING
from extraction.models import ClassRecord, SourceUnit, UnitFailure
from extraction.scanner import UnitAnalyzer
from hierarchy.leveler import compute_hierarchy_stats
from hierarchy.resolver import UnresolvedBase, resolve_inheritance

logger = logging.getLogger(__name__)

UnitInput = Union[SourceUnit, str, "os.PathLike[str]"]


class ExtractionStats:
    """Statistics for an analysis run."""

    def __init__(self):
        self.units_processed = 0
        self.units_failed = 0
        self.classes_extracted = 0
        self.unresolved_bases = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "units_processed": self.units_processed,
            "units_failed": self.units_failed,
            "classes_extracted": self.classes_extracted,
            "unresolved_bases": self.unresolved_bases,
        }

    def __str__(self) -> str:
        return (
            f"ExtractionStats(processed={self.units_processed}, "
            f"failed={self.units_failed}, classes={self.classes_extracted}, "
            f"unresolved={self.unresolved_bases})"
        )


@dataclass
class AnalysisResult:
    """Outcome of a multi-unit analysis.

    Attributes:
        classes: Records from every successful unit, in unit order.
        unresolved: Base-class names pruned during resolution.
        failures: Units that could not be read.
        stats: Counters for the run.
    """

    classes: List[ClassRecord] = field(default_factory=list)
    unresolved: List[UnresolvedBase] = field(default_factory=list)
    failures: List[UnitFailure] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classes": [record.to_dict() for record in self.classes],
            "unresolved": [event.to_dict() for event in self.unresolved],
            "failures": [failure.to_dict() for failure in self.failures],
            "stats": self.stats.to_dict(),
        }


def analyze_text(text: str, unit_id: str = "") -> List[ClassRecord]:
    """Extract classes from one unit of text without cross-unit resolution.

    Example:
        >>> records = analyze_text("class A {\\n  int x;\\n};\\n")
        >>> records[0].members
        ['int x']
    """
    records = UnitAnalyzer(unit_id).analyze_text(text)
    for record in records:
        record.source_path = unit_id
    return records


def analyze_file(file_path: str, encoding: str = DEFAULT_ENCODING) -> List[ClassRecord]:
    """Extract classes from one file without cross-unit resolution.

    Raises:
        UnitOpenError: If the file cannot be opened.
        UnitStreamError: If reading fails part way through.
    """
    unit_id = os.fspath(file_path)
    logger.info("Analyzing %s", unit_id)
    records = UnitAnalyzer(unit_id).analyze_path(unit_id, encoding=encoding)
    for record in records:
        record.source_path = unit_id
    logger.info("Extracted %d classes from %s", len(records), unit_id)
    return records


def _unit_id(unit: UnitInput) -> str:
    if isinstance(unit, SourceUnit):
        return unit.unit_id
    return os.fspath(unit)


def _run_unit(
    unit: UnitInput,
    encoding: str,
) -> Tuple[str, List[ClassRecord], Optional[UnitReadError]]:
    unit_id = _unit_id(unit)
    with unit_scope(unit_id):
        try:
            if isinstance(unit, SourceUnit):
                records = analyze_text(unit.text, unit.unit_id)
            else:
                records = analyze_file(unit_id, encoding=encoding)
        except UnitReadError as exc:
            logger.error("Failed to read unit %s: %s", unit_id, exc)
            return unit_id, [], exc
    return unit_id, records, None


def analyze_units(
    units: Iterable[UnitInput],
    resolve: bool = True,
    max_workers: Optional[int] = None,
    continue_on_error: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> AnalysisResult:
    """Analyse several units and resolve inheritance across all of them.

    Args:
        units: ``SourceUnit`` objects and/or file paths.
        resolve: Whether to prune base classes no unit declares.
        max_workers: Analyse units on a thread pool of this size. Results
            are always joined in input order before resolution.
        continue_on_error: If True, a unit that cannot be read is recorded
            in ``failures`` and the rest continue. If False, the first
            failure (in input order) is raised.
        encoding: Text encoding for units given as paths.

    Returns:
        An ``AnalysisResult``.

    Raises:
        UnitReadError: Only when ``continue_on_error`` is False.

    Example:
        >>> result = analyze_units([
        ...     SourceUnit("base.h", "class Base {\\n};\\n"),
        ...     SourceUnit("derived.h", "class Derived : public Base {\\n};\\n"),
        ... ])
        >>> result.classes[1].base_classes
        ['Base']
    """
    unit_list = list(units)
    result = AnalysisResult()

    if get_run_id() == "-":
        set_run_id()

    logger.info("Analyzing %d units", len(unit_list))

    with phase_scope("scan"):
        if max_workers and max_workers > 1 and len(unit_list) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = [
                    executor.submit(contextvars.copy_context().run, _run_unit, unit, encoding)
                    for unit in unit_list
                ]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = []
            for unit in unit_list:
                outcome = _run_unit(unit, encoding)
                outcomes.append(outcome)
                if outcome[2] is not None and not continue_on_error:
                    break

    for unit_id, records, error in outcomes:
        if error is not None:
            result.stats.units_failed += 1
            if not continue_on_error:
                raise error
            result.failures.append(UnitFailure(unit_id=unit_id, error=error))
            continue
        result.stats.units_processed += 1
        result.classes.extend(records)

    result.stats.classes_extracted = len(result.classes)

    if resolve:
        with phase_scope("resolve"):
            result.unresolved = resolve_inheritance(result.classes)
        result.stats.unresolved_bases = len(result.unresolved)

    logger.info("Analysis complete: %s", result.stats)
    return result


def analyze_files(
    file_paths: Iterable[str],
    resolve: bool = True,
    max_workers: Optional[int] = None,
    continue_on_error: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> AnalysisResult:
    """Analyse files by path; see ``analyze_units``."""
    return analyze_units(
        list(file_paths),
        resolve=resolve,
        max_workers=max_workers,
        continue_on_error=continue_on_error,
        encoding=encoding,
    )


def analyze_with_settings(
    units: Iterable[UnitInput],
    settings: AnalyzerSettings,
    resolve: bool = True,
) -> AnalysisResult:
    """Analyse units using the knobs from loaded ``AnalyzerSettings``.

    The root logger is configured at ``settings.log_level`` first.
    """
    configure_structured_logging(settings.log_level)
    return analyze_units(
        units,
        resolve=resolve,
        max_workers=settings.max_workers,
        continue_on_error=settings.continue_on_error,
        encoding=settings.encoding,
    )


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Summarise a result, with hierarchy statistics, as JSON-ready data."""
    payload = result.to_dict()
    payload["hierarchy"] = compute_hierarchy_stats(result.classes).to_dict()
    return payload


def write_analysis_report(
    result: AnalysisResult,
    settings: Optional[AnalyzerSettings] = None,
) -> str:
    """Write ``result_to_dict(result)`` as a run report and return its path."""
    settings = settings or AnalyzerSettings()
    run_id = get_run_id()
    if run_id == "-":
        run_id = set_run_id()
    path = write_run_report(result_to_dict(result), run_id=run_id, output_dir=settings.report_dir)
    logger.info("Wrote analysis report to %s", path)
    return path
