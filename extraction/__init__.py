"""
Layer 1: Extraction Engine

Heuristic, line-based C++ class extractor. Finds class headers, their
declared base classes, and member-variable and member-function
signatures without building a syntax tree.
"""

from extraction.models import ClassRecord, SourceUnit, UnitFailure
from extraction.comments import CommentStripper
from extraction.matchers import (
    HeaderMatch,
    match_class_header,
    match_member,
    match_method,
    parse_inheritance,
)
from extraction.scanner import ClassBodyScanner, UnitAnalyzer
from extraction.extractor import (
    AnalysisResult,
    ExtractionStats,
    analyze_file,
    analyze_files,
    analyze_text,
    analyze_units,
    analyze_with_settings,
    result_to_dict,
    write_analysis_report,
)

__all__ = [
    # Data models
    "ClassRecord",
    "SourceUnit",
    "UnitFailure",
    "AnalysisResult",
    "ExtractionStats",
    # Low-level matching
    "CommentStripper",
    "HeaderMatch",
    "match_class_header",
    "match_member",
    "match_method",
    "parse_inheritance",
    # Mid-level scanning
    "ClassBodyScanner",
    "UnitAnalyzer",
    # High-level orchestration
    "analyze_file",
    "analyze_files",
    "analyze_text",
    "analyze_units",
    "analyze_with_settings",
    "result_to_dict",
    "write_analysis_report",
]
