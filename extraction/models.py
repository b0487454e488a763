"""
Data models for extracted C++ class declarations.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class ClassRecord:
    """One detected class declaration.

    Attributes:
        name: Class identifier as written in the header line.
        base_classes: Base-class names in inheritance-clause order. Only the
            cross-unit resolver may change this list afterwards, and only
            by removing entries.
        members: ``"<type> <name>"`` strings in declaration order.
        methods: ``"<returnType> <name>(...)"`` strings in declaration order.
        line_number: 1-indexed line of the class header.
        source_path: Unit identifier, assigned by the orchestrator.
    """

    name: str
    base_classes: List[str] = field(default_factory=list)
    members: List[str] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)
    line_number: int = 0
    source_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary suitable for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class SourceUnit:
    """A unit handed in by a collaborator: an opaque identifier plus its text."""

    unit_id: str
    text: str


@dataclass(frozen=True)
class UnitFailure:
    """A unit whose content could not be read.

    ``error`` is the ``UnitReadError`` raised for the unit; its
    ``partial_records`` hold whatever classes were complete before the
    failure.
    """

    unit_id: str
    error: Exception

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit_id": self.unit_id,
            "error_type": type(self.error).__name__,
            "message": str(self.error),
        }
