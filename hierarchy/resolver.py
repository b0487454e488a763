"""Validation of declared base classes against the full set of known classes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List

if TYPE_CHECKING:
    from extraction.models import ClassRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnresolvedBase:
    """A declared base class that no analysed unit defines."""

    class_name: str
    base_name: str
    source_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "base_name": self.base_name,
            "source_path": self.source_path,
        }


def build_class_index(records: Iterable[ClassRecord]) -> Dict[str, ClassRecord]:
    """Map class name to record.

    When two records share a name the later one wins. The records
    themselves are left untouched, so the caller's list still holds both.
    """
    index: Dict[str, ClassRecord] = {}
    for record in records:
        if record.name in index:
            logger.debug(
                "Class %s redeclared (line %d of %s); later record shadows earlier",
                record.name,
                record.line_number,
                record.source_path or "<unit>",
            )
        index[record.name] = record
    return index


def resolve_inheritance(records: List[ClassRecord]) -> List[UnresolvedBase]:
    """Drop base-class names that are not declared anywhere in ``records``.

    Each record's ``base_classes`` list is filtered in place, keeping the
    relative order of surviving names. Running it again on the result
    changes nothing.

    Returns:
        One event per dropped name, in record order.
    """
    index = build_class_index(records)
    unresolved: List[UnresolvedBase] = []

    for record in records:
        kept: List[str] = []
        for base_name in record.base_classes:
            if base_name in index:
                kept.append(base_name)
                continue
            logger.warning(
                "Base class %s of %s not found among analysed classes",
                base_name,
                record.name,
            )
            unresolved.append(
                UnresolvedBase(
                    class_name=record.name,
                    base_name=base_name,
                    source_path=record.source_path,
                )
            )
        if len(kept) != len(record.base_classes):
            record.base_classes[:] = kept

    if unresolved:
        logger.info("Pruned %d unresolved base class references", len(unresolved))
    return unresolved
