"""
Inheritance depth and graph helpers.

The inheritance graph is never stored; every helper derives it from the
records' (resolved) ``base_classes`` lists on demand.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Sequence, Tuple

if TYPE_CHECKING:
    from extraction.models import ClassRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HierarchyStats:
    """Summary figures for a set of class records."""

    total_classes: int
    root_classes: int
    max_depth: int
    total_members: int
    total_methods: int
    avg_members: float
    avg_methods: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_levels(records: Sequence[ClassRecord]) -> Dict[str, int]:
    """Assign an inheritance level to every class name.

    Classes without bases get 0. A class whose bases all have a level gets
    one more than the deepest of them; passes repeat until nothing changes.
    Classes still unlevelled at that point (cycles, or bases that were
    never resolved) are forced to 0.
    """
    levels: Dict[str, int] = {}
    for record in records:
        if not record.base_classes:
            levels.setdefault(record.name, 0)

    changed = True
    while changed:
        changed = False
        for record in records:
            if record.name in levels:
                continue
            if all(base in levels for base in record.base_classes):
                levels[record.name] = 1 + max(levels[base] for base in record.base_classes)
                changed = True

    residue = [record.name for record in records if record.name not in levels]
    if residue:
        logger.warning(
            "Forcing level 0 for %d classes with cyclic or unresolved bases: %s",
            len(residue),
            ", ".join(sorted(set(residue))),
        )
        for name in residue:
            levels[name] = 0

    return levels


def build_inheritance_tree(records: Sequence[ClassRecord]) -> Dict[str, List[ClassRecord]]:
    """Map each base-class name to the records that derive from it, in record order."""
    tree: Dict[str, List[ClassRecord]] = {}
    for record in records:
        for base in record.base_classes:
            tree.setdefault(base, []).append(record)
    return tree


def find_root_classes(records: Sequence[ClassRecord]) -> List[ClassRecord]:
    """Records with no base classes."""
    return [record for record in records if not record.base_classes]


def walk_hierarchy(
    records: Sequence[ClassRecord],
    include_unreached: bool = True,
) -> Iterator[Tuple[ClassRecord, int]]:
    """Yield ``(record, depth)`` in pre-order from each root class.

    The walk is iterative and visits every record at most once, so cyclic
    graphs terminate. With ``include_unreached`` the records no root leads
    to (members of a cycle) are yielded afterwards as depth-0 entries with
    their own subtrees.
    """
    tree = build_inheritance_tree(records)
    visited: set[int] = set()

    def _walk(start: ClassRecord) -> Iterator[Tuple[ClassRecord, int]]:
        stack: List[Tuple[ClassRecord, int]] = [(start, 0)]
        while stack:
            record, depth = stack.pop()
            if id(record) in visited:
                continue
            visited.add(id(record))
            yield record, depth
            children = tree.get(record.name, [])
            for child in reversed(children):
                if id(child) not in visited:
                    stack.append((child, depth + 1))

    for root in find_root_classes(records):
        yield from _walk(root)

    if include_unreached:
        for record in records:
            if id(record) not in visited:
                yield from _walk(record)


def compute_hierarchy_stats(records: Sequence[ClassRecord]) -> HierarchyStats:
    total = len(records)
    levels = compute_levels(records)
    total_members = sum(len(record.members) for record in records)
    total_methods = sum(len(record.methods) for record in records)
    return HierarchyStats(
        total_classes=total,
        root_classes=len(find_root_classes(records)),
        max_depth=max(levels.values(), default=0),
        total_members=total_members,
        total_methods=total_methods,
        avg_members=round(total_members / total, 1) if total else 0.0,
        avg_methods=round(total_methods / total, 1) if total else 0.0,
    )
