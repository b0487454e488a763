"""
Cross-unit inheritance resolution and hierarchy levelling.

Consumes the class records produced by the extraction layer.
"""

from hierarchy.resolver import UnresolvedBase, build_class_index, resolve_inheritance
from hierarchy.leveler import (
    HierarchyStats,
    build_inheritance_tree,
    compute_hierarchy_stats,
    compute_levels,
    find_root_classes,
    walk_hierarchy,
)

__all__ = [
    "UnresolvedBase",
    "build_class_index",
    "resolve_inheritance",
    "HierarchyStats",
    "build_inheritance_tree",
    "compute_hierarchy_stats",
    "compute_levels",
    "find_root_classes",
    "walk_hierarchy",
]
