"""Tests for inheritance levels, tree helpers and statistics."""

import unittest

from extraction.models import ClassRecord
from hierarchy.leveler import (
    build_inheritance_tree,
    compute_hierarchy_stats,
    compute_levels,
    find_root_classes,
    walk_hierarchy,
)


def _record(name, bases=(), members=(), methods=()):
    return ClassRecord(
        name=name,
        base_classes=list(bases),
        members=list(members),
        methods=list(methods),
    )


class TestComputeLevels(unittest.TestCase):
    def test_roots_are_level_zero(self) -> None:
        levels = compute_levels([_record("A"), _record("B")])
        self.assertEqual(levels, {"A": 0, "B": 0})

    def test_chain(self) -> None:
        records = [_record("C", ["B"]), _record("B", ["A"]), _record("A")]
        self.assertEqual(compute_levels(records), {"A": 0, "B": 1, "C": 2})

    def test_multiple_inheritance_takes_deepest_base(self) -> None:
        records = [
            _record("Root"),
            _record("Mid", ["Root"]),
            _record("Leaf", ["Mid"]),
            _record("Mixin"),
            _record("Both", ["Mixin", "Leaf"]),
        ]
        self.assertEqual(compute_levels(records)["Both"], 3)

    def test_diamond(self) -> None:
        records = [
            _record("A"),
            _record("B", ["A"]),
            _record("C", ["A"]),
            _record("D", ["B", "C"]),
        ]
        self.assertEqual(compute_levels(records)["D"], 2)

    def test_cycle_forced_to_zero(self) -> None:
        records = [_record("A", ["B"]), _record("B", ["A"])]
        self.assertEqual(compute_levels(records), {"A": 0, "B": 0})

    def test_class_depending_on_cycle_forced_to_zero(self) -> None:
        records = [_record("A", ["B"]), _record("B", ["A"]), _record("C", ["A"])]
        self.assertEqual(compute_levels(records)["C"], 0)

    def test_unresolved_base_forced_to_zero(self) -> None:
        self.assertEqual(compute_levels([_record("Orphan", ["Ghost"])]), {"Orphan": 0})

    def test_empty(self) -> None:
        self.assertEqual(compute_levels([]), {})


class TestTreeHelpers(unittest.TestCase):
    def setUp(self) -> None:
        self.animal = _record("Animal")
        self.vehicle = _record("Vehicle")
        self.dog = _record("Dog", ["Animal"])
        self.cat = _record("Cat", ["Animal"])
        self.working = _record("WorkingDog", ["Dog"])
        self.records = [self.animal, self.dog, self.cat, self.working, self.vehicle]

    def test_build_inheritance_tree(self) -> None:
        tree = build_inheritance_tree(self.records)
        self.assertEqual([r.name for r in tree["Animal"]], ["Dog", "Cat"])
        self.assertEqual([r.name for r in tree["Dog"]], ["WorkingDog"])
        self.assertNotIn("Vehicle", tree)

    def test_find_root_classes(self) -> None:
        roots = find_root_classes(self.records)
        self.assertEqual([r.name for r in roots], ["Animal", "Vehicle"])

    def test_walk_hierarchy_preorder(self) -> None:
        walked = [(r.name, depth) for r, depth in walk_hierarchy(self.records)]
        self.assertEqual(
            walked,
            [
                ("Animal", 0),
                ("Dog", 1),
                ("WorkingDog", 2),
                ("Cat", 1),
                ("Vehicle", 0),
            ],
        )

    def test_walk_hierarchy_terminates_on_cycle(self) -> None:
        records = [_record("Root"), _record("A", ["B"]), _record("B", ["A"])]
        walked = [(r.name, depth) for r, depth in walk_hierarchy(records)]
        self.assertEqual(walked, [("Root", 0), ("A", 0), ("B", 1)])

    def test_walk_hierarchy_roots_only(self) -> None:
        records = [_record("Root"), _record("A", ["B"]), _record("B", ["A"])]
        walked = [r.name for r, _ in walk_hierarchy(records, include_unreached=False)]
        self.assertEqual(walked, ["Root"])


class TestHierarchyStats(unittest.TestCase):
    def test_stats(self) -> None:
        records = [
            _record("Animal", members=["int age", "std::string name"], methods=["void speak(...)"]),
            _record("Dog", ["Animal"], methods=["void speak(...)", "void bark(...)"]),
            _record("Puppy", ["Dog"]),
        ]
        stats = compute_hierarchy_stats(records)
        self.assertEqual(stats.total_classes, 3)
        self.assertEqual(stats.root_classes, 1)
        self.assertEqual(stats.max_depth, 2)
        self.assertEqual(stats.total_members, 2)
        self.assertEqual(stats.total_methods, 3)
        self.assertEqual(stats.avg_members, 0.7)
        self.assertEqual(stats.avg_methods, 1.0)
        self.assertEqual(stats.to_dict()["max_depth"], 2)

    def test_empty_stats(self) -> None:
        stats = compute_hierarchy_stats([])
        self.assertEqual(stats.total_classes, 0)
        self.assertEqual(stats.max_depth, 0)
        self.assertEqual(stats.avg_members, 0.0)


if __name__ == "__main__":
    unittest.main()
