import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.core.disjoint_sets import DisjointSets

SET_SIZE = 10


class TestDisjointSets(unittest.TestCase):
    def test_find_roots(self):
        sets = DisjointSets(SET_SIZE)
        for i in range(SET_SIZE):
            self.assertEqual(sets.find(i), i)

    def test_find_out_of_range(self):
        sets = DisjointSets(SET_SIZE)
        with self.assertRaises(IndexError):
            sets.find(-1)
        with self.assertRaises(IndexError):
            sets.find(SET_SIZE)
        with self.assertRaises(IndexError):
            sets.union(0, SET_SIZE + 1)

    def test_find_non_root(self):
        sets = DisjointSets(SET_SIZE)
        sets.union(0, 1)
        sets.union(0, 2)
        self.assertIn(sets.find(2), (0, 1))

    def test_union_repeat(self):
        sets = DisjointSets(SET_SIZE)
        self.assertTrue(sets.union(3, 7))
        self.assertFalse(sets.union(3, 7))
        self.assertFalse(sets.union(7, 3))
        self.assertEqual(sets.set_count, SET_SIZE - 1)

    def test_scenario_five(self):
        sets = DisjointSets(5)
        sets.union(0, 1)
        sets.union(1, 2)
        sets.union(3, 4)
        self.assertTrue(sets.same_set(0, 2))
        self.assertFalse(sets.same_set(0, 3))
        self.assertTrue(sets.same_set(3, 4))
        self.assertEqual(sets.set_count, 2)

    def test_partition(self):
        sets = DisjointSets(SET_SIZE)
        sets.union(0, 1)  # 0-1
        sets.union(0, 2)  # 0-1-2
        sets.union(2, 3)  # 0-1-2-3
        sets.union(4, 5)  # 4-5
        sets.union(8, 6)  # 8-6
        sets.union(9, 6)  # 8-6-9
        groups = [{0, 1, 2, 3}, {4, 5}, {6, 8, 9}, {7}]

        for group in groups:
            for a in group:
                for b in range(SET_SIZE):
                    self.assertEqual(sets.same_set(a, b), b in group, f"same_set({a}, {b})")

    def test_equivalence(self):
        sets = DisjointSets(SET_SIZE)
        for a, b in [(0, 5), (5, 9), (2, 3), (3, 1), (9, 1)]:
            sets.union(a, b)

        for a in range(SET_SIZE):
            self.assertTrue(sets.same_set(a, a))
            for b in range(SET_SIZE):
                self.assertEqual(sets.same_set(a, b), sets.same_set(b, a))
                for c in range(SET_SIZE):
                    if sets.same_set(a, b) and sets.same_set(b, c):
                        self.assertTrue(sets.same_set(a, c))

    def test_union_by_height(self):
        sets = DisjointSets(4)
        sets.union(0, 1)  # tie: 1 under 0, height 2
        self.assertEqual(sets.height(0), 2)
        sets.union(2, 0)  # shorter 2 goes under taller 0
        self.assertEqual(sets.find(2), 0)
        self.assertEqual(sets.height(0), 2)

    def test_path_compression(self):
        sets = DisjointSets(8)
        sets.union(0, 1)
        sets.union(2, 3)
        sets.union(0, 2)
        sets.union(4, 5)
        sets.union(6, 7)
        sets.union(4, 6)
        sets.union(0, 4)
        root = sets.find(7)
        self.assertEqual(sets.parent[7], root)


if __name__ == '__main__':
    unittest.main()
