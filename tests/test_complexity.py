import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.core.grid import GridShape
from kruskal_maze.core.graph import PassageGraph
from kruskal_maze.core.complexity import MazeStats
from kruskal_maze.algo.kruskal import RandomizedKruskal


class TestComplexity(unittest.TestCase):
    def test_counts(self):
        # 0 - 1   2
        #     |   |
        # 3 - 4 - 5
        # |       |
        # 6   7 - 8
        graph = PassageGraph(9, cols=3)
        for a, b in [(0, 1), (1, 4), (4, 5), (4, 3), (3, 6), (5, 2), (5, 8), (8, 7)]:
            graph.add_edge(a, b)

        stats = MazeStats.calculate_stats(graph)
        self.assertEqual(stats["dead_ends"], 4)
        self.assertEqual(stats["corridors"], 3)
        self.assertEqual(stats["junctions"], 2)
        self.assertAlmostEqual(stats["dead_end_percent"], 400 / 9)
        self.assertTrue(stats["is_tree"])

    def test_generated(self):
        w, h = 20, 20
        graph = RandomizedKruskal(GridShape(h, w), seed=42).run_all()
        stats = MazeStats.calculate_stats(graph)

        self.assertGreater(stats["dead_ends"], 0)
        self.assertTrue(stats["is_tree"])
        # No isolated cells in a spanning tree
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)
        self.assertEqual(int(MazeStats.degrees(graph).sum()), 2 * (w * h - 1))

    def test_empty_graph(self):
        stats = MazeStats.calculate_stats(PassageGraph(4, cols=2))
        self.assertEqual(stats["dead_ends"], 0)
        self.assertFalse(stats["is_tree"])


if __name__ == '__main__':
    unittest.main()
