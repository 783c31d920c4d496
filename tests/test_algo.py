import unittest
import random
import sys
import os
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.core.grid import GridShape
from kruskal_maze.algo.kruskal import RandomizedKruskal


def reachable(graph, source=0):
    seen = {source}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for n in graph.neighbors(v):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


class TestGenerators(unittest.TestCase):
    def check_spanning_tree(self, grid, graph):
        n = grid.size
        self.assertEqual(graph.edge_count(), n - 1, "Tree must have n - 1 passages")
        self.assertEqual(len(reachable(graph)), n, "Every cell must be reachable from the entrance")

        # Every passage joins grid-adjacent cells, listed once per side
        for v in range(n):
            nbrs = graph.neighbors(v)
            self.assertEqual(len(nbrs), len(set(nbrs)))
            for other in nbrs:
                self.assertNotEqual(grid.direction_between(v, other), 0)
                self.assertIn(v, graph.neighbors(other))

    def test_kruskal_coverage(self):
        grid = GridShape(20, 20)
        graph = RandomizedKruskal(grid, seed=42).run_all()
        self.check_spanning_tree(grid, graph)

    def test_uniform_coverage(self):
        grid = GridShape(12, 9)
        gen = RandomizedKruskal(grid, seed=7, shuffle_cells=False)
        graph = gen.run_all()
        self.check_spanning_tree(grid, graph)
        self.assertEqual(gen.sets.set_count, 1)

    def test_odd_shapes(self):
        for rows, cols in [(1, 1), (1, 10), (10, 1), (2, 2), (3, 7)]:
            with self.subTest(rows=rows, cols=cols):
                grid = GridShape(rows, cols)
                self.check_spanning_tree(grid, RandomizedKruskal(grid, seed=1).run_all())

    def test_determinism(self):
        grid = GridShape(10, 10)
        graph1 = RandomizedKruskal(grid, seed=12345).run_all()

        rec = RandomizedKruskal(grid, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(graph1.adjacency, rec.graph.adjacency)

    def test_injected_rng(self):
        grid = GridShape(8, 8)
        a = RandomizedKruskal(grid, rng=random.Random(99)).run_all()
        b = RandomizedKruskal(grid, rng=random.Random(99)).run_all()
        self.assertEqual(a.adjacency, b.adjacency)

    def test_progress(self):
        grid = GridShape(15, 15)
        statuses = list(RandomizedKruskal(grid, seed=3).run())
        self.assertEqual(statuses[-1], "Done")
        self.assertIn("Passages: 100/224", statuses)


if __name__ == '__main__':
    unittest.main()
