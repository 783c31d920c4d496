import numpy as np

from kruskal_maze.core.graph import PassageGraph


class MazeStats:
    @staticmethod
    def degrees(graph: PassageGraph) -> np.ndarray:
        return np.fromiter(
            (len(adj) for adj in graph.adjacency),
            dtype=np.int64,
            count=graph.vertex_count,
        )

    @staticmethod
    def calculate_stats(graph: PassageGraph):
        """
        Shape of the maze by passage count per cell.

        dead_ends: 1 passage
        corridors: 2 passages
        junctions: 3 or 4 passages
        """
        degrees = MazeStats.degrees(graph)
        # minlength=5 so every degree 0..4 has a bucket
        counts = np.bincount(degrees, minlength=5)

        total = graph.vertex_count
        dead_ends = int(counts[1])
        return {
            "dead_ends": dead_ends,
            "corridors": int(counts[2]),
            "junctions": int(counts[3:].sum()),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "is_tree": graph.is_spanning_tree(),
        }
