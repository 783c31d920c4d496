import logging
import random
from enum import Enum
from typing import List

import numpy as np

from kruskal_maze.core.config import MazeConfig
from kruskal_maze.core.grid import GridShape
from kruskal_maze.core.graph import OpenSides, PassageGraph
from kruskal_maze.algo.kruskal import RandomizedKruskal
from kruskal_maze.algo.solvers import BFS, DepthFirstSearch

logger = logging.getLogger(__name__)


class SolveMode(Enum):
    DFS = "dfs"
    BFS = "bfs"


class Maze:
    """
    One generate-then-solve cycle over a rows x cols grid.

    Entrance is cell 0 (top-left, opening north).
    Exit is cell rows*cols - 1 (bottom-right, opening south).

    Usage:
        maze = Maze(MazeConfig(rows=10, cols=10, seed=42))
        maze.generate()
        maze.open_sides(0)          # OpenSides(north=True, ...)
        maze.solve(SolveMode.BFS)   # [0, ..., 99]
    """

    def __init__(self, config: MazeConfig = None, rng: random.Random = None, **kwargs):
        if config is None:
            config = MazeConfig(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a MazeConfig or keyword arguments, not both")
        self.config = config
        self.grid = GridShape(config.rows, config.cols)
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.graph = PassageGraph(self.grid.size, self.grid.cols)

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    def edge_count(self) -> int:
        return self.graph.edge_count()

    def is_generated(self) -> bool:
        return self.graph.is_spanning_tree()

    def generate(self) -> PassageGraph:
        generator = RandomizedKruskal(
            self.grid, seed=self.config.seed, rng=self.rng,
            shuffle_cells=self.config.shuffle_cells,
        )
        self.graph = generator.run_all()
        logger.info(
            "Generated %dx%d maze: %d passages",
            self.rows, self.cols, self.graph.edge_count(),
        )
        return self.graph

    def open_mask(self, vertex: int) -> int:
        mask = self.graph.open_mask(vertex)
        # Outer doors are drawn, not carved: they are not graph edges
        if vertex == self.grid.entrance:
            mask |= GridShape.NORTH
        if vertex == self.grid.exit:
            mask |= GridShape.SOUTH
        return mask

    def open_sides(self, vertex: int) -> OpenSides:
        return OpenSides.from_mask(self.open_mask(vertex))

    def door_grid(self) -> np.ndarray:
        """(rows, cols) uint8 array of open-side bitmasks, for renderers."""
        masks = np.fromiter(
            (self.open_mask(v) for v in range(self.vertex_count)),
            dtype=np.uint8,
            count=self.vertex_count,
        )
        return masks.reshape(self.rows, self.cols)

    def make_solver(self, mode: SolveMode):
        mode = SolveMode(mode)
        if mode is SolveMode.DFS:
            return DepthFirstSearch(self.graph, recursion_threshold=self.config.recursion_threshold)
        return BFS(self.graph)

    def solve(self, mode: SolveMode = SolveMode.BFS) -> List[int]:
        """
        Path of cell indices from entrance to exit.
        Empty if the maze has not been generated.
        """
        solver = self.make_solver(mode)
        path = solver.solve(self.grid.entrance, self.grid.exit)
        if not path and not self.is_generated():
            logger.debug("Solve requested before generation; returning empty path")
        return path

    def __repr__(self):
        return f"Maze({self.rows}x{self.cols}, edges={self.edge_count()})"
