import random
from abc import ABC, abstractmethod
from typing import Iterator

from kruskal_maze.core.grid import GridShape
from kruskal_maze.core.graph import PassageGraph


class Generator(ABC):
    def __init__(self, grid: GridShape, seed: int = None, rng: random.Random = None):
        self.grid = grid
        self.seed = seed
        # Each generator owns its random source; never the module-level one
        self.rng = rng if rng is not None else random.Random(seed)
        self.graph = PassageGraph(grid.size, grid.cols)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The passages are added in-place to self.graph.
        """
        pass

    def run_all(self) -> PassageGraph:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.graph
