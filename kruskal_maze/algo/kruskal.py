import logging
from typing import Iterator

from kruskal_maze.core.disjoint_sets import DisjointSets
from kruskal_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class RandomizedKruskal(Generator):
    """
    Random spanning tree over the grid.

    Repeatedly picks a cell and a random neighbor in a different component,
    joins the two components and opens the wall between them. Stops once the
    graph has cells - 1 passages.
    """

    def __init__(self, grid, seed: int = None, rng=None, shuffle_cells: bool = True):
        super().__init__(grid, seed=seed, rng=rng)
        self.shuffle_cells = shuffle_cells
        self.sets = DisjointSets(grid.size)
        self.miss_count = 0

    def _join(self, cell: int, direction: int) -> bool:
        neighbor = self.grid.neighbor(cell, direction)
        if neighbor == -1:
            return False
        if not self.sets.union(cell, neighbor):
            return False
        self.graph.add_edge(cell, neighbor)
        return True

    def run(self) -> Iterator[str]:
        target = self.grid.size - 1
        if self.shuffle_cells:
            yield from self._run_shuffled(target)
        else:
            yield from self._run_uniform(target)

        logger.debug(
            "Spanning tree complete: %d passages, %d misses",
            self.graph.edge_count(), self.miss_count,
        )
        yield "Done"

    def _run_shuffled(self, target: int) -> Iterator[str]:
        rng = self.rng
        order = list(range(self.grid.size))
        directions = list(self.grid.DIRECTIONS)

        while self.graph.edge_count() < target:
            # Every cell gets a turn before any repeats
            rng.shuffle(order)
            for cell in order:
                rng.shuffle(directions)
                for direction in directions:
                    if self._join(cell, direction):
                        self.step_count += 1
                        if self.step_count % 100 == 0:
                            yield f"Passages: {self.step_count}/{target}"
                        break
                else:
                    self.miss_count += 1

                if self.graph.edge_count() == target:
                    break

    def _run_uniform(self, target: int) -> Iterator[str]:
        rng = self.rng
        size = self.grid.size
        directions = self.grid.DIRECTIONS

        while self.graph.edge_count() < target:
            cell = rng.randrange(size)
            if self._join(cell, rng.choice(directions)):
                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Passages: {self.step_count}/{target}"
            else:
                self.miss_count += 1
