import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Set

from kruskal_maze.core.config import DEFAULT_RECURSION_THRESHOLD
from kruskal_maze.core.graph import PassageGraph

logger = logging.getLogger(__name__)


def reconstruct_path(parents: Dict[int, int], start: int, end: int) -> List[int]:
    """
    Walks the predecessor map back from end to start.
    Returns [] if end was never reached.
    """
    if start == end:
        return [start]
    if end not in parents:
        return []

    path = [end]
    curr = end
    while curr != start:
        curr = parents[curr]
        path.append(curr)
    path.reverse()
    return path


class Solver(ABC):
    def __init__(self, graph: PassageGraph):
        self.graph = graph
        self.path: List[int] = []
        self.visited_count = 0

    def is_solvable(self) -> bool:
        # Fewer than n - 1 passages: the maze is not connected yet
        return self.graph.edge_count() >= self.graph.vertex_count - 1

    def run(self, start: int = 0, end: int = None) -> Iterator[str]:
        """
        Searches from start (default: the entrance) to end (default: the exit).
        The result lands in self.path.
        """
        self.path = []
        self.visited_count = 0

        if self.graph.vertex_count == 0:
            yield "Incomplete"
            return

        if end is None:
            end = self.graph.vertex_count - 1
        # Fail loudly on stale indices, even on an unfinished maze
        self.graph.neighbors(start)
        self.graph.neighbors(end)

        if not self.is_solvable():
            yield "Incomplete"
            return

        yield from self.search(start, end)
        yield "Solved" if self.path else "No Path"

    @abstractmethod
    def search(self, start: int, end: int) -> Iterator[str]:
        pass

    def solve(self, start: int = 0, end: int = None) -> List[int]:
        for _ in self.run(start, end):
            pass
        return self.path


class RecursiveDFS(Solver):
    def search(self, start: int, end: int) -> Iterator[str]:
        visited: Set[int] = set()
        trail: List[int] = []
        if self._visit(start, end, visited, trail):
            # Filled in while unwinding, so target comes first
            trail.reverse()
            self.path = trail
            visited.add(end)
        self.visited_count = len(visited)
        yield f"Visited: {self.visited_count}"

    def _visit(self, current: int, target: int, visited: Set[int], trail: List[int]) -> bool:
        if current == target:
            trail.append(current)
            return True
        if current in visited:
            return False

        visited.add(current)
        for neighbor in self.graph.adjacency[current]:
            if self._visit(neighbor, target, visited, trail):
                trail.append(current)
                return True
        return False


class IterativeDFS(Solver):
    """
    Depth-first search with an explicit stack.
    Retreats one cell whenever the top of the stack has no unvisited neighbor.
    """

    def search(self, start: int, end: int) -> Iterator[str]:
        adjacency = self.graph.adjacency
        visited: Set[int] = {start}
        stack: List[int] = [start]
        self.visited_count = 1

        count = 0
        while stack:
            current = stack[-1]
            if current == end:
                self.path = list(stack)
                return

            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    self.visited_count += 1
                    stack.append(neighbor)
                    break
            else:
                # Dead end
                stack.pop()

            count += 1
            if count % 100 == 0:
                yield f"Stack: {len(stack)}"


class DepthFirstSearch(Solver):
    """
    Recursive DFS for small mazes, explicit-stack DFS above the threshold.
    """

    def __init__(self, graph: PassageGraph, recursion_threshold: int = DEFAULT_RECURSION_THRESHOLD):
        super().__init__(graph)
        self.recursion_threshold = recursion_threshold
        self.strategy: Solver = None

    def search(self, start: int, end: int) -> Iterator[str]:
        if self.graph.vertex_count <= self.recursion_threshold:
            self.strategy = RecursiveDFS(self.graph)
        else:
            self.strategy = IterativeDFS(self.graph)
        logger.debug(
            "DFS over %d cells using %s",
            self.graph.vertex_count, type(self.strategy).__name__,
        )

        try:
            yield from self.strategy.search(start, end)
        except RecursionError:
            # Caller was already deep in the stack; redo it without recursion
            logger.warning(
                "Recursive DFS hit the recursion limit on %d cells; retrying with IterativeDFS",
                self.graph.vertex_count,
            )
            self.strategy = IterativeDFS(self.graph)
            yield from self.strategy.search(start, end)
        self.path = self.strategy.path
        self.visited_count = self.strategy.visited_count


class BFS(Solver):
    def __init__(self, graph: PassageGraph):
        super().__init__(graph)
        self.parents: Dict[int, int] = {}

    def search(self, start: int, end: int) -> Iterator[str]:
        adjacency = self.graph.adjacency
        self.parents = {}
        queue = deque([start])
        visited: Set[int] = {start}
        self.visited_count = 1

        found = start == end
        while queue and not found:
            current = queue.popleft()

            for neighbor in adjacency[current]:
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                self.visited_count += 1
                self.parents[neighbor] = current

                # Stop as soon as the target has a predecessor
                if neighbor == end:
                    found = True
                    break
                queue.append(neighbor)

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        self.path = reconstruct_path(self.parents, start, end)
