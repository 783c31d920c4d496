from typing import List, NamedTuple

from kruskal_maze.core.grid import GridShape


class OpenSides(NamedTuple):
    north: bool
    east: bool
    south: bool
    west: bool

    @classmethod
    def from_mask(cls, mask: int) -> "OpenSides":
        return cls(
            bool(mask & GridShape.NORTH),
            bool(mask & GridShape.EAST),
            bool(mask & GridShape.SOUTH),
            bool(mask & GridShape.WEST),
        )

    @property
    def mask(self) -> int:
        m = 0
        if self.north: m |= GridShape.NORTH
        if self.east: m |= GridShape.EAST
        if self.south: m |= GridShape.SOUTH
        if self.west: m |= GridShape.WEST
        return m


class PassageGraph:
    """
    Undirected, unweighted graph of open passages between cells.

    Adjacency lists keep the newest neighbor first, so traversals visit the
    most recently carved passage before older ones.
    """

    __slots__ = ('cols', 'adjacency', '_edge_count')

    def __init__(self, vertex_count: int, cols: int = None):
        if vertex_count < 0:
            raise ValueError(f"Vertex count must be non-negative, got {vertex_count}")
        # Without a stride the vertices are treated as one row
        self.cols = cols if cols is not None else max(vertex_count, 1)
        self.adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        return self._edge_count

    def _check(self, vertex: int):
        if not 0 <= vertex < len(self.adjacency):
            raise IndexError(f"Vertex {vertex} out of range [0, {len(self.adjacency)})")

    def has_edge(self, first: int, second: int) -> bool:
        self._check(first)
        self._check(second)
        return second in self.adjacency[first]

    def add_edge(self, first: int, second: int) -> bool:
        """
        Opens a passage between first and second.
        Returns False if the passage already existed.
        """
        if self.has_edge(first, second):
            return False

        self.adjacency[first].insert(0, second)
        if first != second:
            self.adjacency[second].insert(0, first)
        self._edge_count += 1
        return True

    def neighbors(self, vertex: int) -> List[int]:
        self._check(vertex)
        return self.adjacency[vertex]

    def degree(self, vertex: int) -> int:
        return len(self.neighbors(vertex))

    def is_spanning_tree(self) -> bool:
        # Only meaningful for graphs built without cycles (i.e. by the generator)
        return self._edge_count == max(self.vertex_count - 1, 0)

    def open_mask(self, vertex: int) -> int:
        """
        Bitmask of the sides of 'vertex' that are passages.
        Assumes every edge joins grid-adjacent cells.
        """
        cols = self.cols
        mask = 0
        for other in self.neighbors(vertex):
            diff = other - vertex
            # Stride first: with one column, +-1 is also north/south
            if diff == -cols:
                mask |= GridShape.NORTH
            elif diff == cols:
                mask |= GridShape.SOUTH
            elif diff == 1:
                mask |= GridShape.EAST
            elif diff == -1:
                mask |= GridShape.WEST
        return mask

    def open_sides(self, vertex: int) -> OpenSides:
        return OpenSides.from_mask(self.open_mask(vertex))

    def __repr__(self):
        return f"PassageGraph(vertices={self.vertex_count}, edges={self._edge_count})"
