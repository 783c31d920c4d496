from typing import Iterator, Tuple


class GridShape:
    """
    Index arithmetic for a rows x cols grid addressed by linear cell index.

    cell = row * cols + col
    """

    # Bitmask Constants
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    ALL_SIDES = NORTH | EAST | SOUTH | WEST

    # Clockwise from north
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    NAMES = {NORTH: "north", EAST: "east", SOUTH: "south", WEST: "west"}

    __slots__ = ('rows', 'cols', 'size')

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.size = rows * cols

    @property
    def entrance(self) -> int:
        return 0

    @property
    def exit(self) -> int:
        return self.size - 1

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get_coords(self, cell: int) -> Tuple[int, int]:
        self._check(cell)
        return divmod(cell, self.cols)

    def _check(self, cell: int):
        if not 0 <= cell < self.size:
            raise IndexError(f"Cell {cell} out of range [0, {self.size})")

    def neighbor(self, cell: int, direction: int) -> int:
        """
        Index of the cell next to 'cell' in 'direction', or -1 if that
        would step off the grid.
        """
        self._check(cell)
        cols = self.cols

        if direction == self.NORTH:
            n = cell - cols
            return n if n >= 0 else -1
        if direction == self.SOUTH:
            n = cell + cols
            return n if n < self.size else -1
        if direction == self.EAST:
            # Last column wraps to the next row
            return -1 if (cell + 1) % cols == 0 else cell + 1
        if direction == self.WEST:
            return -1 if cell % cols == 0 else cell - 1

        raise ValueError(f"Unknown direction {direction}")

    def get_neighbors(self, cell: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (neighbor, direction_to_neighbor) for all in-bounds neighbors.
        Says nothing about walls.
        """
        for direction in self.DIRECTIONS:
            n = self.neighbor(cell, direction)
            if n != -1:
                yield (n, direction)

    def direction_between(self, cell: int, other: int) -> int:
        """Direction from cell to a grid-adjacent other, 0 if not adjacent."""
        for n, direction in self.get_neighbors(cell):
            if n == other:
                return direction
        return 0

    def __repr__(self):
        return f"GridShape({self.rows}, {self.cols})"
