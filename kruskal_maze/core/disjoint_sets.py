from array import array


class DisjointSets:
    """
    Union-find over the integers [0, n).

    parent[i] >= 0 is a parent pointer.
    parent[i] < 0 marks a root and stores -(height).
    """

    __slots__ = ('parent', 'set_count')

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Set count must be non-negative, got {size}")
        # Every element starts as its own tree of height 1
        self.parent = array('i', [-1] * size)
        self.set_count = size

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, element: int):
        if not 0 <= element < len(self.parent):
            raise IndexError(f"Element {element} out of range [0, {len(self.parent)})")

    def find(self, element: int) -> int:
        self._check(element)

        root = element
        while self.parent[root] >= 0:
            root = self.parent[root]

        # Path compression: re-point everything on the walk at the root
        while self.parent[element] >= 0 and self.parent[element] != root:
            nxt = self.parent[element]
            self.parent[element] = root
            element = nxt

        return root

    def union(self, first: int, second: int) -> bool:
        """
        Joins the sets holding first and second.
        Returns False (and changes nothing) if they were already joined.
        """
        root_a = self.find(first)
        root_b = self.find(second)
        if root_a == root_b:
            return False

        parent = self.parent
        # More negative == taller
        if parent[root_a] < parent[root_b]:
            parent[root_b] = root_a
        elif parent[root_b] < parent[root_a]:
            parent[root_a] = root_b
        else:
            parent[root_b] = root_a
            parent[root_a] -= 1

        self.set_count -= 1
        return True

    def same_set(self, first: int, second: int) -> bool:
        return self.find(first) == self.find(second)

    def height(self, element: int) -> int:
        return -self.parent[self.find(element)]

    def __repr__(self):
        return f"DisjointSets({list(self.parent)})"
