"""Disjoint-set (union-find) structure over the integers `0..n-1`."""


class DisjointSets:
    """
    DisjointSets is an array-backed implementation of a disjoint-set data structure.

    Each element has one slot in `_up`. A root stores the negated size of its
    set, any other element stores the index of another element in the same set
    (not necessarily the root). For example the sets `{0, 4, 5}, {1, 3}, {2}`
    might be stored as:

        index:   0   1   2   3   4   5
        value:  -3  -2  -1   1   0   4

    `union` always attaches the root with the larger label under the root with
    the smaller label, regardless of set sizes.

    References:
        https://en.wikipedia.org/wiki/Disjoint-set_data_structure
        https://weblog.jamisbuck.org/2011/1/3/maze-generation-kruskal-s-algorithm
    """

    def __init__(self, num_elements: int) -> None:
        """Initialize `num_elements` singleton sets."""
        if not isinstance(num_elements, int) or num_elements < 1:
            raise ValueError(
                f"DisjointSets needs at least one element, got {num_elements!r}"
            )
        self._up: list[int] = [-1] * num_elements

    def __len__(self) -> int:
        return len(self._up)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"

    def __str__(self) -> str:
        """Return the partition as a string, e.g. `{[0, 1], [2]}`."""
        return (
            "{"
            + ", ".join(str(self.get_elements(s)) for s in self.get_set_names())
            + "}"
        )

    def union(self, set1: int, set2: int) -> None:
        """Merge the two sets named `set1` and `set2` into one set.

        The set whose name is larger is attached under the other, so the
        surviving set name is `min(set1, set2)`.
        """
        self._ensure_set_name(set1)
        self._ensure_set_name(set2)
        if set1 == set2:
            return

        size: int = -self._up[set1] - self._up[set2]
        if set2 < set1:
            self._up[set1] = set2
            self._up[set2] = -size
        else:
            self._up[set2] = set1
            self._up[set1] = -size

    def find(self, x: int) -> int:
        """Return the name of the set containing `x`, compressing the path walked."""
        self._ensure_valid_element(x)

        root: int = x
        while self._up[root] >= 0:
            root = self._up[root]

        # point every element on the path directly at the root
        while x != root:
            parent: int = self._up[x]
            self._up[x] = root
            x = parent

        return root

    def num_sets(self) -> int:
        """Return the current number of sets."""
        return sum(1 for value in self._up if value < 0)

    def num_elements(self, set_name: int | None = None) -> int:
        """Return the total number of elements, or the size of the set `set_name`."""
        if set_name is None:
            return len(self._up)
        self._ensure_set_name(set_name)
        return -self._up[set_name]

    def is_set_name(self, x: int) -> bool:
        """Return True if `x` is the name (root) of a set."""
        self._ensure_valid_element(x)
        return self._up[x] < 0

    def get_elements(self, set_name: int) -> list[int]:
        """Return the elements of the set `set_name` in ascending order."""
        self._ensure_set_name(set_name)
        return [i for i in range(len(self._up)) if self.find(i) == set_name]

    def get_set_names(self) -> list[int]:
        """Return the names of all sets in ascending order."""
        return [i for i, value in enumerate(self._up) if value < 0]

    def _ensure_valid_element(self, x: int) -> None:
        if not isinstance(x, int) or not 0 <= x < len(self._up):
            raise ValueError(f"Invalid element {x!r}, must be in [0, {len(self._up)})")

    def _ensure_set_name(self, x: int) -> None:
        self._ensure_valid_element(x)
        if self._up[x] >= 0:
            raise ValueError(f"Element {x!r} is not the name of a set")
