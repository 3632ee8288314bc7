from collections import deque
from functools import cached_property

import numpy as np
from muutils.json_serialize import (
    SerializableDataclass,
    serializable_dataclass,
    serializable_field,
)

from maze_builder.generation.constants import ASCII_CHARS, CellIndex, ConnectionList
from maze_builder.generation.grid import (
    Edge,
    build_edge_universe,
    cell_to_coord,
    is_on_bottom,
    is_on_right,
)


@serializable_dataclass(
    frozen=True,
    kw_only=True,
    properties_to_serialize=["num_cells"],
)
class Maze(SerializableDataclass):
    """rectangular maze, stored as the walls left standing between adjacent cells

    `walls` holds the edges of the grid that are still walls, in the order the
    generator produced them. Every other edge of the grid is an open passage,
    and in a perfect maze those passages form a spanning tree of the cells.

    The outer boundary is always closed, except for the entrance at cell `0`
    and the exit at the last cell, which only matter for rendering.
    """

    width: int
    height: int
    walls: list[Edge] = serializable_field(
        serialization_fn=lambda walls: [[e.x, e.y] for e in walls],
        loading_fn=lambda data: [Edge(x, y) for x, y in data["walls"]],
    )
    generation_meta: dict | None = serializable_field(default=None, compare=False)

    def __hash__(self) -> int:
        return hash((self.width, self.height, tuple(self.walls)))

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    @cached_property
    def _wall_set(self) -> frozenset[Edge]:
        return frozenset(self.walls)

    @property
    def edge_universe(self) -> list[Edge]:
        return build_edge_universe(self.width, self.height)

    @property
    def removed_walls(self) -> list[Edge]:
        """edges of the grid that are open passages, in row-major order"""
        return [e for e in self.edge_universe if e not in self._wall_set]

    def is_adjacent(self, a: CellIndex, b: CellIndex) -> bool:
        """returns whether two cells are grid neighbors"""
        edge: Edge = Edge(a, b)
        if not (0 <= edge.x and edge.y < self.num_cells):
            return False
        if edge.y - edge.x == self.width:
            return True
        return edge.y - edge.x == 1 and not is_on_right(edge.x, self.width)

    def has_wall(self, a: CellIndex, b: CellIndex) -> bool:
        """returns whether the wall between two adjacent cells is standing"""
        if not self.is_adjacent(a, b):
            raise ValueError(f"cells {a!r} and {b!r} are not adjacent")
        return Edge(a, b) in self._wall_set

    def get_cell_neighbors(self, cell: CellIndex) -> list[CellIndex]:
        """cells reachable from `cell` in one step, without crossing a wall"""
        candidates: list[CellIndex] = [
            cell - self.width,
            cell + self.width,
            cell - 1,
            cell + 1,
        ]
        return [
            n
            for n in candidates
            if self.is_adjacent(cell, n) and Edge(cell, n) not in self._wall_set
        ]

    def get_connected_component(self, start: CellIndex = 0) -> list[CellIndex]:
        """all cells reachable from `start`, sorted"""
        if not 0 <= start < self.num_cells:
            raise ValueError(f"Invalid cell {start!r}")
        visited: set[CellIndex] = {start}
        queue: deque[CellIndex] = deque([start])
        while queue:
            cell: CellIndex = queue.popleft()
            for neighbor in self.get_cell_neighbors(cell):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return sorted(visited)

    def is_perfect(self) -> bool:
        """whether the open passages form a spanning tree: connected and acyclic"""
        # a connected graph on n vertices with n - 1 edges is a tree
        return (
            len(self.removed_walls) == self.num_cells - 1
            and len(self.get_connected_component()) == self.num_cells
        )

    # ============================================================
    # conversions
    # ============================================================
    def as_connection_list(self) -> ConnectionList:
        """boolean array of shape `(2, height, width)`

        `[0, row, col]` is True if the cell has an open passage downwards, and
        `[1, row, col]` is True if it has an open passage to the right. The
        bottom row of the first plane and the right column of the second plane
        are always False.
        """
        connection_list: ConnectionList = np.zeros(
            (2, self.height, self.width), dtype=np.bool_
        )
        for edge in self.removed_walls:
            row, col = cell_to_coord(edge.x, self.width)
            connection_list[1 if edge.is_horizontal() else 0, row, col] = True
        return connection_list

    def as_ascii(self) -> str:
        """return an ASCII drawing of the maze, entering at the top left and leaving at the bottom right"""
        c: dict[str, str] = ASCII_CHARS
        lines: list[str] = [c["margin"] + c["corner"] + c["wall_horizontal"] * self.width]
        for row in range(self.height):
            vertical: str = (
                c["start_label"] if row == 0 else c["margin"] + c["border"]
            )
            horizontal: str = c["margin"] + c["corner"]
            for col in range(self.width):
                cell: CellIndex = row * self.width + col

                if cell + 1 == self.num_cells:
                    vertical += c["finish_label"]
                elif is_on_right(cell, self.width) or Edge(cell, cell + 1) in self._wall_set:
                    vertical += c["wall_vertical"]
                else:
                    vertical += c["open_vertical"]

                if (
                    is_on_bottom(cell, self.width, self.height)
                    or Edge(cell, cell + self.width) in self._wall_set
                ):
                    horizontal += c["wall_horizontal"]
                else:
                    horizontal += c["open_horizontal"]

            lines.append(vertical)
            lines.append(horizontal)

        return "\n".join(lines)
