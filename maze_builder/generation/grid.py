"""Cells, edges and the edge universe of a rectangular grid.

Cells are numbered row-major from `0` to `width * height - 1`, so cell `i` sits
in row `i // width` and column `i % width`. Its right neighbor is `i + 1` and
its down neighbor is `i + width`.
"""

from dataclasses import dataclass
from typing import Iterator

from maze_builder.generation.constants import CellIndex, CoordTup


@dataclass(frozen=True, order=True)
class Edge:
    """unordered pair of cell indices, stored with `x < y`

    `Edge(3, 2) == Edge(2, 3)`, since the constructor swaps the endpoints when needed.
    """

    x: CellIndex
    y: CellIndex

    def __post_init__(self) -> None:
        if self.y < self.x:
            x, y = self.y, self.x
            object.__setattr__(self, "x", x)
            object.__setattr__(self, "y", y)

    def __iter__(self) -> Iterator[CellIndex]:
        yield self.x
        yield self.y

    def is_horizontal(self) -> bool:
        """whether this edge joins a cell to its right neighbor"""
        return self.y - self.x == 1


def is_on_right(cell: CellIndex, width: int) -> bool:
    """return True if the cell is in the rightmost column"""
    return (cell + 1) % width == 0


def is_on_bottom(cell: CellIndex, width: int, height: int) -> bool:
    """return True if the cell is in the bottom row"""
    return cell >= width * height - width


def cell_to_coord(cell: CellIndex, width: int) -> CoordTup:
    """convert a cell index to a `(row, column)` tuple"""
    return divmod(cell, width)


def coord_to_cell(coord: CoordTup, width: int) -> CellIndex:
    """convert a `(row, column)` tuple to a cell index"""
    row, column = coord
    return row * width + column


def build_edge_universe(width: int, height: int) -> list[Edge]:
    """list every edge between adjacent cells, in row-major order

    for each cell, the edge to its right neighbor (if any) comes before the
    edge to its down neighbor (if any). The result has
    `2 * width * height - width - height` edges.
    """
    edges: list[Edge] = []
    for cell in range(width * height):
        if not is_on_right(cell, width):
            edges.append(Edge(cell, cell + 1))
        if not is_on_bottom(cell, width, height):
            edges.append(Edge(cell, cell + width))
    return edges
