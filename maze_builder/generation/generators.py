import logging
import random
from typing import Any, Callable

from maze_builder.generation.disjoint_sets import DisjointSets
from maze_builder.generation.grid import Edge, build_edge_universe
from maze_builder.generation.maze import Maze

logger = logging.getLogger(__name__)


class MazeGenerator:
    """namespace for randomized Kruskal maze generation"""

    build_edge_universe = staticmethod(build_edge_universe)

    @staticmethod
    def generate(
        edge_universe: list[Edge],
        width: int,
        height: int,
        rng: random.Random | None = None,
    ) -> list[Edge]:
        """return the walls left standing after a randomized Kruskal run

        algorithm:
        1. Put every cell in its own set
        2. While more than one set remains
                1. Draw an edge uniformly at random from the pool, and remove it
                2. If its cells are in different sets, merge the sets and remove the wall
                3. Otherwise the cells are already connected, so the wall stays
        3. Every edge never drawn also stays as a wall

        The walls that were removed form a spanning tree of the grid, so the
        returned list has `len(edge_universe) - (width * height - 1)` edges.
        `edge_universe` itself is not modified.
        """
        if rng is None:
            rng = random.Random()

        num_cells: int = width * height
        sets: DisjointSets = DisjointSets(num_cells)
        pool: list[Edge] = list(edge_universe)
        walls: list[Edge] = []

        while sets.num_sets() > 1:
            # swap the drawn edge with the last one and pop, so removal is O(1)
            idx: int = rng.randrange(len(pool))
            pool[idx], pool[-1] = pool[-1], pool[idx]
            edge: Edge = pool.pop()

            root_x: int = sets.find(edge.x)
            root_y: int = sets.find(edge.y)
            if root_x != root_y:
                sets.union(root_x, root_y)
            else:
                walls.append(edge)

        walls.extend(pool)

        logger.debug(
            "generated %dx%d maze: %d walls standing, %d removed",
            width,
            height,
            len(walls),
            num_cells - 1,
        )
        return walls

    @staticmethod
    def gen_kruskal(
        width: int,
        height: int,
        seed: int | None = None,
    ) -> Maze:
        """generate a perfect maze of `width` columns and `height` rows using randomized Kruskal"""
        edge_universe: list[Edge] = MazeGenerator.build_edge_universe(width, height)
        walls: list[Edge] = MazeGenerator.generate(
            edge_universe, width, height, rng=random.Random(seed)
        )
        return Maze(
            width=width,
            height=height,
            walls=walls,
            generation_meta=dict(
                func_name="gen_kruskal",
                grid_shape=(height, width),
                seed=seed,
                n_edges=len(edge_universe),
                fully_connected=True,
            ),
        )


GENERATORS_MAP: dict[str, Callable[[int, int, Any], Maze]] = {
    "gen_kruskal": MazeGenerator.gen_kruskal,
}


def get_maze(
    gen_name: str,
    width: int,
    height: int,
    maze_ctor_kwargs: dict | None = None,
) -> Maze:
    if gen_name not in GENERATORS_MAP:
        raise ValueError(
            f"unknown generator {gen_name!r}, expected one of {list(GENERATORS_MAP)}"
        )
    if maze_ctor_kwargs is None:
        maze_ctor_kwargs = dict()
    return GENERATORS_MAP[gen_name](width, height, **maze_ctor_kwargs)
