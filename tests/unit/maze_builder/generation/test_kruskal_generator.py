import random

import pytest

from maze_builder.generation.disjoint_sets import DisjointSets
from maze_builder.generation.generators import GENERATORS_MAP, MazeGenerator, get_maze
from maze_builder.generation.grid import Edge, build_edge_universe
from maze_builder.generation.maze import Maze

GRID_SIZES: list[tuple[int, int]] = [(2, 2), (2, 3), (5, 2), (4, 4), (9, 6), (20, 15)]


def _assert_spanning_tree(removed: list[Edge], n_cells: int):
    assert len(removed) == n_cells - 1
    ds = DisjointSets(n_cells)
    for edge in removed:
        a, b = ds.find(edge.x), ds.find(edge.y)
        # an edge inside one component would close a cycle
        assert a != b
        ds.union(a, b)
    assert ds.num_sets() == 1


def test_2x2_leaves_one_wall(rng):
    universe = build_edge_universe(2, 2)
    walls = MazeGenerator.generate(universe, 2, 2, rng=rng)

    assert len(universe) == 4
    assert len(walls) == 1
    assert walls[0] in universe


@pytest.mark.parametrize("width, height", GRID_SIZES)
def test_removed_walls_form_spanning_tree(width, height):
    universe = build_edge_universe(width, height)
    walls = MazeGenerator.generate(universe, width, height, rng=random.Random(7))
    n_cells = width * height

    assert len(walls) == len(universe) - (n_cells - 1)
    assert len(set(walls)) == len(walls)
    assert set(walls) <= set(universe)

    removed = [e for e in universe if e not in set(walls)]
    _assert_spanning_tree(removed, n_cells)


@pytest.mark.parametrize("seed", range(10))
def test_same_seed_same_maze(seed):
    universe = build_edge_universe(8, 5)
    walls_a = MazeGenerator.generate(universe, 8, 5, rng=random.Random(seed))
    walls_b = MazeGenerator.generate(universe, 8, 5, rng=random.Random(seed))

    assert walls_a == walls_b


def test_different_seeds_differ():
    universe = build_edge_universe(10, 10)
    mazes = {
        tuple(MazeGenerator.generate(universe, 10, 10, rng=random.Random(seed)))
        for seed in range(5)
    }
    assert len(mazes) > 1


def test_universe_is_not_mutated(rng):
    universe = build_edge_universe(4, 3)
    original = list(universe)
    MazeGenerator.generate(universe, 4, 3, rng=rng)

    assert universe == original


def test_generate_without_rng():
    universe = build_edge_universe(3, 3)
    walls = MazeGenerator.generate(universe, 3, 3)

    assert len(walls) == len(universe) - 8


def test_gen_kruskal():
    maze: Maze = MazeGenerator.gen_kruskal(6, 4, seed=3)

    assert maze.width == 6
    assert maze.height == 4
    assert maze.is_perfect()
    assert maze.generation_meta["func_name"] == "gen_kruskal"
    assert maze.generation_meta["seed"] == 3
    assert maze == MazeGenerator.gen_kruskal(6, 4, seed=3)


def test_get_maze():
    for key in GENERATORS_MAP:
        maze: Maze = get_maze(key, 3, 3, maze_ctor_kwargs=dict(seed=0))
        assert maze.is_perfect()


def test_get_maze_unknown():
    with pytest.raises(ValueError):
        get_maze("gen_nonexistent", 3, 3)


class ScriptedRandom:
    """random source returning a fixed list of indices from `randrange`"""

    def __init__(self, indices: list[int]):
        self.indices = list(indices)

    def randrange(self, n: int) -> int:
        idx = self.indices.pop(0)
        assert 0 <= idx < n
        return idx


def test_walls_in_draw_order_then_leftover_pool():
    # 3x2 grid, universe in order:
    # (0,1) (0,3) (1,2) (1,4) (2,5) (3,4) (4,5)
    # draws: (0,1) (0,3) (1,4) merge, then (3,4) is already connected and
    # stays a wall, then (1,2) (2,5) merge, leaving (4,5) undrawn
    universe = build_edge_universe(3, 2)
    walls = MazeGenerator.generate(universe, 3, 2, rng=ScriptedRandom([0, 1, 3, 1, 2, 1]))

    assert walls == [Edge(3, 4), Edge(4, 5)]


def test_2x2_scripted_draws():
    universe = build_edge_universe(2, 2)
    rng = ScriptedRandom([0, 0, 1])
    walls = MazeGenerator.generate(universe, 2, 2, rng=rng)

    assert walls == [Edge(1, 3)]
    assert rng.indices == []


def test_walls_keep_generation_order():
    universe = build_edge_universe(6, 6)
    walls = MazeGenerator.generate(universe, 6, 6, rng=random.Random(3))

    assert walls != sorted(walls)
