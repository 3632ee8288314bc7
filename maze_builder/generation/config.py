from muutils.json_serialize import (
    SerializableDataclass,
    serializable_dataclass,
    serializable_field,
)

from maze_builder.generation.constants import MIN_GRID_SIZE, CoordTup
from maze_builder.generation.generators import GENERATORS_MAP, get_maze
from maze_builder.generation.maze import Maze


@serializable_dataclass(kw_only=True, properties_to_serialize=["num_cells"])
class MazeConfig(SerializableDataclass):
    """configuration for building a single maze

    # Parameters

    - `width: int`: number of columns, at least 2
    - `height: int`: number of rows, at least 2
    - `seed: int | None`: seed for the random edge draws. `None` gives a different maze every time
    - `maze_ctor: str`: name of the generator in `GENERATORS_MAP`
    """

    width: int
    height: int
    seed: int | None = serializable_field(default=None)
    maze_ctor: str = serializable_field(default="gen_kruskal")

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < MIN_GRID_SIZE:
                raise ValueError(
                    f"{name} must be at least {MIN_GRID_SIZE}, got {value!r}"
                )
        if self.maze_ctor not in GENERATORS_MAP:
            raise ValueError(
                f"unknown maze_ctor {self.maze_ctor!r}, expected one of {list(GENERATORS_MAP)}"
            )

    @property
    def grid_shape(self) -> CoordTup:
        return (self.height, self.width)

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    def build(self) -> Maze:
        """generate the maze described by this config"""
        return get_maze(
            self.maze_ctor,
            self.width,
            self.height,
            maze_ctor_kwargs=dict(seed=self.seed),
        )
