import json
import logging
import time

from maze_builder.generation.config import MazeConfig
from maze_builder.generation.maze import Maze
from maze_builder.logging_config import configure_logging

logger = logging.getLogger(__name__)


# usage: python scripts/build_maze.py --width=10 --height=5 --seed=42 --log_level=DEBUG
def build_maze(
    width: int,
    height: int,
    seed: int | None = None,
    maze_ctor: str = "gen_kruskal",
    as_json: bool = False,
    log_level: str = "INFO",
) -> str:
    configure_logging(log_level)
    cfg: MazeConfig = MazeConfig(
        width=width, height=height, seed=seed, maze_ctor=maze_ctor
    )

    generation_start: float = time.time()
    maze: Maze = cfg.build()
    logger.info(
        f"built {width}x{height} maze in {time.time() - generation_start:.4f}s, {len(maze.walls)} walls standing"
    )

    if as_json:
        return json.dumps(maze.serialize())
    return maze.as_ascii()


if __name__ == "__main__":
    import fire

    fire.Fire(build_maze)
