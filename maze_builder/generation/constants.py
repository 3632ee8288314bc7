import numpy as np
from jaxtyping import Bool

CellIndex = int
CoordTup = tuple[int, int]

# first plane holds downward connections, second plane rightward connections
ConnectionList = Bool[np.ndarray, "lattice_dim y x"]

ASCII_CHARS: dict[str, str] = dict(
    margin="     ",
    start_label="start ",
    finish_label="  finish",
    corner="+",
    border="|",
    wall_vertical=" |",
    wall_horizontal="-+",
    open_vertical="  ",
    open_horizontal=" +",
)

MIN_GRID_SIZE: int = 2
