from enum import IntEnum
from typing import Tuple

class Direction(IntEnum):
    # Cyclic order matters: rotations are +-1 mod NUM_DIRS
    RIGHT = 0
    DOWN  = 1
    LEFT  = 2
    UP    = 3

NUM_DIRS = 4

# y grows downward
DX = {Direction.RIGHT: 1, Direction.DOWN: 0, Direction.LEFT: -1, Direction.UP: 0}
DY = {Direction.RIGHT: 0, Direction.DOWN: 1, Direction.LEFT: 0, Direction.UP: -1}

def rotate_left(d: Direction) -> Direction:
    return Direction((d - 1 + NUM_DIRS) % NUM_DIRS)

def rotate_right(d: Direction) -> Direction:
    return Direction((d + 1) % NUM_DIRS)

def opposite(d: Direction) -> Direction:
    return Direction((d + 2) % NUM_DIRS)

def step(d: Direction) -> Tuple[int, int]:
    """Unit move (dx, dy) for one cell in direction d."""
    return DX[d], DY[d]
