import logging
from enum import IntEnum
from typing import FrozenSet

from hilbert_engine.core.direction import Direction

logger = logging.getLogger(__name__)

class CellShape(IntEnum):
    # Value - 1 is the sprite sheet slot
    NONE       = 0
    VERTICAL   = 1
    HORIZONTAL = 2
    UP_RIGHT   = 3
    DOWN_RIGHT = 4
    DOWN_LEFT  = 5
    UP_LEFT    = 6

# Sides of the cell the path passes through
ARMS = {
    CellShape.NONE:       frozenset(),
    CellShape.VERTICAL:   frozenset((Direction.UP, Direction.DOWN)),
    CellShape.HORIZONTAL: frozenset((Direction.LEFT, Direction.RIGHT)),
    CellShape.UP_RIGHT:   frozenset((Direction.UP, Direction.RIGHT)),
    CellShape.DOWN_RIGHT: frozenset((Direction.DOWN, Direction.RIGHT)),
    CellShape.DOWN_LEFT:  frozenset((Direction.DOWN, Direction.LEFT)),
    CellShape.UP_LEFT:    frozenset((Direction.UP, Direction.LEFT)),
}

_SHAPE_BY_ARMS = {arms: shape for shape, arms in ARMS.items() if arms}

def arms(shape: CellShape) -> FrozenSet[Direction]:
    return ARMS[CellShape(shape)]

def classify(from_dir: Direction, to_dir: Direction) -> CellShape:
    """
    Maps the side a path enters through and the side it leaves through
    to the shape drawn in that cell.
    The pair is unordered, so (UP, DOWN) and (DOWN, UP) are both VERTICAL.
    Entering and leaving through the same side is not a valid path; it
    logs a warning and yields NONE.
    """
    shape = _SHAPE_BY_ARMS.get(frozenset((from_dir, to_dir)))
    if shape is None:
        logger.warning("Unrecognized direction combination: %d -> %d", from_dir, to_dir)
        return CellShape.NONE
    return shape
