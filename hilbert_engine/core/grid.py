import logging
from typing import Iterator, Tuple

import numpy as np

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.errors import InvalidOrder, AllocationFailure

logger = logging.getLogger(__name__)

class CurveGrid:
    # side_length^2 stays within a signed 32-bit int at the top order
    MIN_ORDER = 1
    MAX_ORDER = 15

    __slots__ = ('order', 'side_length', 'cells')

    @classmethod
    def validate_order(cls, order):
        if isinstance(order, bool) or not isinstance(order, int) \
                or not (cls.MIN_ORDER <= order <= cls.MAX_ORDER):
            raise InvalidOrder(order, cls.MIN_ORDER, cls.MAX_ORDER)

    def __init__(self, order: int):
        self.validate_order(order)

        self.order = order
        self.side_length = 1 << order
        # One byte per cell, zero-filled (CellShape.NONE).
        try:
            self.cells = np.zeros(self.side_length * self.side_length, dtype=np.uint8)
        except MemoryError as exc:
            logger.error(f"Could not allocate {self.side_length}x{self.side_length} cells")
            raise AllocationFailure(f"Could not allocate cells for order {order}") from exc

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.side_length and 0 <= y < self.side_length:
            return y * self.side_length + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_shape(self, x: int, y: int) -> CellShape:
        return CellShape(int(self.cells[self.get_index(x, y)]))

    def set_shape(self, x: int, y: int, shape: CellShape):
        self.cells[self.get_index(x, y)] = int(shape)

    def count_filled(self) -> int:
        return int(np.count_nonzero(self.cells))

    def is_complete(self) -> bool:
        return bool(self.cells.all())

    def iter_cells(self) -> Iterator[Tuple[int, int, CellShape]]:
        """Yields (x, y, shape) in row-major order."""
        side = self.side_length
        for idx, val in enumerate(self.cells.tolist()):
            yield (idx % side, idx // side, CellShape(val))

    def as_array(self) -> np.ndarray:
        """Zero-copy (side, side) view, indexed [y, x]."""
        return self.cells.reshape(self.side_length, self.side_length)

def create_grid(order: int) -> CurveGrid:
    return CurveGrid(order)
