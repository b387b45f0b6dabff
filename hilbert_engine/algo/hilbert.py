import logging
from typing import List, Optional

from hilbert_engine.core.cells import CellShape, classify
from hilbert_engine.core.direction import Direction, rotate_left, rotate_right, opposite, step
from hilbert_engine.core.errors import AllocationFailure
from hilbert_engine.core.grid import CurveGrid
from hilbert_engine.algo.base import Generator, SegmentCallback
from hilbert_engine.algo.grammar import (
    NON_TERMINALS, START_SYMBOL, SYM_END, SYM_FORWARD, SYM_LEFT, SYM_RIGHT, production,
)

logger = logging.getLogger(__name__)

class Frame:
    """One level of the rewrite stack: a production and the read position in it."""
    __slots__ = ('prod', 'prod_index')

    def __init__(self):
        self.prod: Optional[str] = None
        self.prod_index = 0

    def next_symbol(self) -> str:
        idx = self.prod_index
        self.prod_index += 1
        if idx < len(self.prod):
            return self.prod[idx]
        return SYM_END

    def clear(self):
        self.prod = None
        self.prod_index = 0

class HilbertEngine(Generator):
    """
    Draws a Hilbert curve one segment per advance() call.

    The L-system is interpreted lazily with a fixed stack of `order` frames
    instead of expanding the whole string. A non-terminal is only expanded
    while the stack is shallower than order - 1; at the deepest level it
    is skipped, since no further subdivision is needed there.
    """

    def __init__(self, grid: CurveGrid, on_segment: SegmentCallback = None):
        super().__init__(grid, on_segment=on_segment)

        # Start in the bottom-left corner, arriving from below
        self.x = 0
        self.y = grid.side_length - 1
        self.current_direction = Direction.RIGHT
        self.previous_direction = Direction.DOWN

        try:
            self.frames: List[Frame] = [Frame() for _ in range(grid.order)]
        except MemoryError as exc:
            logger.error("Could not allocate generation state")
            raise AllocationFailure("Could not allocate generation state") from exc
        self.depth = 0

        self.frames[0].prod = production(START_SYMBOL)

        # Per-symbol tracing is too hot to format unconditionally
        self._trace = logger.isEnabledFor(logging.DEBUG)

    @property
    def done(self) -> bool:
        return self.frames[0].prod is None

    def advance(self) -> bool:
        frame = self.frames[self.depth]
        if frame.prod is None:
            return True

        self.step_count += 1
        trace = self._trace
        max_depth = self.grid.order - 1

        # Loop until one action has updated the grid
        while True:
            sym = frame.next_symbol()

            if sym in NON_TERMINALS:
                if self.depth < max_depth:
                    if trace:
                        logger.debug("Graph [%2d]: %s", self.depth, sym)
                    self.depth += 1
                    frame = self.frames[self.depth]
                    frame.prod = production(sym)
                    frame.prod_index = 0
                elif trace:
                    logger.debug("Graph [%2d]: SKIP %s", self.depth, sym)

            elif sym == SYM_END:
                if trace:
                    logger.debug("Graph [%2d]: END", self.depth)
                if self.depth > 0:
                    frame.clear()
                    self.depth -= 1
                    frame = self.frames[self.depth]
                else:
                    # The grammar has no trailing forward, so the last cell
                    # is classified here
                    if trace:
                        logger.debug("Graph [%2d]: DONE", self.depth)
                    self._draw_current_cell()
                    frame.clear()
                    return True

            elif sym == SYM_LEFT:
                if trace:
                    logger.debug("Graph [%2d]: LEFT", self.depth)
                self.current_direction = rotate_left(self.current_direction)

            elif sym == SYM_RIGHT:
                if trace:
                    logger.debug("Graph [%2d]: RIGHT", self.depth)
                self.current_direction = rotate_right(self.current_direction)

            elif sym == SYM_FORWARD:
                if trace:
                    logger.debug("Graph [%2d]: FORWARD from: (%d, %d)", self.depth, self.x, self.y)
                self._draw_current_cell()

                dx, dy = step(self.current_direction)
                self.x += dx
                self.y += dy

                # The curve never crosses itself
                if self.grid.get_shape(self.x, self.y) != CellShape.NONE:
                    logger.warning(f"Graph [{self.depth:2d}]: Non-blank cell at ({self.x},{self.y})")

                self.previous_direction = opposite(self.current_direction)
                return False

            else:
                logger.warning(f"Graph [{self.depth:2d}]: Unknown symbol {sym!r}")

    def _draw_current_cell(self):
        shape = classify(self.previous_direction, self.current_direction)
        self.grid.set_shape(self.x, self.y, shape)
        self.emit(self.x, self.y, shape)

def create_engine(grid: CurveGrid, on_segment: SegmentCallback = None) -> HilbertEngine:
    return HilbertEngine(grid, on_segment=on_segment)
