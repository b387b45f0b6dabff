from abc import ABC, abstractmethod
from typing import Callable, Iterator, List

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.grid import CurveGrid

SegmentCallback = Callable[[int, int, CellShape], None]

class Generator(ABC):
    def __init__(self, grid: CurveGrid, on_segment: SegmentCallback = None):
        self.grid = grid
        self.step_count = 0
        self.segments = 0
        self.listeners: List[SegmentCallback] = []
        if on_segment is not None:
            self.subscribe(on_segment)

    def subscribe(self, callback: SegmentCallback):
        self.listeners.append(callback)

    def emit(self, x: int, y: int, shape: CellShape):
        self.segments += 1
        for callback in self.listeners:
            callback(x, y, shape)

    @abstractmethod
    def advance(self) -> bool:
        """
        Performs at most one grid-mutating action.
        Returns True once generation is finished (and on every call after).
        """
        pass

    def run(self) -> Iterator[str]:
        """
        Iterator form of advance() for frame-driven loops.
        Yields a status string per step and "Done" at the end.
        """
        while not self.advance():
            yield f"Drawing... Segments: {self.segments}"
        yield "Done"

    def complete(self):
        """Runs the generator to completion."""
        while not self.advance():
            pass
