from dataclasses import dataclass
from typing import Tuple

from hilbert_engine.core.grid import CurveGrid

TILE_SIZE = 4 # Pixels per cell side before scaling

@dataclass
class RunConfig:
    order: int = 6
    scale: int = 2
    steps_per_frame: int = 1
    fps: int = 100
    max_window: int = 512

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        config = cls(
            order=args.order,
            scale=args.scale,
            steps_per_frame=args.steps_per_frame,
            fps=args.fps,
            max_window=args.max_window,
        )
        config.validate()
        return config

    def validate(self):
        CurveGrid.validate_order(self.order)
        for name in ("scale", "steps_per_frame", "fps", "max_window"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")

    @property
    def side_length(self) -> int:
        return 1 << self.order

    @property
    def tile_px(self) -> int:
        """
        On-screen size of one cell. Tiles shrink (down to a single pixel)
        when the scaled curve would not fit in max_window.
        """
        full = TILE_SIZE * self.scale
        if self.side_length * full <= self.max_window:
            return full
        return max(1, self.max_window // self.side_length)

    @property
    def canvas_size(self) -> int:
        # Past one pixel per cell several cells share a pixel
        return min(self.side_length * self.tile_px, self.max_window)

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.canvas_size, self.canvas_size

    def cell_origin(self, x: int, y: int) -> Tuple[int, int]:
        """Top-left canvas pixel of grid cell (x, y)."""
        canvas, side = self.canvas_size, self.side_length
        return x * canvas // side, y * canvas // side
