import logging

import pygame

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.config import RunConfig
from hilbert_engine.core.grid import CurveGrid
from hilbert_engine.viz.recorder import VideoRecorder
from hilbert_engine.viz.tiles import TileSet

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_HUD = (255, 255, 255)

    def __init__(self, grid: CurveGrid, generator=None, config: RunConfig = None, record=False):
        self.grid = grid
        self.generator = generator
        self.config = config or RunConfig(order=grid.order)

        # Canvas is capped at the window size; segments accumulate here
        self.tiles = TileSet(self.config.scale, bg=self.COLOR_BG, tile_px=self.config.tile_px)
        canvas_px = self.config.canvas_size
        self.canvas = pygame.Surface((canvas_px, canvas_px), 0, 32)
        self.canvas.fill(self.COLOR_BG)

        if self.generator is not None:
            self.generator.subscribe(self.draw_segment)

        self.recorder = VideoRecorder(active=record, prefix=f"hilbert_order{grid.order}")

        self.screen_width, self.screen_height = self.config.window_size
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_iter = None
        self.gen_finished = False

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Hilbert Curve - order {self.grid.order}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 14)

        if self.tiles.tile_px < self.config.scale * 4:
            logger.info(f"Cells drawn at {self.tiles.tile_px}px to fit a {self.screen_width}px window")

    def draw_segment(self, x: int, y: int, shape: CellShape):
        """Segment listener: blits the tile for one classified cell."""
        if shape == CellShape.NONE:
            return
        self.canvas.blit(self.tiles.get(shape), self.config.cell_origin(x, y))

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                self.running = False

    def step_generator(self) -> bool:
        """Advances the generator one frame's worth. Returns True if it finished during this call."""
        if self.gen_iter is None or self.gen_finished:
            return False
        try:
            for _ in range(self.config.steps_per_frame):
                next(self.gen_iter)
        except StopIteration:
            self.gen_finished = True
            logger.info(f"Curve complete: {self.generator.segments} segments")
            return True
        return False

    def draw_hud(self):
        segments = self.generator.segments if self.generator else 0
        total = self.grid.side_length * self.grid.side_length
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Segments: {segments:,}/{total:,}",
            f"Status: {status}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_HUD)
            self.surface.blit(lbl, (6, 6 + i * 16))

    def render_frame(self, show_hud=False):
        self.handle_input()
        just_finished = self.step_generator()

        self.surface.blit(self.canvas, (0, 0))
        if show_hud:
            self.draw_hud()
        pygame.display.flip()

        if self.recorder.active and self.generator is not None:
            self.recorder.capture_frame(self.surface, self.generator.segments)
            if just_finished:
                self.recorder.hold(self.surface)

        self.clock.tick(self.config.fps)

    def run_loop(self, show_hud=False):
        if self.generator is not None:
            self.gen_iter = self.generator.run()

        while self.running:
            self.render_frame(show_hud)

        self.recorder.stop()
        pygame.quit()
