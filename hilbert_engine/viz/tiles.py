from typing import Dict, Tuple

import numpy as np
import pygame

from hilbert_engine.core.cells import CellShape, arms
from hilbert_engine.core.config import TILE_SIZE
from hilbert_engine.core.direction import Direction

Color = Tuple[int, int, int]

# Sprite sheet layout (x coord):
#   0: Vertical
#   4: Horizontal
#   8: Up-Right
#  12: Down-Right
#  16: Down-Left
#  20: Up-Left
SHEET_SHAPES = [shape for shape in CellShape if shape is not CellShape.NONE]

# [y, x] slices of a 4x4 tile; the path is 2 pixels wide through the middle
_CENTER = (slice(1, 3), slice(1, 3))
_ARM_SLICES = {
    Direction.UP:    (slice(0, 1), slice(1, 3)),
    Direction.DOWN:  (slice(3, 4), slice(1, 3)),
    Direction.LEFT:  (slice(1, 3), slice(0, 1)),
    Direction.RIGHT: (slice(1, 3), slice(3, 4)),
}

def tile_mask(shape: CellShape) -> np.ndarray:
    """Boolean (TILE_SIZE, TILE_SIZE) mask, indexed [y, x], of the pixels a shape covers."""
    mask = np.zeros((TILE_SIZE, TILE_SIZE), dtype=bool)
    if shape == CellShape.NONE:
        return mask
    mask[_CENTER] = True
    for side in arms(shape):
        mask[_ARM_SLICES[side]] = True
    return mask

def build_sprite_sheet(fg: Color, bg: Color) -> np.ndarray:
    """
    RGB array of all tiles side by side, shaped (width, height, 3)
    the way pygame.surfarray expects.
    """
    sheet = np.empty((TILE_SIZE, TILE_SIZE * len(SHEET_SHAPES), 3), dtype=np.uint8)
    for slot, shape in enumerate(SHEET_SHAPES):
        mask = tile_mask(shape)
        tile = np.where(mask[..., None], np.array(fg, dtype=np.uint8), np.array(bg, dtype=np.uint8))
        sheet[:, slot * TILE_SIZE:(slot + 1) * TILE_SIZE] = tile
    return np.ascontiguousarray(np.transpose(sheet, (1, 0, 2)))

def sprite_rect(shape: CellShape) -> pygame.Rect:
    return pygame.Rect((shape - 1) * TILE_SIZE, 0, TILE_SIZE, TILE_SIZE)

class TileSet:
    COLOR_FG = (230, 230, 230)
    COLOR_BG = (10, 10, 10)

    def __init__(self, scale: int, fg: Color = COLOR_FG, bg: Color = COLOR_BG, tile_px: int = None):
        self.scale = scale
        self.tile_px = tile_px or TILE_SIZE * scale
        self.sheet = pygame.surfarray.make_surface(build_sprite_sheet(fg, bg))
        self.tiles: Dict[CellShape, pygame.Surface] = {}
        for shape in SHEET_SHAPES:
            if self.tile_px < TILE_SIZE:
                # Too small to show the path shape, only that the cell is drawn
                tile = pygame.Surface((self.tile_px, self.tile_px))
                tile.fill(fg)
            else:
                tile = pygame.transform.scale(self.sheet.subsurface(sprite_rect(shape)), (self.tile_px, self.tile_px))
            self.tiles[shape] = tile

    def get(self, shape: CellShape) -> pygame.Surface:
        return self.tiles[shape]
