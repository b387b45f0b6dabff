from hilbert_engine.core.cells import CellShape, arms
from hilbert_engine.core.direction import Direction
from hilbert_engine.core.grid import CurveGrid

GLYPHS = {
    CellShape.NONE:       '·',
    CellShape.VERTICAL:   '│',
    CellShape.HORIZONTAL: '─',
    CellShape.UP_RIGHT:   '└',
    CellShape.DOWN_RIGHT: '┌',
    CellShape.DOWN_LEFT:  '┐',
    CellShape.UP_LEFT:    '┘',
}

def render_ascii(grid: CurveGrid) -> str:
    """
    Text picture of the grid, one line per row.
    Each cell is a glyph plus a connector column so horizontal runs stay joined.
    """
    lines = []
    side = grid.side_length
    for y in range(side):
        row = []
        for x in range(side):
            shape = grid.get_shape(x, y)
            row.append(GLYPHS[shape])
            row.append('─' if Direction.RIGHT in arms(shape) else ' ')
        lines.append(''.join(row).rstrip())
    return '\n'.join(lines)
