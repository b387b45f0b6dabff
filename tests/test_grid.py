import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.errors import InvalidOrder, HilbertError
from hilbert_engine.core.grid import CurveGrid, create_grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        grid = create_grid(3)
        self.assertEqual(grid.order, 3)
        self.assertEqual(grid.side_length, 8)
        self.assertEqual(len(grid.cells), 64)
        for val in grid.cells:
            self.assertEqual(val, CellShape.NONE)
        self.assertEqual(grid.count_filled(), 0)
        self.assertFalse(grid.is_complete())

    def test_order_bounds(self):
        for order in (0, 16, -1):
            with self.assertRaises(InvalidOrder):
                create_grid(order)
        self.assertEqual(create_grid(1).side_length, 2)

    def test_invalid_order_types(self):
        for order in (2.0, "4", True, None):
            with self.assertRaises(InvalidOrder):
                CurveGrid(order)

    def test_validate_order(self):
        CurveGrid.validate_order(1)
        CurveGrid.validate_order(15)
        for order in (0, 16, 3.0):
            with self.assertRaises(InvalidOrder):
                CurveGrid.validate_order(order)

    def test_invalid_order_is_value_error(self):
        with self.assertRaises(ValueError):
            create_grid(0)
        with self.assertRaises(HilbertError):
            create_grid(16)

    def test_coordinates(self):
        grid = create_grid(2)
        self.assertEqual(grid.get_index(2, 3), 14) # 3 * 4 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 4)

    def test_set_and_get_shape(self):
        grid = create_grid(1)
        grid.set_shape(1, 0, CellShape.DOWN_LEFT)
        self.assertEqual(grid.get_shape(1, 0), CellShape.DOWN_LEFT)
        self.assertIsInstance(grid.get_shape(1, 0), CellShape)
        self.assertEqual(grid.as_array()[0, 1], CellShape.DOWN_LEFT)
        self.assertEqual(grid.count_filled(), 1)

        cells = list(grid.iter_cells())
        self.assertEqual(cells[1], (1, 0, CellShape.DOWN_LEFT))
        self.assertEqual(cells[2], (0, 1, CellShape.NONE))

    def test_is_complete(self):
        grid = create_grid(1)
        for x in range(2):
            for y in range(2):
                grid.set_shape(x, y, CellShape.VERTICAL)
        self.assertTrue(grid.is_complete())

    def test_memory_sanity(self):
        # Top order is 2^15 x 2^15 = ~1 billion one-byte cells
        grid = create_grid(15)
        self.assertEqual(grid.side_length, 32768)
        mb = grid.cells.nbytes / (1024 * 1024)
        self.assertEqual(mb, 1024.0)
        self.assertEqual(grid.get_shape(32767, 32767), CellShape.NONE)

if __name__ == '__main__':
    unittest.main()
