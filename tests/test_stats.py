import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.grid import create_grid
from hilbert_engine.core.stats import CurveStats
from hilbert_engine.algo.hilbert import HilbertEngine

class TestCurveStats(unittest.TestCase):
    def test_empty_grid(self):
        stats = CurveStats.calculate_stats(create_grid(2))
        self.assertEqual(stats["cells"], 16)
        self.assertEqual(stats["filled"], 0)
        self.assertEqual(stats["unvisited"], 16)
        self.assertEqual(stats["fill_percent"], 0)

    def test_order_one(self):
        grid = create_grid(1)
        HilbertEngine(grid).complete()
        stats = CurveStats.calculate_stats(grid)

        self.assertEqual(stats["filled"], 4)
        self.assertEqual(stats["fill_percent"], 100)
        self.assertEqual(stats["vertical"], 1)
        self.assertEqual(stats["horizontal"], 0)
        self.assertEqual(stats["up_right"], 1)
        self.assertEqual(stats["down_right"], 1)
        self.assertEqual(stats["down_left"], 1)
        self.assertEqual(stats["up_left"], 0)

    def test_shape_counts_sum(self):
        grid = create_grid(5)
        HilbertEngine(grid).complete()
        stats = CurveStats.calculate_stats(grid)

        shape_total = sum(stats[s.name.lower()] for s in CellShape if s is not CellShape.NONE)
        self.assertEqual(shape_total, stats["cells"])
        self.assertEqual(stats["unvisited"], 0)

if __name__ == '__main__':
    unittest.main()
