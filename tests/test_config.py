import argparse
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hilbert_engine.core.config import RunConfig
from hilbert_engine.core.errors import InvalidOrder
from hilbert_engine.main import build_parser

class TestRunConfig(unittest.TestCase):
    def test_defaults(self):
        config = RunConfig()
        config.validate()
        self.assertEqual(config.side_length, 64)
        self.assertEqual(config.canvas_size, 512) # 64 cells * 4px * 2
        self.assertEqual(config.window_size, (512, 512))

    def test_window_capped(self):
        config = RunConfig(order=8, scale=2, max_window=512)
        self.assertEqual(config.tile_px, 2)
        self.assertEqual(config.canvas_size, 512)
        self.assertEqual(config.window_size, (512, 512))
        self.assertEqual(config.cell_origin(255, 1), (510, 2))

    def test_more_cells_than_pixels(self):
        config = RunConfig(order=11, scale=2, max_window=512)
        self.assertEqual(config.tile_px, 1)
        self.assertEqual(config.canvas_size, 512)
        self.assertEqual(config.cell_origin(2047, 4), (511, 1))

    def test_uneven_window(self):
        config = RunConfig(order=6, scale=2, max_window=500)
        self.assertEqual(config.tile_px, 7)
        self.assertEqual(config.canvas_size, 448)
        self.assertEqual(config.cell_origin(3, 2), (21, 14))

    def test_small_canvas_not_stretched(self):
        config = RunConfig(order=2, scale=3)
        self.assertEqual(config.window_size, (48, 48))

    def test_invalid_values(self):
        with self.assertRaises(InvalidOrder):
            RunConfig(order=16).validate()
        with self.assertRaises(ValueError):
            RunConfig(scale=0).validate()
        with self.assertRaises(ValueError):
            RunConfig(steps_per_frame=0).validate()

    def test_from_cli_args(self):
        args = build_parser().parse_args(["generate", "--order", "4", "--scale", "3", "--steps-per-frame", "8"])
        config = RunConfig.from_args(args)
        self.assertEqual(config.order, 4)
        self.assertEqual(config.scale, 3)
        self.assertEqual(config.steps_per_frame, 8)
        self.assertEqual(config.fps, 100)

    def test_from_cli_args_rejects_order(self):
        args = build_parser().parse_args(["generate", "--order", "0"])
        with self.assertRaises(InvalidOrder):
            RunConfig.from_args(args)

if __name__ == '__main__':
    unittest.main()
