import numpy as np

from hilbert_engine.core.cells import CellShape
from hilbert_engine.core.grid import CurveGrid

class CurveStats:
    @staticmethod
    def calculate_stats(grid: CurveGrid):
        counts = np.bincount(grid.as_array().ravel(), minlength=len(CellShape))

        total = grid.side_length * grid.side_length
        unvisited = int(counts[CellShape.NONE])
        filled = total - unvisited

        stats = {
            "order": grid.order,
            "side_length": grid.side_length,
            "cells": total,
            "filled": filled,
            "unvisited": unvisited,
            "fill_percent": (filled / total) * 100 if total > 0 else 0,
        }
        for shape in CellShape:
            if shape is CellShape.NONE:
                continue
            stats[shape.name.lower()] = int(counts[shape])
        return stats
