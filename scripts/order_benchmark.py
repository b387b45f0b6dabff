import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hilbert_engine.core.grid import CurveGrid
from hilbert_engine.core.stats import CurveStats
from hilbert_engine.algo.hilbert import HilbertEngine

def benchmark_order(order: int):
    side = 1 << order
    print(f"\n--- Benchmarking order {order} ({side}x{side}, {side*side/1e6:.2f}M cells) ---")

    start_time = time.time()
    grid = CurveGrid(order)
    print(f"Grid Init: {time.time() - start_time:.4f}s")
    print(f"Memory (Grid Data): ~{len(grid.cells) / (1024 * 1024):.2f} MB")

    engine = HilbertEngine(grid)

    # Step-driven, the way an animation loop would call it
    gen_start = time.time()
    while not engine.advance():
        pass
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    if gen_time > 0:
        print(f"Speed: {engine.segments / gen_time:,.0f} segments/sec")

    stats = CurveStats.calculate_stats(grid)
    print(f"Filled: {stats['filled']:,}/{stats['cells']:,} ({stats['fill_percent']:.1f}%)")

def run_suite():
    orders = [
        4,
        8,
        10,
        # 12,  # 16M cells - slow in pure Python, uncomment if patient
    ]

    for order in orders:
        benchmark_order(order)

if __name__ == "__main__":
    run_suite()
