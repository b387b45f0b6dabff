import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'hilbert_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hilbert Engine: step-by-step Hilbert curve renderer")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a Hilbert curve")
    gen_parser.add_argument("--order", type=int, default=6, help="Curve order (1-15)")
    gen_parser.add_argument("--scale", type=int, default=2, help="Pixel multiplier for the 4x4 tiles")
    gen_parser.add_argument("--visual", action="store_true", help="Animate the curve in a window")
    gen_parser.add_argument("--steps-per-frame", type=int, default=1, help="Segments drawn per frame")
    gen_parser.add_argument("--fps", type=int, default=100, help="Frame rate cap")
    gen_parser.add_argument("--max-window", type=int, default=512, help="Largest window side in pixels")
    gen_parser.add_argument("--hud", action="store_true", help="Show progress overlay")
    gen_parser.add_argument("--record", action="store_true", help="Record animation video")
    gen_parser.add_argument("--ascii", action="store_true", help="Print the finished curve as text")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time headless generation per order")
    bench_parser.add_argument("--max-order", type=int, default=10, help="Highest order to time")

    return parser

def run_generate(args, parser, logger):
    from hilbert_engine.core.config import RunConfig
    from hilbert_engine.core.errors import HilbertError
    from hilbert_engine.core.grid import create_grid
    from hilbert_engine.algo.hilbert import create_engine

    try:
        config = RunConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Generating order {config.order} curve ({config.side_length}x{config.side_length} cells)...")

    try:
        grid = create_grid(config.order)
        engine = create_engine(grid)
    except HilbertError as e:
        logger.error(f"Could not set up curve: {e}")
        sys.exit(1)

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from hilbert_engine.viz.renderer import Renderer
        renderer = Renderer(grid, generator=engine, config=config, record=args.record)

        # Auto-Name Recording
        if args.record:
            import datetime
            if not os.path.exists("recordings"):
                os.makedirs("recordings")

            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"hilbert_order{config.order}_s{config.scale}_{ts}.mp4"

            renderer.recorder.output_file = os.path.join("recordings", fname)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.init_window()
        renderer.run_loop(show_hud=args.hud)
    else:
        logger.info("Headless generation...")
        t0 = time.time()
        engine.complete()
        logger.info(f"Generation complete in {time.time() - t0:.4f}s ({engine.segments} segments)")

    from hilbert_engine.core.stats import CurveStats
    stats = CurveStats.calculate_stats(grid)
    logger.info(f"Stats: {stats}")

    if args.ascii:
        from hilbert_engine.viz.ascii import render_ascii
        print(render_ascii(grid))

def run_benchmark(args, parser):
    from hilbert_engine.core.grid import CurveGrid, create_grid
    from hilbert_engine.algo.hilbert import create_engine

    if not (CurveGrid.MIN_ORDER <= args.max_order <= CurveGrid.MAX_ORDER):
        parser.error(f"--max-order must be in [{CurveGrid.MIN_ORDER}, {CurveGrid.MAX_ORDER}]")

    print(f"\n{'ORDER':<6} | {'CELLS':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 50)

    for order in range(1, args.max_order + 1):
        grid = create_grid(order)
        engine = create_engine(grid)

        t_start = time.time()
        engine.complete()
        duration = time.time() - t_start

        cells = grid.side_length * grid.side_length
        rate = cells / duration if duration > 0 else float("inf")
        print(f"{order:<6} | {cells:<12,} | {duration:<10.4f} | {rate:<12,.0f}")

def main():
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("hilbert_engine")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        run_generate(args, parser, logger)
    elif args.command == "benchmark":
        run_benchmark(args, parser)

if __name__ == "__main__":
    main()
