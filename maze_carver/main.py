import argparse
import sys
import os
import io
import logging
import cProfile
import pstats

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.errors import EntropyError, InitializationError
from maze_carver.settings import Settings

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser():
    defaults = Settings()
    parser = argparse.ArgumentParser(description="Maze Carver: watch randomized DFS carve a perfect maze")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--wall-size", type=int, default=defaults.wall_size, help="Cell size in pixels")
    parser.add_argument("--width", type=int, default=defaults.width, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Target frame rate")
    parser.add_argument("--steps-per-frame", type=int, default=defaults.steps_per_frame, help="Generator steps per frame")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed (default: cryptographic RNG)")
    parser.add_argument("--headless", action="store_true", help="Generate without a window and print stats")
    parser.add_argument("--profile", action="store_true", help="Profile the run and log the hottest calls")
    return parser

def parse_settings(parser, argv=None):
    args = parser.parse_args(argv)
    settings = Settings(
        wall_size=args.wall_size,
        width=args.width,
        height=args.height,
        fps=args.fps,
        steps_per_frame=args.steps_per_frame,
        seed=args.seed,
    )
    try:
        settings.validate()
    except ValueError as e:
        parser.error(str(e))
    return args, settings

def run_profiled(fn, logger, limit: int = 15):
    """Runs fn under cProfile and logs the top entries by cumulative time."""
    profiler = cProfile.Profile()
    profiler.enable()
    try:
        return fn()
    finally:
        profiler.disable()
        out = io.StringIO()
        pstats.Stats(profiler, stream=out).sort_stats("cumulative").print_stats(limit)
        logger.info(f"Profile (top {limit} by cumulative time):\n{out.getvalue()}")

def main(argv=None) -> int:
    parser = build_parser()
    args, settings = parse_settings(parser, argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    from maze_carver.core.grid import Grid
    from maze_carver.core.rng import make_rng
    from maze_carver.algo.dfs import RecursiveBacktracker

    grid = Grid(settings.cols, settings.rows)
    rng = make_rng(settings.seed)
    generator = RecursiveBacktracker(grid, rng=rng, stack_capacity=settings.stack_capacity)
    source = "seeded" if settings.seed is not None else "cryptographic"
    logger.info(f"Carving {grid.cols}x{grid.rows} maze with {source} RNG...")

    def run():
        if args.headless:
            logger.info("Headless generation...")
            generator.run_all()
            from maze_carver.core.stats import calculate_stats
            logger.info(f"Generation complete in {generator.step_count} steps")
            logger.info(f"Stats: {calculate_stats(grid)}")
            print("Done.")
        else:
            from maze_carver.viz.renderer import Renderer
            renderer = Renderer(grid, generator=generator, settings=settings)
            renderer.init_window()
            renderer.run_loop()

    try:
        if args.profile:
            run_profiled(run, logger)
        else:
            run()
    except InitializationError as e:
        logger.error(f"Could not start the window: {e}")
        return 1
    except EntropyError as e:
        logger.error(f"Randomness source failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
