import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import ALGORITHMS, create
from maze_stepper.config import UPDATES_PER_SECOND

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: watch maze generators work one step at a time")
    parser.add_argument("--algorithm", "-a", type=str, default="backtrack", choices=list(ALGORITHMS), help="Generation Algorithm")
    parser.add_argument("--variant", "-v", type=str, default=None, help="Algorithm variant (default depends on the algorithm)")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--columns", type=int, default=None, help="Board columns")
    parser.add_argument("--rows", type=int, default=None, help="Board rows")
    parser.add_argument("--headless", action="store_true", help="Run to completion without a window and print stats")
    parser.add_argument("--updates-per-second", type=float, default=UPDATES_PER_SECOND, help="Viewer update rate")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    try:
        generator = create(args.algorithm, args.variant, seed=args.seed, columns=args.columns, rows=args.rows)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Running {generator.name} (variant {generator.variant}, seed {args.seed})")

    if args.headless:
        from maze_stepper.core.analysis import MazeAnalyzer

        t0 = time.time()
        updates = generator.run_all()
        logger.info(f"Done in {updates} updates ({time.time() - t0:.4f}s)")
        if generator.grid is not None:
            stats = MazeAnalyzer.calculate_stats(generator.grid)
            logger.info(f"Stats: {stats}")
        print("Done.")
        return

    if args.updates_per_second <= 0:
        parser.error("--updates-per-second must be positive")

    from maze_stepper.viz.renderer import Renderer
    renderer = Renderer(generator, updates_per_second=args.updates_per_second)
    renderer.init_window()
    renderer.run_loop()

if __name__ == "__main__":
    main()
