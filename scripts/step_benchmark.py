import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import ALGORITHMS, create
from maze_stepper.core.analysis import MazeAnalyzer

def benchmark_algorithm(name: str, columns: int, rows: int, seed: int = 42):
    generator = create(name, seed=seed, columns=columns, rows=rows)

    start = time.time()
    updates = generator.run_all()
    duration = time.time() - start

    dead_ends = "-"
    if generator.grid is not None:
        stats = MazeAnalyzer.calculate_stats(generator.grid)
        dead_ends = f"{stats['dead_end_percent']:.1f}%"

    print(f"{generator.name:<32} | {updates:<10,} | {duration:<10.4f} | {dead_ends:<10}")

def run_suite(columns: int = 40, rows: int = 30):
    print(f"\n--- Stepping every algorithm on {columns}x{rows} ---")
    print(f"\n{'ALGORITHM':<32} | {'UPDATES':<10} | {'TIME (s)':<10} | {'DEAD ENDS':<10}")
    print("-" * 72)

    for name in ALGORITHMS:
        benchmark_algorithm(name, columns, rows)

if __name__ == "__main__":
    run_suite()
