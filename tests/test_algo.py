import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.base import Phase
from maze_stepper.algo.registry import ALGORITHMS, create
from maze_stepper.algo.aldous_broder import AldousBroder
from maze_stepper.algo.binarytree import BinaryTree
from maze_stepper.algo.dfs import ParallelBacktracker
from maze_stepper.algo.eller import EllersAlgorithm
from maze_stepper.algo.houston import Houston
from maze_stepper.algo.kruskal import KruskalsAlgorithm
from maze_stepper.algo.origin_shift import OriginShift
from maze_stepper.algo.penrose import PenroseTiling
from maze_stepper.algo.sidewinder import Sidewinder
from maze_stepper.algo.wilson import WilsonsAlgorithm
from maze_stepper.config import MAX_TILES
from maze_stepper.core.analysis import MazeAnalyzer
from maze_stepper.core.grid import Grid
from maze_stepper.core.hex_grid import HexGrid

HEX_KEYS = ("hexparallel", "hexblobby")
MAZE_KEYS = [key for key in ALGORITHMS if key != "penrose"]

# Every variant the algorithms understand, besides the defaults
EXTRA_VARIANTS = [
    ("parallel", "6"),
    ("hexparallel", "1"),
    ("wilson", "slow"),
    ("aldousbroder", "slow"),
    ("growingtree", "middle"),
    ("growingtree", "oldest"),
    ("growingtree", "random"),
    ("bintree", "ordered:SouthEast"),
    ("bintree", "random:NorthEast"),
    ("bintree", "ordered:SouthWest"),
    ("sidewinder", "hard"),
    ("originshift", "2"),
]

def build(key, variant=None, seed=7):
    if key in HEX_KEYS:
        return create(key, variant, seed=seed, columns=12, rows=7)
    return create(key, variant, seed=seed, columns=8, rows=6)

class RecordingPainter:
    """Painter that only remembers what it was asked to draw."""
    def __init__(self):
        self.calls = []

    def board(self, grid):
        self.calls.append(("board", grid))

    def cell(self, x, y, color, inset=0.0):
        self.calls.append(("cell", x, y))

    def band(self, x, y, width, height, color):
        self.calls.append(("band", x, y, width, height))

    def arrow(self, x, y, dir_bit, color):
        self.calls.append(("arrow", x, y, dir_bit))

    def path(self, cells):
        self.calls.append(("path", list(cells)))

    def triangle(self, points, color):
        self.calls.append(("triangle", tuple(points)))

    def names(self):
        return [call[0] for call in self.calls]

class TestGeneratorContract(unittest.TestCase):
    def test_every_maze_is_perfect(self):
        for key in MAZE_KEYS:
            with self.subTest(algorithm=key):
                algo = build(key)
                algo.run_all(max_updates=100_000)
                self.assertTrue(algo.is_done)
                self.assertEqual(algo.phase, Phase.DONE)
                self.assertTrue(MazeAnalyzer.is_symmetric(algo.grid))
                self.assertTrue(MazeAnalyzer.is_perfect(algo.grid), f"{key} left cycles or islands")

    def test_every_variant_is_perfect(self):
        for key, variant in EXTRA_VARIANTS:
            with self.subTest(algorithm=key, variant=variant):
                algo = build(key, variant)
                algo.run_all(max_updates=100_000)
                self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))

    def test_symmetric_after_every_update(self):
        for key in MAZE_KEYS:
            with self.subTest(algorithm=key):
                algo = build(key, seed=3)
                for _ in algo.run():
                    self.assertTrue(MazeAnalyzer.is_symmetric(algo.grid))

    def test_hex_boards(self):
        for key in HEX_KEYS:
            with self.subTest(algorithm=key):
                algo = build(key)
                self.assertIsInstance(algo.grid, HexGrid)
                algo.run_all()
                # Hex boards are not playable.
                self.assertEqual(algo.path, [])
                self.assertFalse(algo.move_to((5, 3)))

    def test_default_board_size(self):
        self.assertEqual((create("prim").grid.width, create("prim").grid.height), (40, 30))
        hex_grid = create("hexblobby").grid
        self.assertEqual((hex_grid.width, hex_grid.height), (40, 19))

    def test_phases(self):
        algo = build("kruskal")
        self.assertEqual(algo.phase, Phase.SETUP)
        algo.update()
        self.assertEqual(algo.phase, Phase.RUNNING)
        algo.run_all()
        self.assertEqual(algo.phase, Phase.DONE)

    def test_update_after_done_is_noop(self):
        for key in ALGORITHMS:
            with self.subTest(algorithm=key):
                algo = build(key)
                algo.run_all()
                steps = algo.step_count
                snapshot = algo.grid.copy() if algo.grid is not None else None
                algo.update()
                algo.update()
                self.assertEqual(algo.step_count, steps)
                self.assertEqual(algo.grid, snapshot)
                self.assertTrue(algo.is_done)

    def test_run_all_cap(self):
        algo = build("kruskal")
        with self.assertRaises(RuntimeError):
            algo.run_all(max_updates=3)
        self.assertEqual(algo.step_count, 3)

    def test_run_all_counts_updates(self):
        algo = build("prim")
        count = algo.run_all()
        self.assertEqual(count, algo.step_count)

    def test_same_seed_same_maze(self):
        for key in MAZE_KEYS:
            with self.subTest(algorithm=key):
                a = build(key, seed=11)
                b = build(key, seed=11)
                a.run_all()
                b.run_all()
                self.assertEqual(a.grid, b.grid)
                self.assertEqual(a.step_count, b.step_count)

    def test_reinit_discards_everything(self):
        for key in MAZE_KEYS:
            with self.subTest(algorithm=key):
                algo = build(key, seed=5)
                algo.run_all()
                finished = algo.grid.copy()

                algo.reinit()
                self.assertEqual(algo.phase, Phase.SETUP)
                self.assertEqual(algo.step_count, 0)
                self.assertEqual(algo.path, [])
                self.assertEqual(algo.grid, build(key, algo.variant, seed=5).grid)

                # Same seed, same maze.
                algo.run_all()
                self.assertEqual(algo.grid, finished)

    def test_reinit_with_variant(self):
        algo = build("sidewinder")
        algo.update()
        algo.reinit("hard", seed=2)
        self.assertEqual(algo.variant, "hard")
        self.assertEqual(algo.name, "Harder Sidewinder")
        self.assertEqual(algo.seed, 2)
        self.assertEqual(algo.step_count, 0)

    def test_default_variants_round_trip(self):
        for key, (cls, default) in ALGORITHMS.items():
            with self.subTest(algorithm=key):
                algo = build(key)
                self.assertIsInstance(algo, cls)
                self.assertEqual(algo.variant, default)
                again = build(key, algo.variant)
                self.assertEqual(again.variant, algo.variant)

    def test_variants_round_trip(self):
        for key, variant in EXTRA_VARIANTS:
            with self.subTest(algorithm=key, variant=variant):
                self.assertEqual(build(key, variant).variant, variant)

    def test_invalid_variants(self):
        bad = [
            ("parallel", "0"),
            ("parallel", "7"),
            ("hexparallel", "three"),
            ("wilson", "medium"),
            ("growingtree", "Newest"),
            ("bintree", "random:Up"),
            ("bintree", "sometimes:NorthWest"),
            ("sidewinder", "harder"),
            ("originshift", "0"),
            ("originshift", "1.5"),
            ("penrose", "square:3"),
            ("penrose", "kite:-1"),
            ("prim", "fast"),
        ]
        for key, variant in bad:
            with self.subTest(algorithm=key, variant=variant):
                with self.assertRaises(ValueError):
                    build(key, variant)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            create("labyrinth")

    def test_draw_is_pure(self):
        for key in ALGORITHMS:
            with self.subTest(algorithm=key):
                algo = build(key)
                for _ in range(25):
                    algo.update()
                snapshot = algo.grid.copy() if algo.grid is not None else None
                rng_state = algo.rng.getstate()
                state, steps = algo.state, algo.step_count

                painter = RecordingPainter()
                algo.draw(painter)

                self.assertTrue(painter.calls)
                self.assertEqual(algo.grid, snapshot)
                self.assertEqual(algo.rng.getstate(), rng_state)
                self.assertEqual((algo.state, algo.step_count), (state, steps))

class TestPlayablePath(unittest.TestCase):
    def test_path_starts_at_origin(self):
        algo = build("backtrack")
        self.assertEqual(algo.path, [])
        self.assertFalse(algo.move_to((1, 0)))
        algo.run_all()
        self.assertEqual(algo.path, [(0, 0)])

    def test_move_along_passages(self):
        algo = build("backtrack")
        algo.run_all()
        grid = algo.grid

        first = next(iter(grid.get_open_neighbors(0, 0)))
        closed = [(nx, ny) for nx, ny, d in grid.get_neighbors(0, 0) if not grid.has(0, 0, d)]

        self.assertTrue(algo.move_to(first))
        self.assertEqual(algo.path, [(0, 0), first])

        # Walking back to a cell on the path trims it.
        self.assertTrue(algo.move_to((0, 0)))
        self.assertEqual(algo.path, [(0, 0)])

        for cell in closed:
            self.assertFalse(algo.move_to(cell))
        self.assertFalse(algo.move_to((5, 5)))
        self.assertFalse(algo.move_to((-1, 0)))
        self.assertFalse(algo.move_to(None))

    def test_path_is_drawn(self):
        algo = build("prim")
        algo.run_all()
        painter = RecordingPainter()
        algo.draw(painter)
        self.assertEqual(painter.calls[-1], ("path", [(0, 0)]))

class FirstChoiceRandom(random.Random):
    """Always picks the first option, so every carve can be worked out by hand."""
    def choice(self, seq):
        return seq[0]

    def sample(self, population, k):
        return list(population)[:k]

class RecordingGrid(Grid):
    def __init__(self, width, height):
        super().__init__(width, height)
        self.carves = []
        self.update = 0

    def carve(self, x1, y1, dir_bit):
        self.carves.append((self.update, x1, y1, dir_bit))
        super().carve(x1, y1, dir_bit)

class TestBacktracker(unittest.TestCase):
    def test_determinism(self):
        a = ParallelBacktracker(seed=123, columns=5, rows=5)
        b = ParallelBacktracker(seed=123, columns=5, rows=5)
        a.run_all()
        b.run_all()
        self.assertEqual(a.grid, b.grid)
        self.assertEqual(a.name, "Backtrack")

    def test_carve_sequence(self):
        N, E, S, W = Grid.NORTH, Grid.EAST, Grid.SOUTH, Grid.WEST
        algo = ParallelBacktracker(columns=5, rows=5)
        algo.rng = FirstChoiceRandom()
        algo.grid = grid = RecordingGrid(5, 5)
        while not algo.is_done:
            grid.update = algo.step_count + 1
            algo.update()

        # Directions are tried in N, E, S, W order: a serpentine east, down the
        # right edge, then back and forth up and down the columns.
        self.assertEqual(grid.carves, [
            (2, 0, 0, E), (3, 1, 0, E), (4, 2, 0, E), (5, 3, 0, E),
            (6, 4, 0, S), (7, 4, 1, S), (8, 4, 2, S), (9, 4, 3, S),
            (10, 4, 4, W), (11, 3, 4, N), (12, 3, 3, N), (13, 3, 2, N),
            (14, 3, 1, W), (15, 2, 1, S), (16, 2, 2, S), (17, 2, 3, S),
            (18, 2, 4, W), (19, 1, 4, N), (20, 1, 3, N), (21, 1, 2, N),
            (22, 1, 1, W), (23, 0, 1, S), (24, 0, 2, S), (25, 0, 3, S),
        ])
        self.assertEqual(list(grid.cells), [
            2, 10, 10, 10, 12,
            6, 12, 6, 12, 5,
            5, 5, 5, 5, 5,
            5, 5, 5, 5, 5,
            1, 3, 9, 3, 9,
        ])
        # Setup, 24 carves, one backtrack per stack entry, then the empty check.
        self.assertEqual(algo.step_count, 1 + 24 + 25 + 1)
        self.assertTrue(MazeAnalyzer.is_perfect(grid))

    def test_single_seed_carves_at_most_once_per_update(self):
        algo = ParallelBacktracker(seed=9, columns=6, rows=6)
        passages = 0
        for _ in algo.run():
            now = MazeAnalyzer.passage_count(algo.grid)
            self.assertIn(now - passages, (0, 1))
            passages = now

    def test_parallel_seeds_merge(self):
        algo = ParallelBacktracker("4", seed=1, columns=10, rows=10)
        self.assertEqual(algo.name, "Parallel Backtrack")
        algo.update()
        starts = [stack[0][:2] for stack in algo.stacks]
        self.assertEqual(len(set(starts)), 4)

        algo.run_all()
        self.assertEqual(len(list(algo.groups.roots())), 1)
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))
        self.assertNotIn(None, algo.owners)

    def test_too_many_seeds_for_board(self):
        with self.assertRaises(ValueError):
            ParallelBacktracker("6", seed=1, columns=2, rows=2)
        with self.assertRaises(ValueError):
            create("hexparallel", "6", seed=1, columns=2, rows=2)

class TestKruskal(unittest.TestCase):
    def test_union_find_covers_board(self):
        algo = KruskalsAlgorithm(seed=4, columns=4, rows=4)
        algo.update()
        # 4x4 board: 12 north walls and 12 west walls
        self.assertEqual(len(algo.edges), 24)

        algo.run_all()
        root = algo.find_root(0, 0)
        for x in range(4):
            for y in range(4):
                self.assertEqual(algo.find_root(x, y), root)
        self.assertEqual(algo.sets.set_size((3, 3)), 16)
        self.assertEqual(MazeAnalyzer.passage_count(algo.grid), 15)

    def test_each_update_carves_one_passage(self):
        algo = KruskalsAlgorithm(seed=4, columns=5, rows=5)
        algo.update()
        for expected in range(1, 25):
            algo.update()
            self.assertEqual(MazeAnalyzer.passage_count(algo.grid), expected)

class TestRandomWalks(unittest.TestCase):
    def test_aldous_broder_fill(self):
        algo = AldousBroder("slow", seed=2, columns=6, rows=5)
        self.assertEqual(algo.name, "Aldous-Broder")
        algo.update()
        self.assertAlmostEqual(algo.filled(), 1 / 30)
        algo.run_all()
        self.assertEqual(algo.filled(), 1.0)

    def test_aldous_broder_snapshot_is_a_copy(self):
        algo = AldousBroder(seed=2, columns=6, rows=5)
        for _ in range(20):
            algo.update()
        snapshot = algo.get_grid()
        self.assertEqual(snapshot, algo.grid)
        self.assertIsNot(snapshot, algo.grid)

    def test_one_wide_boards_finish(self):
        for cls, variant in ((AldousBroder, "fast"), (WilsonsAlgorithm, "slow")):
            with self.subTest(algorithm=cls.__name__):
                algo = cls(variant, seed=3, columns=1, rows=6)
                algo.run_all(max_updates=10_000)
                self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))

    def test_wilson_continues_from_partial_grid(self):
        grid = Grid(6, 5)
        for x in range(5):
            grid.carve(x, 0, Grid.EAST)

        algo = WilsonsAlgorithm(seed=8, columns=6, rows=5)
        algo.init_from_grid(grid)
        self.assertEqual(algo.remaining, 24)
        self.assertEqual(algo.state, WilsonsAlgorithm.State.FINDING)

        algo.run_all()
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))
        for x in range(5):
            self.assertTrue(algo.grid.has(x, 0, Grid.EAST))
        # The caller's grid is left alone.
        self.assertTrue(grid.is_empty(0, 1))

    def test_wilson_from_empty_grid_seeds_itself(self):
        algo = WilsonsAlgorithm(seed=8, columns=4, rows=4)
        algo.init_from_grid(Grid(4, 4))
        self.assertEqual(algo.phase, Phase.SETUP)
        algo.run_all()
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))

    def test_wilson_rejects_other_sizes(self):
        algo = WilsonsAlgorithm(columns=4, rows=4)
        with self.assertRaises(ValueError):
            algo.init_from_grid(Grid(5, 4))

    def test_wilson_draws_walk_arrows(self):
        algo = WilsonsAlgorithm(seed=1, columns=10, rows=10)
        for _ in range(100):
            algo.update()
            if algo.state is WilsonsAlgorithm.State.FINDING and any(v > 0 for v in algo.processing):
                break
        painter = RecordingPainter()
        algo.draw(painter)
        self.assertIn("arrow", painter.names())

class TestHouston(unittest.TestCase):
    def test_hands_over_to_wilson(self):
        algo = Houston(seed=6, columns=10, rows=8)
        # No board of its own: it shows whichever child is running.
        self.assertIs(algo.grid, algo.aldous_broder.grid)
        seen = set()
        for state in algo.run():
            seen.add(state)
            if state == "RUNNING_WILSON":
                self.assertIs(algo.grid, algo.wilson.grid)
        self.assertEqual(seen, {"RUNNING_ALDOUS_BRODER", "RUNNING_WILSON", "DONE"})
        # Aldous-Broder stopped right after passing the threshold.
        self.assertGreater(algo.aldous_broder.filled(), 0.3)
        self.assertFalse(algo.aldous_broder.is_done)
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))
        self.assertEqual(algo.path, [(0, 0)])

    def test_children_follow_seed(self):
        a = Houston(seed=6, columns=10, rows=8)
        b = Houston(seed=6, columns=10, rows=8)
        a.run_all()
        b.run_all()
        self.assertEqual(a.grid, b.grid)

class TestRowAlgorithms(unittest.TestCase):
    def test_eller_visits_every_state(self):
        algo = EllersAlgorithm(seed=5, columns=8, rows=6)
        seen = set(algo.run())
        self.assertEqual(seen, {"MERGING", "DROPPING", "NEXT_LINE", "DONE"})
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))

    def test_eller_single_row(self):
        algo = EllersAlgorithm(seed=5, columns=8, rows=1)
        algo.run_all()
        for x in range(7):
            self.assertTrue(algo.grid.has(x, 0, Grid.EAST))

    def test_sidewinder_top_row_is_a_corridor(self):
        for variant in ("easy", "hard"):
            with self.subTest(variant=variant):
                algo = Sidewinder(variant, seed=3, columns=8, rows=6)
                algo.run_all()
                for x in range(7):
                    self.assertTrue(algo.grid.has(x, 0, Grid.EAST))

    def test_sidewinder_east_probability(self):
        self.assertEqual(Sidewinder("easy", columns=10).east_probability(9), 0.5)
        hard = Sidewinder("hard", columns=10)
        self.assertAlmostEqual(hard.east_probability(0), 0.4)
        self.assertAlmostEqual(hard.east_probability(5), 0.6)

    def test_binary_tree_bias(self):
        algo = BinaryTree("random:NorthWest", seed=3, columns=8, rows=6)
        algo.run_all()
        grid = algo.grid
        for x, y in grid.coordinates():
            if (x, y) == (0, 0):
                continue
            self.assertTrue(grid.has(x, y, Grid.NORTH) or grid.has(x, y, Grid.WEST))
        # The top row can only go west, the left column only north.
        for x in range(1, 8):
            self.assertTrue(grid.has(x, 0, Grid.WEST))
        for y in range(1, 6):
            self.assertTrue(grid.has(0, y, Grid.NORTH))

    def test_binary_tree_ordered_starts_top_left(self):
        algo = BinaryTree("ordered:SouthEast", seed=3, columns=4, rows=3)
        algo.update()
        algo.update()
        self.assertFalse(algo.grid.is_empty(0, 0))
        self.assertEqual(algo.remaining[-1], (1, 0))

    def test_binary_tree_default_bias(self):
        self.assertEqual(BinaryTree("ordered").variant, "ordered:NorthWest")

class TestOriginShift(unittest.TestCase):
    def test_always_a_perfect_maze(self):
        algo = OriginShift(seed=2, columns=5, rows=4)
        self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))
        for _ in algo.run():
            self.assertTrue(MazeAnalyzer.is_perfect(algo.grid))
            if not algo.is_done:
                self.assertIsNone(algo.pointers[algo.grid.get_index(*algo.origin)])

    def test_shift_count(self):
        algo = OriginShift("2", seed=2, columns=4, rows=3)
        self.assertEqual(algo.shifts, 4 * 3 * 10 * 2)
        # Setup, every shift, then the update that notices no shifts are left
        self.assertEqual(algo.run_all(), 4 * 3 * 10 * 2 + 2)
        self.assertEqual(algo.remaining, 0)

    def test_starts_at_bottom_right(self):
        algo = OriginShift(columns=4, rows=3)
        self.assertEqual(algo.origin, (3, 2))
        self.assertTrue(algo.grid.has(0, 0, Grid.EAST))
        self.assertTrue(algo.grid.has(3, 0, Grid.SOUTH))

class TestPenrose(unittest.TestCase):
    def test_deflation_counts(self):
        kite = PenroseTiling("kite:2")
        kite.update()
        self.assertEqual(len(kite.tiles), 10)
        kite.update()
        self.assertEqual(len(kite.tiles), 30)
        kite.update()
        self.assertEqual(len(kite.tiles), 80)
        kite.update()
        self.assertTrue(kite.is_done)

        rhombus = PenroseTiling("rhombus:1")
        rhombus.run_all()
        self.assertEqual(len(rhombus.tiles), 20)

    def test_tile_cap(self):
        algo = PenroseTiling("kite:50")
        algo.run_all()
        self.assertLessEqual(len(algo.tiles), MAX_TILES)
        self.assertLess(algo.generation, 50)

    def test_zero_generations(self):
        algo = PenroseTiling("rhombus:0")
        self.assertEqual(algo.run_all(), 2)
        self.assertEqual(len(algo.tiles), 10)

    def test_not_a_maze(self):
        algo = PenroseTiling()
        self.assertIsNone(algo.grid)
        self.assertEqual(algo.variant, "kite:5")
        algo.run_all()
        self.assertEqual(algo.path, [])
        self.assertFalse(algo.move_to((0, 0)))

        painter = RecordingPainter()
        algo.draw(painter)
        self.assertEqual(painter.names(), ["triangle"] * len(algo.tiles))

if __name__ == '__main__':
    unittest.main()
