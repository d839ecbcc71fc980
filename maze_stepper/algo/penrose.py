import cmath
import math
from enum import Enum
from typing import List, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import MAX_TILES, PENROSE_COLORS

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2

# Robinson triangle kinds. For P2 these are half kites and half darts, for P3
# half thick and half thin rhombi.
WIDE = 0
NARROW = 1

# (kind, apex, left, right), vertices as complex numbers in the unit disc
Triangle = Tuple[int, complex, complex, complex]

def initial_wheel() -> List[Triangle]:
    """Ten wide triangles around the origin, mirrored in turn so neighbours share edges."""
    triangles = []
    for i in range(10):
        b = cmath.rect(1, (2 * i - 1) * math.pi / 10)
        c = cmath.rect(1, (2 * i + 1) * math.pi / 10)
        if i % 2 == 0:
            b, c = c, b
        triangles.append((WIDE, 0j, b, c))
    return triangles

def deflate_kite(triangles: List[Triangle]) -> List[Triangle]:
    result = []
    for kind, a, b, c in triangles:
        if kind == WIDE:
            q = a + (b - a) / GOLDEN_RATIO
            r = b + (c - b) / GOLDEN_RATIO
            result += [(NARROW, r, q, b), (WIDE, q, a, r), (WIDE, c, a, r)]
        else:
            p = c + (a - c) / GOLDEN_RATIO
            result += [(NARROW, b, p, a), (WIDE, p, c, b)]
    return result

def deflate_rhombus(triangles: List[Triangle]) -> List[Triangle]:
    result = []
    for kind, a, b, c in triangles:
        if kind == WIDE:
            p = a + (b - a) / GOLDEN_RATIO
            result += [(WIDE, c, p, b), (NARROW, p, c, a)]
        else:
            q = b + (a - b) / GOLDEN_RATIO
            r = b + (c - b) / GOLDEN_RATIO
            result += [(NARROW, r, c, a), (NARROW, q, r, b), (WIDE, r, q, a)]
    return result

DEFLATIONS = {
    "kite": deflate_kite,
    "rhombus": deflate_rhombus,
}

# Worst case growth of one deflation
BRANCHING = 3

class PenroseTiling(Generator):
    """
    Decorative Penrose tiling, not a maze. Starts from a wheel of Robinson
    triangles and deflates every triangle once per update.

    Variant: ``<kite|rhombus>[:<generations>]``.
    """
    NAME = "Penrose"
    DEFAULT_VARIANT = "kite:5"
    GRID = None
    PLAYABLE = False

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        tiling, _, generations = (variant or self.DEFAULT_VARIANT).partition(":")
        self.tiling = self.parse_choice(tiling, tuple(DEFLATIONS))
        self.generations = self.parse_int(generations or "5", 0)
        self.generation = 0
        self.tiles: List[Triangle] = []

    def new_grid(self):
        return None

    @property
    def name(self) -> str:
        return f"Penrose ({self.tiling})"

    @property
    def variant(self) -> str:
        return f"{self.tiling}:{self.generations}"

    def step(self):
        if self.state is self.State.SETUP:
            self.tiles = initial_wheel()
            self.state = self.State.RUNNING
            return

        if self.generation >= self.generations or len(self.tiles) * BRANCHING > MAX_TILES:
            self.finish()
            return

        self.tiles = DEFLATIONS[self.tiling](self.tiles)
        self.generation += 1
        self.log.debug(f"Generation {self.generation}: {len(self.tiles)} triangles")

    def draw(self, painter):
        for kind, a, b, c in self.tiles:
            painter.triangle((a, b, c), PENROSE_COLORS[kind])
