from enum import Enum
from typing import Dict, List, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS
from maze_stepper.core.disjoint_set import DisjointSet

class KruskalsAlgorithm(Generator):
    """
    Randomized Kruskal: walls are knocked down in shuffled order whenever the
    two cells they separate are not yet in the same set.
    """
    NAME = "Kruskal"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        self.edges: List[Tuple[int, int, int]] = []
        self.sets = DisjointSet()

    def find_root(self, x: int, y: int) -> Tuple[int, int]:
        return self.sets.find_root((x, y))

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            # Each interior wall once: the one to the North and the one to the West.
            for x in range(grid.width):
                for y in range(grid.height):
                    if y > 0:
                        self.edges.append((x, y, grid.NORTH))
                    if x > 0:
                        self.edges.append((x, y, grid.WEST))
            self.rng.shuffle(self.edges)
            self.state = self.State.RUNNING
            return

        while True:
            if not self.edges:
                self.finish()
                return

            x, y, dir_bit = self.edges.pop()
            nx, ny = grid.neighbor(x, y, dir_bit)
            if self.sets.union((x, y), (nx, ny)):
                grid.carve(x, y, dir_bit)
                return

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            # One colour per multi-cell set, in order of first appearance.
            palette: Dict[Tuple[int, int], int] = {}
            for x, y in self.grid.coordinates():
                if self.grid.is_empty(x, y):
                    continue
                root = self.peek_root((x, y))
                index = palette.setdefault(root, len(palette))
                painter.cell(x, y, (*COLORS[index % len(COLORS)], 128))
        painter.path(self.path)

    def peek_root(self, cell):
        # Same as find_root, minus the path compression, so drawing stays read-only.
        parents = self.sets.parents
        while parents.get(cell, cell) != cell:
            cell = parents[cell]
        return cell
