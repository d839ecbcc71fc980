from enum import Enum
from typing import List, Set, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, EMPTY_COLOR, LINE_WIDTH

class PrimsAlgorithm(Generator):
    NAME = "Prim"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        # Frontier: cells next to the tree that are not in it yet.
        # The list gives O(1) random choice, the set O(1) membership.
        self.frontier_list: List[Tuple[int, int]] = []
        self.frontier_set: Set[Tuple[int, int]] = set()
        self.inside = [False] * len(self.grid.cells)
        self.current = None

    def add_frontier(self, cell: Tuple[int, int]):
        if cell not in self.frontier_set:
            self.frontier_set.add(cell)
            self.frontier_list.append(cell)

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            self.add_frontier(self.random_cell())
            self.state = self.State.RUNNING
            return

        if not self.frontier_list:
            self.current = None
            self.finish()
            return

        # Pick random cell from frontier, swap remove for O(1)
        idx = self.rng.randrange(len(self.frontier_list))
        cx, cy = self.frontier_list[idx]
        self.frontier_list[idx] = self.frontier_list[-1]
        self.frontier_list.pop()
        self.frontier_set.remove((cx, cy))
        self.current = (cx, cy)

        if self.inside[cy * grid.width + cx]:
            raise RuntimeError(f"Frontier held ({cx}, {cy}) which is already in the maze")
        self.inside[cy * grid.width + cx] = True

        # Carve to ONE random neighbor already in the maze, queue the rest.
        carved = False
        for nx, ny, dir_bit in self.shuffled(grid.get_neighbors(cx, cy)):
            if self.inside[ny * grid.width + nx]:
                if not carved:
                    grid.carve(cx, cy, dir_bit)
                    carved = True
            else:
                self.add_frontier((nx, ny))

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            for x, y in self.grid.coordinates():
                if not self.inside[y * self.grid.width + x] and (x, y) not in self.frontier_set:
                    painter.cell(x, y, EMPTY_COLOR)
            for x, y in self.frontier_list:
                painter.cell(x, y, (*COLORS[1], 128))
            if self.current is not None:
                painter.cell(*self.current, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
